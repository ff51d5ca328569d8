"""Line classification for ODF files."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from odf2json._constants import (
    COMMENT_MARKERS,
    NOISE_PREFIXES,
    SECTION_CLOSE,
    SECTION_OPEN,
)
from odf2json._errors import ERR_MSG_INVALID_SECTION, InvalidFormatError
from odf2json._utils import split_key_value, strip_trailing_comment


class LineKind(enum.StrEnum):
    BLANK = "blank"
    IGNORED = "ignored"
    COMMENT = "comment"
    SECTION = "section"
    PAIR = "pair"


@dataclass(frozen=True)
class ClassifiedLine:
    """One source line and what the encoder should do with it."""

    kind: LineKind
    raw: str
    key: str = ""
    value: str = ""
    section: str = ""
    comment: str | None = None
    part_count: int = 0

    @property
    def is_malformed_pair(self) -> bool:
        return self.kind is LineKind.PAIR and self.part_count != 2


class LineClassifier:
    """Classifies single ODF lines.

    Noise prefixes are matched case-insensitively against the start of the
    trimmed line. An empty prefix collection disables noise filtering.
    """

    def __init__(self, noise_prefixes: Iterable[str] = NOISE_PREFIXES) -> None:
        self._noise_prefixes = tuple(p.lower() for p in noise_prefixes if p)

    @property
    def noise_prefixes(self) -> tuple[str, ...]:
        return self._noise_prefixes

    def is_noise(self, line: str) -> bool:
        if not self._noise_prefixes:
            return False
        return line.lower().startswith(self._noise_prefixes)

    def classify(self, raw: str) -> ClassifiedLine:
        """Classify one raw (untrimmed) line.

        Raises:
            InvalidFormatError: If a section header is not closed by ``]``.
        """
        line = raw.strip()

        if not line:
            return ClassifiedLine(LineKind.BLANK, raw)

        if self.is_noise(line):
            return ClassifiedLine(LineKind.IGNORED, raw)

        if line.startswith(COMMENT_MARKERS):
            return ClassifiedLine(LineKind.COMMENT, raw, comment=line)

        if line.startswith(SECTION_OPEN):
            text, comment = strip_trailing_comment(line)
            if not text.endswith(SECTION_CLOSE):
                raise InvalidFormatError(
                    f'{ERR_MSG_INVALID_SECTION}: "{raw}"',
                    f"section header {raw!r} is missing a closing '{SECTION_CLOSE}'",
                    line=raw,
                )
            return ClassifiedLine(
                LineKind.SECTION,
                raw,
                section=text[1:-1].strip(),
                comment=comment,
            )

        text, comment = strip_trailing_comment(line)
        key, value, part_count = split_key_value(text)
        return ClassifiedLine(
            LineKind.PAIR,
            raw,
            key=key,
            value=value,
            comment=comment,
            part_count=part_count,
        )
