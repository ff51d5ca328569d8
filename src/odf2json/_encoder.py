"""Streaming ODF-to-JSON encoder."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from odf2json._classifier import ClassifiedLine, LineClassifier, LineKind
from odf2json._constants import COMMENT_KEY_PREFIX, EOL_COMMENT_SUFFIX
from odf2json._emitter import JsonEmitter
from odf2json._errors import ERR_MSG_INVALID_KEY_VALUE, InvalidFormatError
from odf2json._utils import split_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable problem found while encoding a file."""

    file_name: str
    line_number: int
    line: str
    message: str


class Encoder:
    """Encodes ODF file text into a JSON object fragment, line by line."""

    def __init__(
        self,
        classifier: LineClassifier | None = None,
        *,
        preserve_comments: bool = False,
    ) -> None:
        self._classifier = classifier or LineClassifier()
        self._preserve_comments = preserve_comments
        self._emitter = JsonEmitter()
        self._comment_index = 0
        self._file_name = ""
        self._diagnostics: list[Diagnostic] = []

    @property
    def result(self) -> str:
        return self._emitter.result

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    def encode(self, file_name: str, raw_text: str, *, is_last_file: bool = True) -> str:
        """Encode one file and return its ``"<file_name>":{...}`` fragment.

        A trailing comma follows the fragment unless ``is_last_file`` is set.

        Raises:
            InvalidFormatError: If a section header is not terminated.
        """
        self._emitter = JsonEmitter()
        self._comment_index = 0
        self._file_name = file_name
        self._diagnostics = []

        self._emitter.open_file(file_name)
        for line_number, raw in enumerate(split_lines(raw_text or ""), start=1):
            try:
                line = self._classifier.classify(raw)
            except InvalidFormatError as e:
                e.file_name = file_name
                e.line_number = line_number
                e.internal_details = f"{file_name}:{line_number}: {e.internal_details}"
                raise
            self._handle(line, line_number)
        self._emitter.close_file(is_last_file)

        logger.debug("encoded %s (%d warnings)", file_name, len(self._diagnostics))
        return self._emitter.result

    def _handle(self, line: ClassifiedLine, line_number: int) -> None:
        if line.kind is LineKind.COMMENT:
            self._add_comment(line.comment)
        elif line.kind is LineKind.SECTION:
            self._emitter.open_section(line.section)
            self._comment_index = 0
            self._add_comment(line.comment, eol=True)
        elif line.kind is LineKind.PAIR:
            if line.is_malformed_pair:
                self._warn(line, line_number, ERR_MSG_INVALID_KEY_VALUE)
            self._emitter.write_entry(line.key, line.value)
            self._add_comment(line.comment, eol=True)

    def _add_comment(self, comment: str | None, eol: bool = False) -> None:
        if comment is None or not self._preserve_comments:
            return
        self._comment_index += 1
        key = f"{COMMENT_KEY_PREFIX}{self._comment_index}"
        if eol:
            key += EOL_COMMENT_SUFFIX
        self._emitter.write_entry(key, comment.strip())

    def _warn(self, line: ClassifiedLine, line_number: int, message: str) -> None:
        self._diagnostics.append(
            Diagnostic(self._file_name, line_number, line.raw, message)
        )
        logger.warning("%s:%d: %s: %r", self._file_name, line_number, message, line.raw.strip())
