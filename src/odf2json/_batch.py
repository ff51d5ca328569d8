"""Assembly of several file fragments into one JSON document."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from odf2json._classifier import LineClassifier
from odf2json._encoder import Diagnostic, Encoder
from odf2json._errors import InvalidFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchResult:
    """Result of converting a batch of ODF files."""

    json: str
    files: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


@dataclass
class _Outcome:
    index: int
    name: str
    text: str
    fragment: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)


def encode_batch(
    files: Iterable[tuple[str, str]],
    *,
    classifier: LineClassifier | None = None,
    preserve_comments: bool = False,
    skip_invalid: bool = False,
    max_workers: int | None = None,
) -> BatchResult:
    """Encode ``(file_name, raw_text)`` pairs into a single JSON document.

    Fragments keep input order. Every fragment but the last is followed by a
    comma. With ``skip_invalid`` a file whose section headers are malformed
    is left out and the last successfully encoded file closes the document.

    Raises:
        InvalidFormatError: If a file is malformed and ``skip_invalid`` is False.
    """
    classifier = classifier or LineClassifier()
    items = list(files)
    last_index = len(items) - 1

    def run(outcome: _Outcome) -> _Outcome:
        encoder = Encoder(classifier, preserve_comments=preserve_comments)
        try:
            outcome.fragment = encoder.encode(
                outcome.name, outcome.text, is_last_file=outcome.index == last_index
            )
        except InvalidFormatError as e:
            if not skip_invalid:
                raise
            logger.warning("skipping %s: %s", outcome.name, e.internal())
            return outcome
        outcome.diagnostics = encoder.diagnostics
        return outcome

    pending = [_Outcome(i, name, text) for i, (name, text) in enumerate(items)]
    if max_workers is not None and max_workers > 1 and len(pending) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            outcomes = list(pool.map(run, pending))
    else:
        outcomes = [run(outcome) for outcome in pending]

    encoded = [o for o in outcomes if o.fragment is not None]
    if encoded and encoded[-1].index != last_index:
        # The real last file was skipped; close the document on this one.
        tail = encoded[-1]
        tail.fragment = Encoder(classifier, preserve_comments=preserve_comments).encode(
            tail.name, tail.text, is_last_file=True
        )

    parts = ["{"]
    for outcome in encoded:
        parts.append(outcome.fragment)
        parts.append("\n")
    parts.append("}")

    return BatchResult(
        json="".join(parts),
        files=[o.name for o in encoded],
        skipped=[o.name for o in outcomes if o.fragment is None],
        diagnostics=[d for o in encoded for d in o.diagnostics],
    )
