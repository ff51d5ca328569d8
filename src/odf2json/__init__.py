"""odf2json - Convert INI-like ODF game object files to JSON."""

from __future__ import annotations

try:
    from odf2json._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from collections.abc import Iterable

from odf2json._batch import BatchResult
from odf2json._batch import encode_batch as _encode_batch
from odf2json._classifier import ClassifiedLine, LineClassifier, LineKind
from odf2json._constants import NOISE_PREFIXES
from odf2json._encoder import Diagnostic, Encoder
from odf2json._errors import ConversionError, DiscoveryError, InvalidFormatError
from odf2json.profile import Profile, get_profile

__all__ = [
    "encode",
    "encode_batch",
    "BatchResult",
    "ClassifiedLine",
    "Diagnostic",
    "Encoder",
    "LineClassifier",
    "LineKind",
    "NOISE_PREFIXES",
    "Profile",
    "get_profile",
    "ConversionError",
    "DiscoveryError",
    "InvalidFormatError",
]


def _classifier(filter_noise: bool, noise_prefixes: Iterable[str] | None) -> LineClassifier:
    if not filter_noise:
        return LineClassifier(())
    if noise_prefixes is None:
        return LineClassifier()
    return LineClassifier(noise_prefixes)


def encode(
    file_name: str,
    raw_text: str,
    *,
    preserve_comments: bool = False,
    is_last_file: bool = True,
    filter_noise: bool = True,
    noise_prefixes: Iterable[str] | None = None,
) -> str:
    """Convert one ODF file's text into a ``"<file_name>":{...}`` JSON fragment.

    Args:
        file_name: Key for the file object in the output document.
        raw_text: The file contents.
        preserve_comments: If True, emit comments as ``@cN`` / ``@cNeol`` keys.
        is_last_file: If False, a comma follows the fragment so another file
            can be appended in the same document.
        filter_noise: If False, keep lines that start with a noise prefix.
        noise_prefixes: Replacement noise prefix list. Defaults to
            :data:`NOISE_PREFIXES`.

    Returns:
        The JSON fragment text.

    Raises:
        InvalidFormatError: If a section header is missing its closing ``]``.
    """
    encoder = Encoder(
        _classifier(filter_noise, noise_prefixes),
        preserve_comments=preserve_comments,
    )
    return encoder.encode(file_name, raw_text, is_last_file=is_last_file)


def encode_batch(
    files: Iterable[tuple[str, str]],
    *,
    preserve_comments: bool = False,
    filter_noise: bool = True,
    noise_prefixes: Iterable[str] | None = None,
    skip_invalid: bool = False,
    max_workers: int | None = None,
) -> BatchResult:
    """Convert ``(file_name, raw_text)`` pairs into one JSON document.

    Args:
        files: Files in output order.
        preserve_comments: If True, emit comments as ``@cN`` / ``@cNeol`` keys.
        filter_noise: If False, keep lines that start with a noise prefix.
        noise_prefixes: Replacement noise prefix list.
        skip_invalid: If True, leave out files with malformed section headers
            instead of raising.
        max_workers: Encode files on a thread pool of this size.

    Returns:
        BatchResult with the document text, encoded and skipped file names
        and any key/value diagnostics.

    Raises:
        InvalidFormatError: If a file is malformed and skip_invalid is False.
    """
    return _encode_batch(
        files,
        classifier=_classifier(filter_noise, noise_prefixes),
        preserve_comments=preserve_comments,
        skip_invalid=skip_invalid,
        max_workers=max_workers,
    )
