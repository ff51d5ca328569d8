"""Locating and reading ODF files on disk."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from odf2json._constants import DEFAULT_ENCODING, DEFAULT_FILE_PATTERN
from odf2json._errors import ERR_MSG_DISCOVERY_FAILED, DiscoveryError
from odf2json.profile import Profile

logger = logging.getLogger(__name__)


def find_odf_files(
    roots: Iterable[str | Path],
    *,
    pattern: str = DEFAULT_FILE_PATTERN,
    profile: Profile | None = None,
) -> list[Path]:
    """Recursively find files matching ``pattern`` under each root.

    A root that is itself a file is taken as-is (still subject to the
    profile filter). Results are sorted within each root and keep root order.

    Raises:
        DiscoveryError: If a root does not exist.
    """
    found: list[Path] = []
    for root in roots:
        path = Path(root)
        if path.is_file():
            candidates = [path]
        elif path.is_dir():
            candidates = sorted(p for p in path.rglob(pattern) if p.is_file())
        else:
            raise DiscoveryError(
                ERR_MSG_DISCOVERY_FAILED,
                f"search root {str(path)!r} does not exist",
            )
        if profile is not None:
            candidates = [p for p in candidates if profile.matches(p.name)]
        logger.debug("%s: %d matching files", path, len(candidates))
        found.extend(candidates)
    return found


def read_odf_files(
    paths: Iterable[Path], *, encoding: str = DEFAULT_ENCODING
) -> list[tuple[str, str]]:
    """Read files into ``(file name, text)`` pairs.

    Line endings are left untouched. Undecodable bytes are replaced.

    Raises:
        DiscoveryError: If a file cannot be read.
    """
    pairs: list[tuple[str, str]] = []
    for path in paths:
        try:
            data = path.read_bytes()
        except OSError as e:
            raise DiscoveryError(
                ERR_MSG_DISCOVERY_FAILED,
                f"cannot read {str(path)!r}: {e}",
                wrapped=e,
            ) from e
        pairs.append((path.name, data.decode(encoding, errors="replace")))
    return pairs
