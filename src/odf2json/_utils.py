"""Line splitting, comment stripping and JSON string escaping utilities."""

from __future__ import annotations

import json
import re

from odf2json._constants import COMMENT_MARKERS, KEY_VALUE_SEPARATOR

LINE_SPLIT_RE = re.compile(r"\r\n|\n")

# Partial match of the .NET JavaScript string encoder: it also writes ' as
# \u0027, which is intentionally not reproduced.
_DOTNET_ESCAPES: dict[str, str] = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}


def split_lines(text: str) -> list[str]:
    """Split file text on ``\\r\\n`` or ``\\n``.

    A lone ``\\r`` is not a line break. Lines are returned untrimmed so
    error messages can quote them as they appear in the source.
    """
    return LINE_SPLIT_RE.split(text)


def escape_json_string(value: str | None) -> str:
    """Escape a string for use between the quotes of a JSON string.

    Control characters, quotes and backslashes are escaped, all non-ASCII
    characters become ``\\uXXXX`` sequences and ``<``, ``>``, ``&`` are
    emitted as unicode escapes. ``None`` encodes as the empty string.
    """
    if not value:
        return ""
    escaped = json.dumps(value, ensure_ascii=True)[1:-1]
    for ch, replacement in _DOTNET_ESCAPES.items():
        escaped = escaped.replace(ch, replacement)
    return escaped


def find_trailing_comment(line: str) -> int:
    """Return the index where a trailing comment starts, or -1.

    The first ``;`` wins; ``//`` is only considered when the line has no ``;``.
    """
    for marker in COMMENT_MARKERS:
        index = line.find(marker)
        if index > -1:
            return index
    return -1


def strip_trailing_comment(line: str) -> tuple[str, str | None]:
    """Split a line into (content, comment).

    The content is stripped of surrounding whitespace. The comment is the
    text from the comment marker to the end of the line, or None.
    """
    index = find_trailing_comment(line)
    if index < 0:
        return line, None
    return line[:index].strip(), line[index:]


def split_key_value(line: str) -> tuple[str, str, int]:
    """Split a key/value line on the first ``=``.

    Returns (key, value, part_count) where ``part_count`` is the number of
    ``=``-separated parts in the whole line. A line without ``=`` yields an
    empty value; with more than one ``=`` the value keeps everything after
    the first separator.
    """
    part_count = line.count(KEY_VALUE_SEPARATOR) + 1
    key, _, value = line.partition(KEY_VALUE_SEPARATOR)
    return key.strip(), value.strip(), part_count
