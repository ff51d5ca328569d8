"""Line markers, reserved keys and default filtering data for ODF conversion."""

NOISE_PREFIXES: tuple[str, ...] = (
    "light",
    "effect",
    "anim",
    "render",
    "ainame",
    "geometry",
    "texture",
    "start",
    "end",
    "sound",
    "finish",
    "emit",
    "clear",
    "damage",
    "lod",
    "terrain",
    "info",
    "collision",
    "always",
    "ambeintsound",
    "justflat",
    "detect",
    "trail",
    "rotationrate",
    "maxdist",
    "maxradii",
    "posroll",
    "simulatebase",
    "lifetime",
    "tunnel",
    "staywith",
    "runanim",
    "panel",
    "cockpit",
    "usecollision",
)
"""Key prefixes (lowercase) whose lines are dropped from the JSON output."""

COMMENT_MARKERS: tuple[str, ...] = (";", "//")
"""Markers that start a comment, in trailing-comment search order."""

SECTION_OPEN = "["
SECTION_CLOSE = "]"
KEY_VALUE_SEPARATOR = "="

COMMENT_KEY_PREFIX = "@c"
"""Reserved key prefix for preserved comments (``@c1``, ``@c2``, ...)."""

EOL_COMMENT_SUFFIX = "eol"
"""Suffix appended to the key of a trailing (end-of-line) comment."""

DEFAULT_FILE_PATTERN = "*.odf"
DEFAULT_ENCODING = "utf-8-sig"
