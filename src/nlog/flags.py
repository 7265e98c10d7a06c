"""Header flags, the debug gate and the level tags."""

from enum import Enum, IntFlag


class Flag(IntFlag):
    """Selects the header segments rendered in front of every line."""

    DATE = 1  # the date in the local time zone: 2009/01/23
    TIME = 2  # the time in the local time zone: 01:23:23
    MICROSECONDS = 4  # microsecond resolution: 01:23:23.123123. assumes TIME.
    LONG_FILE = 8  # full file name and line number: /a/b/c/d.py:23
    SHORT_FILE = 16  # final file name element and line number: d.py:23. overrides LONG_FILE
    UTC = 32  # if DATE or TIME is set, use UTC rather than the local time zone


STD_FLAGS = Flag.DATE | Flag.TIME

# Not a header flag: value of the debug gate that lets debug lines through.
DEBUG_ON = 1


class Level(Enum):
    INFO = "[INFO]"
    DEBUG = "[DEBUG]"
    ERROR = "[ERROR]"
    FATAL = "[FATAL]"


def flag_names(flags: int) -> list[str]:
    """Lower-case names of the flags set in ``flags`` (e.g. ["date", "time"])."""
    return [f.name.lower() for f in Flag if flags & f]


def parse_flag_names(names: list[str]) -> Flag:
    """Combine flag names like "date" or "short_file" into a Flag value.

    Raises:
        KeyError: for a name that is not a Flag member
    """
    flags = Flag(0)
    for name in names:
        flags |= Flag[name.strip().upper().replace("-", "_")]
    return flags
