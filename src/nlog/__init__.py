"""Leveled line logging with date/time/caller headers and an optional mirror file."""

from .config import Config, MirrorConfig, apply_config, load_config
from .console import ConsoleSink
from .errors import ConfigError, MirrorOpenError, NlogError, SinkWriteError
from .flags import DEBUG_ON, STD_FLAGS, Flag, Level
from .header import format_header, itoa, sprint
from .logger import (
    Logger,
    debug,
    error,
    fatal,
    get_flags,
    info,
    output,
    reset,
    set_debug_flags,
    set_file_path,
    set_flags,
    set_output,
    set_prefix,
    std,
)
from .mirror import PersistentMirror, ReopeningMirror

__all__ = [
    "DEBUG_ON",
    "STD_FLAGS",
    "Config",
    "ConfigError",
    "ConsoleSink",
    "Flag",
    "Level",
    "Logger",
    "MirrorConfig",
    "MirrorOpenError",
    "NlogError",
    "PersistentMirror",
    "ReopeningMirror",
    "SinkWriteError",
    "apply_config",
    "debug",
    "error",
    "fatal",
    "format_header",
    "get_flags",
    "info",
    "itoa",
    "load_config",
    "output",
    "reset",
    "set_debug_flags",
    "set_file_path",
    "set_flags",
    "set_output",
    "set_prefix",
    "sprint",
    "std",
]
