"""Configuration management for nlog."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .flags import DEBUG_ON, STD_FLAGS, Flag, flag_names, parse_flag_names
from .log import get_logger
from .logger import Logger, std
from .paths import get_config_path, get_log_path

log = get_logger("config")


def get_default_config() -> str:
    """Return the default config file contents."""
    return """\
# nlog configuration

# Prepended to lines written with output() directly; level calls use their own tag.
prefix = ""

# Header segments: date, time, microseconds, long_file, short_file, utc
flags = ["date", "time"]

# Emit debug-level lines
debug = false

[mirror]
# Copy every line to a file. Either an explicit path...
path = ""
# ...or a name, stored as ~/.local/state/nlog/logs/<name>.log
name = ""
# Keep the file open instead of reopening it for every line
persistent = false
"""


@dataclass
class MirrorConfig:
    """Configuration for the mirror file."""

    path: str = ""
    name: str = ""
    persistent: bool = False

    def resolve_path(self) -> Path | None:
        """The mirror file to use, or None when mirroring is off."""
        if self.path:
            return Path(self.path).expanduser()
        if self.name:
            try:
                return get_log_path(self.name)
            except ValueError as e:
                raise ConfigError(f"mirror.name: {e}") from e
        return None


@dataclass
class Config:
    """nlog configuration."""

    prefix: str = ""
    flags: Flag = STD_FLAGS
    debug: bool = False
    mirror: MirrorConfig = field(default_factory=MirrorConfig)


def load_config(config_path: Path | None = None) -> Config:
    """Read the TOML config at ``config_path`` (default: get_config_path()).

    A missing file means defaults. A file that exists but cannot be read
    or is not valid TOML is reported as a warning and also gives defaults,
    so a broken config never stops the host program from logging. Values
    of the wrong type or unknown flags are different: they raise
    ConfigError, since the file was read and says something nlog can't do.
    """
    config_path = config_path or get_config_path()
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Config()
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        log.warning("ignoring config %s: %s", config_path, e)
        return Config()
    return _parse_config(data)


def _parse_flags(value: Any) -> Flag:
    if isinstance(value, bool):
        raise ConfigError(f"flags must be a list of names or an integer, not {value!r}")
    if isinstance(value, int):
        return Flag(value)
    if isinstance(value, str):
        value = value.split("|")
    try:
        return parse_flag_names(list(value))
    except (KeyError, TypeError, AttributeError) as e:
        known = ", ".join(f.name.lower() for f in Flag)
        raise ConfigError(f"invalid flags {value!r} (known flags: {known})") from e


def _typed(data: dict[str, Any], key: str, kind: type, default: Any, section: str = "") -> Any:
    """``data[key]`` if it is a ``kind``, ``default`` when missing."""
    value = data.get(key, default)
    # bool is an int subclass, but no field here accepts one for the other
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        name = f"{section}.{key}" if section else key
        raise ConfigError(f"{name} must be a {kind.__name__}, not {value!r}")
    return value


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse config dict into Config object.

    Raises:
        ConfigError: for unknown flag names or values of the wrong type
    """
    mirror_data = _typed(data, "mirror", dict, {})
    mirror = MirrorConfig(
        path=_typed(mirror_data, "path", str, "", "mirror"),
        name=_typed(mirror_data, "name", str, "", "mirror"),
        persistent=_typed(mirror_data, "persistent", bool, False, "mirror"),
    )

    return Config(
        prefix=_typed(data, "prefix", str, ""),
        flags=_parse_flags(data.get("flags", flag_names(STD_FLAGS))),
        debug=_typed(data, "debug", bool, False),
        mirror=mirror,
    )


def apply_config(config: Config, logger: Logger | None = None) -> Logger:
    """Configure ``logger`` (the default logger if None) from ``config``."""
    if logger is None:
        logger = std
    logger.set_prefix(config.prefix)
    logger.set_flags(config.flags)
    logger.set_debug_flags(DEBUG_ON if config.debug else 0)
    logger.set_mirror_path(config.mirror.resolve_path(), config.mirror.persistent)
    return logger


def ensure_config_exists() -> Path:
    """Ensure the config file exists, creating with defaults if needed."""
    config_path = get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(get_default_config())

    return config_path
