"""Where nlog looks for its config file and keeps named mirror logs.

Both follow the XDG base directory variables when they are set to an
absolute path, and fall back to ~/.config and ~/.local/state otherwise.
"""

import os
from pathlib import Path

CONFIG_ENV = "NLOG_CONFIG"


def _xdg_dir(env: str, *fallback: str) -> Path:
    value = os.environ.get(env, "")
    # relative values are invalid per the XDG spec and ignored
    if value and os.path.isabs(value):
        return Path(value)
    return Path.home().joinpath(*fallback)


def get_config_path() -> Path:
    """$NLOG_CONFIG if set, else $XDG_CONFIG_HOME/nlog/config.toml."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return _xdg_dir("XDG_CONFIG_HOME", ".config") / "nlog" / "config.toml"


def get_log_path(name: str) -> Path:
    """Path of the mirror log called ``name``, creating its directory.

    Lives in $XDG_STATE_HOME/nlog/logs/{name}.log. Names may not contain
    path separators.
    """
    if not name or os.sep in name or (os.altsep and os.altsep in name) or name in (".", ".."):
        raise ValueError(f"invalid mirror log name: {name!r}")
    log_dir = _xdg_dir("XDG_STATE_HOME", ".local", "state") / "nlog" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"{name}.log"
