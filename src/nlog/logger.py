"""The Logger engine and the package-level API around a default instance.

A Logger renders ``<prefix><date><time><file:line: ><message>\\n`` and
writes it to its sink, copying every line to a mirror file when one is
configured. Each level call passes its tag straight into ``output`` so
concurrent calls at different levels never see each other's prefix.

Usage:
    import nlog

    log = nlog.Logger(sys.stdout, "", nlog.Flag.DATE | nlog.Flag.SHORT_FILE)
    log.info("started", 3, "workers")

    nlog.set_file_path("/var/log/app.log")
    nlog.error("disk full")
"""

from __future__ import annotations

import io
import sys
import threading
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from .errors import MirrorOpenError, SinkWriteError, terminate
from .flags import DEBUG_ON, STD_FLAGS, Flag, Level
from .header import format_header, sprint
from .log import get_logger
from .mirror import Mirror, open_mirror

log = get_logger("logger")

_FILE_FLAGS = Flag.SHORT_FILE | Flag.LONG_FILE


def _now() -> datetime:
    return datetime.now().astimezone()


def _caller(calldepth: int) -> tuple[str, int]:
    """File and line ``calldepth`` frames above our caller."""
    try:
        frame = sys._getframe(calldepth + 1)
    except ValueError:
        return "???", 0
    return frame.f_code.co_filename, frame.f_lineno


def _write(out: Any, data: bytes) -> None:
    """Write ``data`` to the sink and flush it.

    A write() reporting fewer characters or bytes than it was given is a
    short write and raises OSError.
    """
    payload: str | bytes = data
    if isinstance(out, io.TextIOBase):
        payload = data.decode("utf-8", errors="replace")
    n = out.write(payload)
    if isinstance(n, int) and n < len(payload):
        raise OSError(f"short write: {n} of {len(payload)}")
    # lines must reach the sink before a fatal exit skips interpreter cleanup
    flush = getattr(out, "flush", None)
    if flush is not None:
        flush()


class Logger:
    """A leveled line logger writing to one sink and an optional mirror file.

    Args:
        out: Destination for lines. Text streams (sys.stderr, StringIO) get
            str, anything else with a write() method gets bytes.
        prefix: Prepended to lines written with ``output`` directly.
        flags: Header segments to render, see Flag.
        clock: Returns the timestamp for each line; defaults to local now.
        inherit_mirror: Without a mirror of its own, copy lines to the
            mirror file configured on the default logger.
    """

    def __init__(
        self,
        out: Any,
        prefix: str = "",
        flags: int = STD_FLAGS,
        *,
        clock: Callable[[], datetime] | None = None,
        inherit_mirror: bool = True,
    ):
        self._mu = threading.Lock()
        self._out = out
        self._prefix = prefix
        self._flags = Flag(flags)
        self._debug_flags = 0
        self._buf = bytearray()
        self._mirror: Mirror | None = None
        self._inherit_mirror = inherit_mirror
        self._clock = clock or _now

    def __repr__(self) -> str:
        return f"Logger(prefix={self._prefix!r}, flags={self._flags!r}, mirror={self._mirror!r})"

    # --- Configuration ---

    def set_output(self, out: Any) -> None:
        with self._mu:
            self._out = out

    def set_flags(self, flags: int) -> None:
        with self._mu:
            self._flags = Flag(flags)

    @property
    def flags(self) -> Flag:
        with self._mu:
            return self._flags

    def set_prefix(self, prefix: str) -> None:
        with self._mu:
            self._prefix = prefix

    @property
    def prefix(self) -> str:
        with self._mu:
            return self._prefix

    def set_debug_flags(self, debug_flags: int) -> None:
        """Set the debug gate; DEBUG_ON (1) lets debug lines through."""
        with self._mu:
            self._debug_flags = debug_flags

    @property
    def debug_flags(self) -> int:
        with self._mu:
            return self._debug_flags

    def set_mirror_path(self, path: str | Path | None, persistent: bool = False) -> None:
        """Copy every line to ``path`` as well; None or "" stops mirroring.

        By default the file is reopened for each line. ``persistent=True``
        keeps one handle open until the mirror is replaced or cleared.
        """
        with self._mu:
            old = self._mirror
            self._mirror = open_mirror(path, persistent) if path else None
        if old is not None:
            old.close()

    @property
    def mirror(self) -> Mirror | None:
        with self._mu:
            return self._mirror

    @property
    def mirror_path(self) -> Path | None:
        mirror = self.mirror
        return mirror.path if mirror is not None else None

    def _resolve_mirror(self) -> Mirror | None:
        # called with self._mu held; std never takes another logger's lock
        if self._mirror is not None or not self._inherit_mirror or self is std:
            return self._mirror
        return std.mirror

    # --- Write path ---

    def output(self, calldepth: int, s: str, prefix: str | None = None) -> None:
        """Write one line.

        ``calldepth`` counts frames above this call for the file:line
        segment: 1 is whoever called ``output``. ``prefix`` replaces the
        logger's own prefix for this line only.

        Raises:
            SinkWriteError: if the sink write failed. The mirror copy has
                already been attempted at that point.
        """
        now = self._clock()
        file, line = "", 0
        self._mu.acquire()
        try:
            flags = self._flags
            if prefix is None:
                prefix = self._prefix
            out = self._out
            mirror = self._resolve_mirror()
            if flags & _FILE_FLAGS:
                # release lock while getting caller info - it's expensive.
                self._mu.release()
                try:
                    file, line = _caller(calldepth)
                finally:
                    self._mu.acquire()

            buf = self._buf
            buf.clear()
            format_header(buf, prefix, now, file, line, flags)
            buf += s.encode(errors="backslashreplace")
            if not s.endswith("\n"):
                buf += b"\n"
            data = bytes(buf)

            err = None
            try:
                _write(out, data)
            except (OSError, ValueError) as e:
                err = e
            if mirror is not None:
                _write_mirror(mirror, data)
        finally:
            self._mu.release()

        if err is not None:
            raise SinkWriteError(f"writing log line: {err}") from err

    # --- Levels ---

    def info(self, *args: object) -> None:
        self.output(2, sprint(*args), prefix=Level.INFO.value)

    def debug(self, *args: object) -> None:
        """Like info, but only when the debug gate is DEBUG_ON."""
        if self.debug_flags != DEBUG_ON:
            return
        self.output(2, sprint(*args), prefix=Level.DEBUG.value)

    def error(self, *args: object) -> None:
        self.output(2, sprint(*args), prefix=Level.ERROR.value)

    def fatal(self, *args: object) -> None:
        """Write the line, then exit with status 1 whether or not it was written."""
        try:
            self.output(2, sprint(*args), prefix=Level.FATAL.value)
        finally:
            terminate(1)


def _write_mirror(mirror: Mirror, data: bytes) -> None:
    try:
        mirror.write(data)
    except MirrorOpenError as e:
        log.critical("%s", e)
        terminate(1)
    except OSError as e:
        log.warning("error writing mirror file %s: %s", mirror.path, e)


# The default logger used by the module-level functions.
std = Logger(sys.stderr, "", STD_FLAGS)


def reset() -> None:
    """Restore the default logger to its initial configuration."""
    std.set_output(sys.stderr)
    std.set_prefix("")
    std.set_flags(STD_FLAGS)
    std.set_debug_flags(0)
    std.set_mirror_path(None)


def set_output(out: Any) -> None:
    std.set_output(out)


def set_flags(flags: int) -> None:
    std.set_flags(flags)


def get_flags() -> Flag:
    return std.flags


def set_prefix(prefix: str) -> None:
    std.set_prefix(prefix)


def set_debug_flags(debug_flags: int) -> None:
    std.set_debug_flags(debug_flags)


def set_file_path(path: str | Path | None, persistent: bool = False) -> Logger:
    """Mirror lines to ``path``, for the default logger and those inheriting its mirror."""
    std.set_mirror_path(path, persistent)
    return std


def output(calldepth: int, s: str) -> None:
    std.output(calldepth + 1, s)


def info(*args: object) -> None:
    std.output(2, sprint(*args), prefix=Level.INFO.value)


def debug(*args: object) -> None:
    if std.debug_flags != DEBUG_ON:
        return
    std.output(2, sprint(*args), prefix=Level.DEBUG.value)


def error(*args: object) -> None:
    std.output(2, sprint(*args), prefix=Level.ERROR.value)


def fatal(*args: object) -> None:
    try:
        std.output(2, sprint(*args), prefix=Level.FATAL.value)
    finally:
        terminate(1)
