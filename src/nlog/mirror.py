"""Mirror files: a second destination receiving a copy of every line.

ReopeningMirror opens, writes and closes the file for each line, so no
descriptor outlives a call. PersistentMirror keeps one handle open behind
its own lock for loggers that write a lot.

A file that cannot be opened raises MirrorOpenError; failures after the
open surface as plain OSError.
"""

import threading
from pathlib import Path
from typing import IO, Protocol

from .errors import MirrorOpenError

# create/append/read-write
_MODE = "a+b"


def _open(path: Path) -> IO[bytes]:
    try:
        return open(path, _MODE)
    except OSError as e:
        raise MirrorOpenError(f"error opening file {str(path)!r}: {e}") from e


class Mirror(Protocol):
    path: Path

    def write(self, data: bytes) -> None: ...

    def close(self) -> None: ...


class ReopeningMirror:
    """Mirror that reopens the file on every write."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def write(self, data: bytes) -> None:
        with _open(self.path) as f:
            f.write(data)

    def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"ReopeningMirror({str(self.path)!r})"


class PersistentMirror:
    """Mirror holding one open handle, opened lazily on first write.

    After close() the handle is never reopened: a logger still holding the
    mirror (one that inherited it just before it was replaced) gets its
    remaining lines written with a one-off open, like ReopeningMirror.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._file: IO[bytes] | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: bytes) -> None:
        with self._lock:
            if self._closed:
                with _open(self.path) as f:
                    f.write(data)
                return
            if self._file is None:
                self._file = _open(self.path)
            self._file.write(data)
            self._file.flush()

    def close(self) -> None:
        with self._lock:
            self._closed = True
            if self._file is not None:
                self._file.close()
                self._file = None

    def __repr__(self) -> str:
        return f"PersistentMirror({str(self.path)!r})"


def open_mirror(path: str | Path, persistent: bool = False) -> Mirror:
    if persistent:
        return PersistentMirror(path)
    return ReopeningMirror(path)
