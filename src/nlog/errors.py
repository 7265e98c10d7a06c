"""Exceptions raised by nlog and the process-termination helper."""

import os
import sys
import threading


class NlogError(Exception):
    """Base class for nlog errors."""


class SinkWriteError(NlogError):
    """Writing a line to the primary sink failed.

    The logger stays usable afterwards; the next call tries again.
    """


class MirrorOpenError(NlogError):
    """The mirror file could not be opened."""


class ConfigError(NlogError):
    """A configuration value could not be understood."""


def terminate(status: int = 1) -> None:
    """Stop the whole process with ``status``.

    On the main thread this raises SystemExit as usual. Elsewhere SystemExit
    would only end the calling thread, so the process is stopped directly.
    """
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            try:
                stream.flush()
            except (OSError, ValueError):
                pass  # closed or broken stream, nothing left to flush
    if threading.current_thread() is threading.main_thread():
        sys.exit(status)
    os._exit(status)
