"""Diagnostics logging for nlog itself.

Problems inside the package (unreadable config, failing mirror file) are
reported through Python's logging module on stderr, never through the
lines nlog emits. Filter with: grep 'nlog.' on stderr.
"""

import logging
import sys

_handler = logging.StreamHandler(sys.stderr)
_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(message)s", datefmt="%H:%M:%S"))

_root = logging.getLogger("nlog")
_root.addHandler(_handler)
_root.setLevel(logging.WARNING)
# don't propagate to root logger (avoids duplicate output if the host
# application configures the root logger)
_root.propagate = False


def get_logger(name: str) -> logging.Logger:
    return _root.getChild(name)
