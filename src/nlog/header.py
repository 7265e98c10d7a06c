"""Rendering of the line header.

Everything here appends to a caller-owned ``bytearray`` and keeps no state.
"""

import os
from datetime import datetime, timezone

from .flags import Flag


def itoa(buf: bytearray, i: int, wid: int) -> None:
    """Append the decimal form of non-negative ``i`` to ``buf``.

    The result is left-padded with zeros to at least ``wid`` digits;
    ``wid`` of 1 or less (conventionally -1) means no padding.
    """
    # assemble in reverse order
    digits = bytearray()
    while i >= 10 or wid > 1:
        wid -= 1
        i, r = divmod(i, 10)
        digits.append(ord("0") + r)
    digits.append(ord("0") + i)
    digits.reverse()
    buf += digits


def format_header(
    buf: bytearray, prefix: str, t: datetime, file: str, line: int, flags: int
) -> None:
    """Append ``<prefix><date><time><file:line: >`` to ``buf``.

    Segments whose flag is not set are left out entirely.
    """
    buf += prefix.encode(errors="backslashreplace")
    if flags & Flag.UTC:
        t = t.astimezone(timezone.utc)
    if flags & Flag.DATE:
        itoa(buf, t.year, 4)
        buf += b"/"
        itoa(buf, t.month, 2)
        buf += b"/"
        itoa(buf, t.day, 2)
        buf += b" "
    if flags & (Flag.TIME | Flag.MICROSECONDS):
        itoa(buf, t.hour, 2)
        buf += b":"
        itoa(buf, t.minute, 2)
        buf += b":"
        itoa(buf, t.second, 2)
        if flags & Flag.MICROSECONDS:
            buf += b"."
            itoa(buf, t.microsecond, 6)
        buf += b" "
    if flags & (Flag.SHORT_FILE | Flag.LONG_FILE):
        if flags & Flag.SHORT_FILE:
            file = os.path.basename(file) or file
        buf += file.encode(errors="backslashreplace")
        buf += b":"
        itoa(buf, line, -1)
        buf += b": "


def sprint(*args: object) -> str:
    """Join arguments the way a print-everything call does.

    A space goes between two operands only when neither of them is a string.
    """
    parts: list[str] = []
    prev_is_str = True
    for n, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if n > 0 and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(arg if is_str else str(arg))
        prev_is_str = is_str
    return "".join(parts)
