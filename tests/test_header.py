"""Tests for nlog.header module."""

from datetime import datetime, timedelta, timezone

from nlog.flags import Flag
from nlog.header import format_header, itoa, sprint


def _itoa(i: int, wid: int) -> str:
    buf = bytearray()
    itoa(buf, i, wid)
    return buf.decode()


def _header(flags: int, t: datetime, prefix: str = "", file: str = "", line: int = 0) -> str:
    buf = bytearray()
    format_header(buf, prefix, t, file, line, flags)
    return buf.decode()


def test_itoa_pads_to_width():
    assert _itoa(5, 2) == "05"
    assert _itoa(2024, 4) == "2024"
    assert _itoa(42, 6) == "000042"


def test_itoa_zero_keeps_padding():
    """Zero still renders all requested digits."""
    assert _itoa(0, 4) == "0000"
    assert _itoa(0, 1) == "0"
    assert _itoa(0, -1) == "0"


def test_itoa_no_padding():
    assert _itoa(123, -1) == "123"
    assert _itoa(7, -1) == "7"
    assert _itoa(1234567, 2) == "1234567"


def test_itoa_appends():
    buf = bytearray(b"line ")
    itoa(buf, 9, 2)
    assert buf == b"line 09"


def test_header_date_only():
    assert _header(Flag.DATE, datetime(2024, 3, 7, 13, 14, 15)) == "2024/03/07 "


def test_header_date_and_time():
    assert _header(Flag.DATE | Flag.TIME, datetime(2024, 3, 7, 1, 2, 3)) == "2024/03/07 01:02:03 "


def test_header_microseconds_implies_time():
    t = datetime(2024, 3, 7, 1, 2, 3, 45)
    assert _header(Flag.MICROSECONDS, t) == "01:02:03.000045 "


def test_header_no_flags_is_prefix_only():
    assert _header(0, datetime(2024, 3, 7), prefix="[X] ") == "[X] "


def test_header_utc_converts_before_rendering():
    plus_two = timezone(timedelta(hours=2))
    t = datetime(2024, 1, 1, 1, 30, 0, tzinfo=plus_two)
    assert _header(Flag.DATE | Flag.TIME | Flag.UTC, t) == "2023/12/31 23:30:00 "
    # without UTC the local wall clock is kept
    assert _header(Flag.DATE | Flag.TIME, t) == "2024/01/01 01:30:00 "


def test_header_long_file():
    header = _header(Flag.LONG_FILE, datetime(2024, 1, 1), file="/a/b/c/d.py", line=23)
    assert header == "/a/b/c/d.py:23: "


def test_header_short_file_overrides_long_file():
    header = _header(
        Flag.LONG_FILE | Flag.SHORT_FILE, datetime(2024, 1, 1), file="/a/b/c/d.py", line=23
    )
    assert header == "d.py:23: "


def test_header_segment_order():
    header = _header(
        Flag.DATE | Flag.TIME | Flag.SHORT_FILE,
        datetime(2024, 1, 2, 3, 4, 5),
        prefix="[INFO]",
        file="/src/app.py",
        line=7,
    )
    assert header == "[INFO]2024/01/02 03:04:05 app.py:7: "


def test_sprint_spaces_between_non_strings():
    assert sprint(1, 2, 3) == "1 2 3"
    assert sprint(1.5, None) == "1.5 None"


def test_sprint_no_space_next_to_strings():
    assert sprint("a", "b") == "ab"
    assert sprint("count:", 3) == "count:3"
    assert sprint(3, "x", 4) == "3x4"
    assert sprint("x", 1, 2, "y") == "x1 2y"


def test_sprint_empty():
    assert sprint() == ""
