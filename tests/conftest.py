import io
from datetime import datetime

import pytest

import nlog

FIXED = datetime(2024, 1, 2, 3, 4, 5, 6)


@pytest.fixture(autouse=True)
def reset_default_logger():
    """Every test starts and ends with a pristine default logger."""
    nlog.reset()
    yield
    nlog.reset()


@pytest.fixture
def sink() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def make_logger(sink):
    """Build a Logger writing to ``sink`` with a fixed clock."""

    def _make(prefix: str = "", flags: int = nlog.STD_FLAGS, **kwargs) -> nlog.Logger:
        kwargs.setdefault("clock", lambda: FIXED)
        return nlog.Logger(sink, prefix, flags, **kwargs)

    return _make
