"""Tests for hooklog.trace — function tracing onto the debug level."""

from pathlib import Path

import pytest

from hooklog import init_log, trace
from hooklog.trace import _short_repr


@trace
def add(a, b=0):
    return a + b


@trace
def nothing():
    return None


@trace
def fail(msg):
    raise ValueError(msg)


class TestTrace:

    def test_records_call_and_return(self):
        log = init_log(['debug'])
        assert add(1, b=2) == 3
        assert log.debug.history == [
            f"[TRACE] >> {__name__}.add(1, b=2)",
            f"[TRACE] << {__name__}.add returned: 3",
        ]

    def test_none_return_not_recorded(self):
        log = init_log(['debug'])
        nothing()
        assert len(log.debug.history) == 1

    def test_exception_recorded_and_reraised(self):
        log = init_log(['debug'])
        with pytest.raises(ValueError, match="bad"):
            fail("bad")
        assert log.debug.history[-1] == f"[TRACE] !! {__name__}.fail raised: ValueError: bad"

    def test_untraced_without_debug_level(self):
        log = init_log(['info'])
        assert add(2) == 2
        assert log.info.history == []

    def test_wraps_metadata(self):
        assert add.__name__ == 'add'


class TestShortRepr:

    def test_long_string(self):
        assert _short_repr("x" * 60) == f"'{'x' * 47}...'"

    def test_long_list(self):
        assert _short_repr([1, 2, 3, 4]) == "[...4 items...]"

    def test_path(self):
        assert _short_repr(Path("a")) == "Path('a')"

    def test_plain(self):
        assert _short_repr(5) == "5"
