"""Tests for hooklog.sinks — console sinks and sink resolution."""

import io

from hooklog import DEFAULT_SINKS, console_sink, resolve_sink
from hooklog.sinks import noop_sink


class TestConsoleSink:

    def test_writes_prefixed_line(self):
        buf = io.StringIO()
        console_sink('warn', buf)('careful')
        assert buf.getvalue() == "[WARN] careful\n"

    def test_defaults_to_stderr(self, capsys):
        console_sink('info')('hello')
        captured = capsys.readouterr()
        assert captured.err == "[INFO] hello\n"
        assert captured.out == ""

    def test_non_string_entry(self):
        buf = io.StringIO()
        console_sink('debug', buf)({'k': 1})
        assert buf.getvalue() == "[DEBUG] {'k': 1}\n"


class TestResolveSink:

    def test_level_specific(self):
        assert resolve_sink('warn', DEFAULT_SINKS) is DEFAULT_SINKS['warn']

    def test_default_fallback(self):
        assert resolve_sink('audit', DEFAULT_SINKS) is DEFAULT_SINKS['info']

    def test_custom_default(self):
        assert resolve_sink('audit', DEFAULT_SINKS, default='log') is DEFAULT_SINKS['log']

    def test_noop_when_nothing_matches(self):
        assert resolve_sink('audit', {}) is noop_sink

    def test_default_sinks_cover_default_levels(self):
        from hooklog import DEFAULT_LEVELS
        for name in DEFAULT_LEVELS:
            assert name in DEFAULT_SINKS
