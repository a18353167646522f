"""
hooklog — named log levels with in-memory history and hooks.

Public API:
    LogRegistry       — named collection of levels ("Log" service)
    init_log          — singleton initialization
    get_log           — access singleton
    LogLevel          — one level: callable, history, add_hook
    LevelSpec         — level declaration (name + hooks)
    LevelFactory      — builds LogLevels against a LogStore
    LogStore          — per-level history and hook tables
    LogConfig         — registry options
    resolve_config    — layered config loading
    console_sink      — build a console sink
    trace             — function tracing decorator
    LogError, ValidationError, LevelExistsError
"""

from ._version import __version__, __app_name__
from .errors import LogError, ValidationError, LevelExistsError
from .store import LogStore
from .level import LogLevel, LevelSpec, HistoryView, normalize_spec
from .factory import LevelFactory
from .config import LogConfig, resolve_config, DEFAULT_LEVELS
from .sinks import console_sink, resolve_sink, DEFAULT_SINKS
from .registry import LogRegistry, init_log, get_log
from .trace import trace

__all__ = [
    '__version__', '__app_name__',
    'LogError', 'ValidationError', 'LevelExistsError',
    'LogStore', 'LogLevel', 'LevelSpec', 'HistoryView', 'normalize_spec',
    'LevelFactory',
    'LogConfig', 'resolve_config', 'DEFAULT_LEVELS',
    'console_sink', 'resolve_sink', 'DEFAULT_SINKS',
    'LogRegistry', 'init_log', 'get_log',
    'trace',
]
