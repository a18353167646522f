"""
Function tracing decorator.

Records call entry, return value and exceptions as entries on the
'debug' level of the module-level registry (see get_log()). Functions
run untraced when that registry has no 'debug' level.
"""

import functools
import inspect
from pathlib import Path


def _short_repr(value):
    """Compact repr for trace entries: long strings and lists are elided."""
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, list) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator that records calls to ``func`` on the 'debug' level."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .registry import get_log

        log = get_log()
        if 'debug' not in log:
            return func(*args, **kwargs)
        debug = log.get('debug')

        module = inspect.getmodule(func)
        where = f"{module.__name__ if module else 'unknown'}.{func.__name__}"

        args_repr = [_short_repr(arg) for arg in args]
        args_repr.extend(f"{key}={_short_repr(value)}"
                         for key, value in kwargs.items())
        debug(f"[TRACE] >> {where}({', '.join(args_repr)})")

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            debug(f"[TRACE] !! {where} raised: {type(e).__name__}: {e}")
            raise

        if result is not None:
            debug(f"[TRACE] << {where} returned: {_short_repr(result)}")
        return result

    return wrapper
