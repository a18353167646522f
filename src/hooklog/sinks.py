"""
Console sinks for mirroring recorded entries.

A sink is any ``(entry) -> None`` callable. When a registry mirrors to
sinks, each level forwards its entries to the sink named after it, or
to the default sink when no level-specific one exists:

    resolve_sink('warn', DEFAULT_SINKS)     # the [WARN] console sink
    resolve_sink('audit', DEFAULT_SINKS)    # falls back to [INFO]
    resolve_sink('audit', {})               # no-op
"""

import sys
from typing import Any, Callable, Dict, Optional, TextIO


Sink = Callable[[Any], None]


def console_sink(prefix: str, file: Optional[TextIO] = None) -> Sink:
    """Build a sink that prints ``[PREFIX] entry`` to a file handle.

    Args:
        prefix: Label shown in brackets, upper-cased
        file: Output handle; None means sys.stderr looked up at call time
            (so pytest's capsys and redirected streams see the output)

    Returns:
        The sink function
    """
    label = f"[{prefix.upper()}]"

    def sink(entry: Any) -> None:
        print(f"{label} {entry}", file=file if file is not None else sys.stderr)

    sink.__name__ = f"console_sink_{prefix}"
    return sink


def noop_sink(entry: Any) -> None:
    """Sink that discards everything."""


DEFAULT_SINKS: Dict[str, Sink] = {
    'log':   console_sink('log'),
    'info':  console_sink('info'),
    'debug': console_sink('debug'),
    'warn':  console_sink('warn'),
    'error': console_sink('error'),
}


def resolve_sink(name: str, sinks: Dict[str, Sink],
                 default: str = 'info') -> Sink:
    """Pick the sink for a level.

    Order: the sink registered under ``name``, then the sink registered
    under ``default``, then noop_sink.
    """
    return sinks.get(name) or sinks.get(default) or noop_sink
