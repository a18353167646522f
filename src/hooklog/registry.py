"""
LogRegistry — the "Log" service.

Owns a set of named LogLevels, refuses duplicate names, and builds its
levels from a configured list at construction time:

    log = LogRegistry(['info', 'error'])
    log.info('a')
    log.record('info', 'b')
    log.get('info').history        # HistoryView(['a', 'b'])
    log.error.history              # HistoryView([])

Levels live in an explicit name -> LogLevel mapping. ``log.info`` is a
lookup into that mapping; a level whose name collides with a registry
method (e.g. 'get') is still reachable through ``get()`` or ``log[name]``.

Optional behaviors, driven by LogConfig:
    mirror_to_sink    every entry is also forwarded to a sink, chosen per
                      level with a fallback to config.default_sink
    expose_globally   the registry is bound as ``builtins.Log`` for
                      interactive inspection

Each registry gets its own LogStore unless one is passed in; passing the
same store to two registries makes same-named levels share history and
hooks.
"""

import builtins
from typing import Any, Dict, Iterable, Iterator, Optional

from .config import LogConfig
from .errors import LevelExistsError, ValidationError
from .factory import LevelFactory
from .level import LogLevel, normalize_spec
from .sinks import resolve_sink
from .store import LogStore


GLOBAL_NAME = "Log"


class LogRegistry:
    """Named collection of LogLevels sharing one LogStore."""

    def __init__(
        self,
        levels: Optional[Iterable[Any]] = None,
        config: Optional[LogConfig] = None,
        store: Optional[LogStore] = None,
    ):
        self.config = config if config is not None else LogConfig()
        self.store = store if store is not None else LogStore()
        self._factory = LevelFactory(self.store)
        self._levels: Dict[str, LogLevel] = {}

        for sink_name, sink in self.config.sinks.items():
            if not callable(sink):
                raise ValidationError(
                    f"Unsupported sink for {sink_name!r}. Expected callable, "
                    f"got {type(sink).__name__}", sink)

        if levels is None:
            levels = self.config.levels
        for spec in levels:
            self.create_level(spec)

        if self.config.expose_globally:
            self.expose_globally()

    def create_level(self, spec) -> LogLevel:
        """Create a level and add it to this registry.

        Args:
            spec: Level name, mapping with 'name'/'hooks', or LevelSpec

        Returns:
            The new LogLevel

        Raises:
            ValidationError: If spec is malformed
            LevelExistsError: If this registry already has the name
        """
        spec = normalize_spec(spec)
        if spec.name in self._levels:
            raise LevelExistsError(spec.name)

        level = self._factory.create(spec)
        if self.config.mirror_to_sink:
            self._attach_sink(spec.name)
        self._levels[spec.name] = level
        return level

    def _attach_sink(self, name: str) -> None:
        """Put a sink-forwarding hook at the front of the level's hooks.

        On a shared store the hook list may already carry a forwarder
        from another mirroring registry; one forwarder per name is kept.
        """
        hooks = self.store.hooks[name]
        if any(getattr(hook, "forwards_to_sink", False) for hook in hooks):
            return
        sinks = self.config.sinks
        default = self.config.default_sink

        def forward_to_sink(entry):
            resolve_sink(name, sinks, default)(entry)

        forward_to_sink.forwards_to_sink = True
        hooks.insert(0, forward_to_sink)

    def expose_globally(self) -> None:
        """Bind this registry as ``builtins.Log``.

        Idempotent: the notice is only emitted on the first call that
        actually changes the binding.
        """
        if getattr(builtins, GLOBAL_NAME, None) is self:
            return
        setattr(builtins, GLOBAL_NAME, self)
        notice = resolve_sink('info', self.config.sinks, self.config.default_sink)
        notice(f"hooklog: registry bound to builtins.{GLOBAL_NAME}, "
               f"now accessible from any console as \"{GLOBAL_NAME}\".")

    # -----------------------------------------------------------------
    # Access
    # -----------------------------------------------------------------
    def get(self, name: str) -> LogLevel:
        """Return the level called ``name``.

        Raises:
            KeyError: If the registry has no such level
        """
        try:
            return self._levels[name]
        except KeyError:
            raise KeyError(f"No log level named {name!r}") from None

    def record(self, name: str, entry: Any = None) -> None:
        """Record ``entry`` on the level called ``name``."""
        self.get(name).record(entry)

    @property
    def names(self) -> list:
        """Level names in creation order."""
        return list(self._levels)

    def histories(self) -> Dict[str, list]:
        """Snapshot of every level's history, keyed by name."""
        return {name: list(level.history) for name, level in self._levels.items()}

    def __getattr__(self, name: str) -> LogLevel:
        # Only reached when normal attribute lookup fails
        levels = self.__dict__.get('_levels')
        if levels is not None and name in levels:
            return levels[name]
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute or level {name!r}")

    def __getitem__(self, name: str) -> LogLevel:
        return self.get(name)

    def __contains__(self, name) -> bool:
        return name in self._levels

    def __iter__(self) -> Iterator[LogLevel]:
        return iter(list(self._levels.values()))

    def __len__(self) -> int:
        return len(self._levels)

    def __repr__(self):
        return f"<LogRegistry levels={self.names}>"


# =============================================================================
# Module-level singleton
# =============================================================================

_registry: Optional[LogRegistry] = None


def init_log(levels: Optional[Iterable[Any]] = None,
             config: Optional[LogConfig] = None,
             store: Optional[LogStore] = None) -> LogRegistry:
    """Initialize the module-level LogRegistry singleton.

    Call once at program startup. Replaces any previous singleton.

    Returns:
        The initialized LogRegistry
    """
    global _registry
    _registry = LogRegistry(levels, config=config, store=store)
    return _registry


def get_log() -> LogRegistry:
    """Get the module-level LogRegistry, creating a default if needed."""
    global _registry
    if _registry is None:
        _registry = LogRegistry()
    return _registry
