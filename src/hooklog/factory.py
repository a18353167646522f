"""LevelFactory — builds LogLevels wired to a LogStore."""

from typing import Optional

from .level import LogLevel, normalize_spec
from .store import LogStore


class LevelFactory:
    """Creates LogLevel instances against one store.

    Creating a name the store already holds attaches to the existing
    history and hooks rather than resetting them. Hooks declared in the
    spec are appended again on every such call, after the hooks already
    registered. Uniqueness of names is enforced one layer up, by
    LogRegistry.
    """

    def __init__(self, store: Optional[LogStore] = None):
        self.store = store if store is not None else LogStore()

    def create(self, spec) -> LogLevel:
        """Create a level for ``spec`` and register its declared hooks.

        Args:
            spec: Level name, mapping with 'name'/'hooks', or LevelSpec

        Returns:
            LogLevel bound to spec's name in this factory's store

        Raises:
            ValidationError: If spec or any of its hooks is malformed
        """
        spec = normalize_spec(spec)
        self.store.allocate(spec.name)
        level = LogLevel(spec.name, self.store)
        for hook in spec.hooks:
            level.add_hook(hook)
        return level

    __call__ = create
