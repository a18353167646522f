"""
LogStore — the history and hook tables shared by levels.

Two maps keyed by level name:
    histories   name -> list of entries (append-only, temporal order)
    hooks       name -> list of hook callables (registration order)

Every LogRegistry owns one store by default. Passing the same store to
several registries is how they share history and hooks for a name.
"""

from typing import Any, Callable, Dict, List


class LogStore:
    """Holds per-level history and hook lists."""

    def __init__(self):
        self.histories: Dict[str, List[Any]] = {}
        self.hooks: Dict[str, List[Callable[[Any], Any]]] = {}

    def allocate(self, name: str) -> bool:
        """Create empty slots for ``name`` unless they already exist.

        Existing slots are never reset.

        Returns:
            True if new slots were created, False if they already existed.
        """
        if name in self.histories:
            self.hooks.setdefault(name, [])
            return False
        self.histories[name] = []
        self.hooks[name] = []
        return True

    def __contains__(self, name) -> bool:
        return name in self.histories

    def names(self) -> list:
        """Level names with allocated slots, in allocation order."""
        return list(self.histories)
