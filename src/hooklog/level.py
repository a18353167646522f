"""
Log levels and level specs.

A LogLevel is a callable bound to one level name in a LogStore.
Calling it records an entry and then runs the level's hooks:

    info = LevelFactory(store).create('info')
    remove = info.add_hook(print)
    info('server started')      # appended to history, then print() called
    info()                      # None is a no-op
    remove()

A level spec is how levels are declared: a bare name, a mapping with
``name`` and optional ``hooks``, or a LevelSpec.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Tuple

from .errors import ValidationError
from .store import LogStore


Hook = Callable[[Any], Any]


@dataclass(frozen=True)
class LevelSpec:
    """Declaration of a level.

    Attributes:
        name: Level name (key into the store)
        hooks: Hooks registered, in order, when the level is created
    """
    name: str
    hooks: Tuple[Hook, ...] = ()


def normalize_spec(spec) -> LevelSpec:
    """Turn a bare name or mapping into a LevelSpec.

    Args:
        spec: 'name', {'name': 'name', 'hooks': [...]}, or a LevelSpec

    Returns:
        LevelSpec with a validated name and a hooks tuple

    Raises:
        ValidationError: If spec has no usable name or hooks is not a sequence
    """
    if isinstance(spec, str):
        spec = LevelSpec(name=spec)
    elif isinstance(spec, Mapping):
        if 'name' not in spec:
            raise ValidationError(
                'Unsupported log level. Expected a record with a "name".', spec)
        hooks = spec.get('hooks')
        if hooks is None:
            hooks = ()
        if isinstance(hooks, (str, bytes)) or not isinstance(hooks, Sequence):
            raise ValidationError(
                f'Unsupported hooks for log level. Expected a sequence, '
                f'got {type(hooks).__name__}', hooks)
        spec = LevelSpec(name=spec['name'], hooks=tuple(hooks))
    elif not isinstance(spec, LevelSpec):
        raise ValidationError(
            f'Unsupported log level. Expected str or record, '
            f'got {type(spec).__name__}', spec)

    if not isinstance(spec.name, str) or not spec.name:
        raise ValidationError(
            f'Unsupported log level name: {spec.name!r}', spec.name)
    for hook in spec.hooks:
        if not callable(hook):
            raise ValidationError(
                f'Unsupported hook. Expected callable, got {type(hook).__name__}',
                hook)
    return spec


class HistoryView(Sequence):
    """Read-only live view of one level's history list.

    Appends made through the level show up immediately; the view
    itself offers no way to change the list.
    """

    __slots__ = ('_entries',)

    def __init__(self, entries: list):
        self._entries = entries

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self):
        return len(self._entries)

    def __eq__(self, other):
        if isinstance(other, HistoryView):
            return self._entries == other._entries
        if isinstance(other, (list, tuple)):
            return self._entries == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"HistoryView({self._entries!r})"


class LogLevel:
    """One logging channel: history plus hooks for a single name."""

    def __init__(self, name: str, store: LogStore):
        self.name = name
        self._store = store
        self._history = HistoryView(store.histories[name])

    def __call__(self, entry: Any = None) -> None:
        self.record(entry)

    def record(self, entry: Any = None) -> None:
        """Append ``entry`` to history, then call each hook with it.

        None is ignored entirely: nothing is appended and no hook runs.
        Hooks run against a snapshot of the hook list, so a hook that
        adds or removes hooks affects only later records. An exception
        from a hook propagates; the entry stays recorded.
        """
        if entry is None:
            return
        self._store.histories[self.name].append(entry)
        for hook in tuple(self._store.hooks[self.name]):
            hook(entry)

    def add_hook(self, hook: Hook) -> Callable[[], None]:
        """Register ``hook`` to run on every entry recorded on this level.

        Args:
            hook: Callable taking the entry

        Returns:
            Zero-argument function that removes this registration.
            Calling it more than once does nothing after the first call.

        Raises:
            ValidationError: If hook is not callable
        """
        if not callable(hook):
            raise ValidationError(
                f'Unsupported hook. Expected callable, got {type(hook).__name__}',
                hook)

        hooks = self._store.hooks[self.name]
        hooks.append(hook)
        removed = False

        def remove_hook() -> None:
            nonlocal removed
            if removed:
                return
            removed = True
            for i, registered in enumerate(hooks):
                if registered is hook:
                    del hooks[i]
                    return

        return remove_hook

    @property
    def history(self) -> HistoryView:
        """Live, read-only view of the recorded entries."""
        return self._history

    @property
    def hooks(self) -> tuple:
        """Snapshot of the currently registered hooks."""
        return tuple(self._store.hooks[self.name])

    def __len__(self):
        return len(self._history)

    def __repr__(self):
        return f"<LogLevel {self.name!r} entries={len(self._history)} hooks={len(self.hooks)}>"
