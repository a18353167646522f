"""Exceptions raised by hooklog.

Everything is raised synchronously at the call site; nothing in the
package retries or swallows these.
"""


class LogError(Exception):
    """Base class for all hooklog errors."""


class ValidationError(LogError, TypeError):
    """A level spec or hook argument has the wrong shape.

    Raised for level specs that are neither a name nor a record with a
    ``name``, and for hooks that are not callable.
    """

    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value


class LevelExistsError(LogError, ValueError):
    """A registry was asked to create a level name it already has."""

    def __init__(self, name):
        super().__init__(f"Cannot create log level. [{name}] already exists on this registry.")
        self.name = name
