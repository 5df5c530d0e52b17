"""
Mixcol error types.

All errors signal misuse of a collection (a contract violation), never a
transient failure. Each one carries the offending key in its `key` attribute.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class CollectionError(Exception):
    """Base class for collection errors.

    Attributes:
        key: The key involved in the failed operation.
    """

    def __init__(self, message: str, key: Any = None) -> None:
        self.key = key
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError subclasses would otherwise render the message quoted
        return str(self.args[0]) if self.args else ""


class DuplicateKeyError(CollectionError, ValueError):
    """Raised by add() when the key is already present."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"key {fmt_value(key)} was added previously", key)


class KeyNotFoundError(CollectionError, KeyError):
    """Raised by get() when the key does not exist."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"key {fmt_value(key)} does not exist in the collection", key)


class ReadOnlyError(CollectionError, TypeError):
    """Raised on item assignment or deletion against a read-only collection."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"attempt to modify a read-only collection with key {fmt_value(key)}", key)
