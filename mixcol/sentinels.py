"""
Sentinel objects for lookups where None is a legitimate stored value.

Collections may hold None as a value, so internal lookups use NOT_FOUND to signal
absence. The sentinel is a singleton and must be checked by identity ('is').

Sentinels:
    NOT_FOUND: Indicates a failed lookup operation (alternative to None)

Helper Functions:
    iffound: Return default if value is NOT_FOUND, otherwise return value

Example:
    >>> value = coll.get_or_default("port", NOT_FOUND)
    >>> if value is NOT_FOUND:
    ...     value = 443
"""

from typing import Any, Final

__all__ = [
    'NOT_FOUND',
    'NotFoundType',
    'iffound',
]


# Base Sentinel --------------------------------------------------------------------------------------------------------

class _SentinelBase:
    """
    Base class for sentinel objects.

    Sentinels are singleton objects optimized for identity checks.
    """
    __slots__ = ('_name',)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return f'<{self._name}>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        return (self.__class__, (self._name,))


# Sentinel Types -------------------------------------------------------------------------------------------------------

class NotFoundType(_SentinelBase):
    """
    Sentinel type for NOT_FOUND.

    Indicates that a key lookup failed.
    """
    _instance: 'NotFoundType | None' = None

    def __new__(cls) -> 'NotFoundType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, '_name'):
            super().__init__("NOT_FOUND")

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


# Sentinel Instances ---------------------------------------------------------------------------------------------------

NOT_FOUND: Final[NotFoundType] = NotFoundType()
"""
Sentinel representing a failed lookup operation.

Used by collection lookups where None is a valid stored value but absence
must still be signalled.
"""


# Methods --------------------------------------------------------------------------------------------------------------

def iffound(value: Any, *, default: Any = None) -> Any:
    """
    Return value unless it is NOT_FOUND, in which case return the default.

    Args:
        value: The lookup result to check.
        default: Value returned when value is NOT_FOUND.

    Returns:
        The original value, or the default when the lookup failed.

    Examples:
        >>> iffound(NOT_FOUND, default="n/a")
        'n/a'
        >>> iffound(None, default="n/a") is None
        True
    """
    if value is NOT_FOUND:
        return default
    return value
