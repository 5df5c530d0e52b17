"""
Mixcol Read-only Collections
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Iterable, Mapping
from typing import Any, Callable, NoReturn

# Local ----------------------------------------------------------------------------------------------------------------
from .abc import K, V, ReadableCollection
from .collections import MixedCollection
from .exceptions import ReadOnlyError


# Classes --------------------------------------------------------------------------------------------------------------

class ReadOnlyCollection(ReadableCollection[K, V]):
    """
    A read-only snapshot of a collection.

    The items are copied at construction (nested collections and plain containers
    included), so later changes to the source are not visible through the view.
    There are no mutating methods; item assignment and deletion raise ReadOnlyError.

    Queries that build new collections return ordinary, mutable MixedCollection
    instances.

        >>> source = MixedCollection({"port": 443})
        >>> view = source.to_readonly()
        >>> source["port"] = 80
        >>> view["port"]
        443
    """

    def __init__(self, items: "ReadableCollection | Mapping | Iterable | None" = None) -> None:
        self._collection: MixedCollection[K, V] = MixedCollection(items).copy()

    # ----- Lookup -----

    def get(self, key: K) -> V:
        return self._collection.get(key)

    def get_or_default(self, key: K, default: Any = None) -> V | Any:
        return self._collection.get_or_default(key, default)

    def get_dot(self, path: str, default: Any = None) -> Any:
        return self._collection.get_dot(path, default)

    def get_only(self, keys: Iterable[K]) -> MixedCollection[K, V]:
        return self._collection.get_only(keys)

    def has(self, key: K) -> bool:
        return self._collection.has(key)

    def all(self) -> dict[K, V]:
        return self._collection.all()

    def first_or_default(self, default: Any = None) -> V | Any:
        return self._collection.first_or_default(default)

    def last_or_default(self, default: Any = None) -> V | Any:
        return self._collection.last_or_default(default)

    # ----- Size -----

    def count(self) -> int:
        return self._collection.count()

    def is_empty(self) -> bool:
        return self._collection.is_empty()

    # ----- Queries returning new collections -----

    def keys(self) -> MixedCollection[int, K]:
        return self._collection.keys()

    def values(self) -> MixedCollection[int, V]:
        return self._collection.values()

    def map(self, fn: Callable[[V], Any]) -> MixedCollection[K, Any]:
        return self._collection.map(fn)

    def where(self, fn: Callable[[V, K], bool]) -> MixedCollection[K, V]:
        return self._collection.where(fn)

    def reverse(self) -> MixedCollection[K, V]:
        return self._collection.reverse()

    def except_(self, keys: Iterable[K]) -> MixedCollection[K, V]:
        return self._collection.except_(keys)

    def intersect(self, other: Any) -> MixedCollection[K, V]:
        return self._collection.intersect(other)

    def union(self, other: Any) -> MixedCollection:
        return self._collection.union(other)

    def copy(self) -> MixedCollection[K, V]:
        return self._collection.copy()

    # ----- Folds -----

    def every(self, fn: Callable[[V], bool]) -> bool:
        return self._collection.every(fn)

    def any(self, fn: Callable[[V], bool]) -> bool:
        return self._collection.any(fn)

    def reduce(self, fn: Callable[[Any, V, bool, bool], Any], initial: Any = None) -> Any:
        return self._collection.reduce(fn, initial)

    # ----- Conversion -----

    def to_array(self) -> list | dict:
        return self._collection.to_array()

    def to_json(self, **options: Any) -> str:
        return self._collection.to_json(**options)

    # ----- Item access -----

    def __setitem__(self, key: K | None, value: V) -> NoReturn:
        raise ReadOnlyError(key)

    def __delitem__(self, key: K) -> NoReturn:
        raise ReadOnlyError(key)
