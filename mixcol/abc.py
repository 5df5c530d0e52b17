"""
Abstract base for keyed collections.

ReadableCollection declares the read-only interface shared by MixedCollection and
ReadOnlyCollection and implements the Python protocol sugar on top of it:

- coll[key] reads via get(); missing keys raise KeyNotFoundError (a KeyError)
- key in coll tests keys, like has()
- iter(coll) yields VALUES in insertion order; items() yields (key, value) pairs
- len(coll) and bool(coll) follow count()
- str(coll) is the JSON text of to_json()
- == compares ordered (key, value) sequences of two collections
"""

# Standard library -----------------------------------------------------------------------------------------------------
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name

# Classes --------------------------------------------------------------------------------------------------------------

K = TypeVar("K", str, int)
V = TypeVar("V")


class ReadableCollection(ABC, Generic[K, V]):
    """
    Read interface of an ordered keyed collection.

    Operations documented as returning a collection always return a new,
    independent MixedCollection.
    """

    # ----- Lookup -----

    @abstractmethod
    def get(self, key: K) -> V:
        """Return the value of key. Raises KeyNotFoundError if absent."""

    @abstractmethod
    def get_or_default(self, key: K, default: Any = None) -> V | Any:
        """Return the value of key, or default if absent. Never raises."""

    @abstractmethod
    def get_dot(self, path: str, default: Any = None) -> Any:
        """Return the value at the end of a dot-path like "users.victor.country", or default."""

    @abstractmethod
    def get_only(self, keys: Iterable[K]) -> "ReadableCollection":
        """New collection with the requested keys that exist, in request order."""

    @abstractmethod
    def has(self, key: K) -> bool:
        """True if key exists."""

    @abstractmethod
    def all(self) -> dict[K, V]:
        """Shallow dict copy of the key/value pairs."""

    @abstractmethod
    def first_or_default(self, default: Any = None) -> V | Any:
        """First value by insertion order, or default if empty."""

    @abstractmethod
    def last_or_default(self, default: Any = None) -> V | Any:
        """Last value by insertion order, or default if empty."""

    # ----- Size -----

    @abstractmethod
    def count(self) -> int:
        """Number of items."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True if the collection holds no items."""

    # ----- Queries returning new collections -----

    @abstractmethod
    def keys(self) -> "ReadableCollection":
        """New collection of the keys, re-indexed 0..n-1."""

    @abstractmethod
    def values(self) -> "ReadableCollection":
        """New collection of the values, re-indexed 0..n-1."""

    @abstractmethod
    def map(self, fn: Callable[[V], Any]) -> "ReadableCollection":
        """New collection with the same keys and values replaced by fn(value)."""

    @abstractmethod
    def where(self, fn: Callable[[V, K], bool]) -> "ReadableCollection":
        """New collection of entries where fn(value, key) is truthy; keys preserved."""

    @abstractmethod
    def reverse(self) -> "ReadableCollection":
        """New collection in reverse order; keys preserved."""

    @abstractmethod
    def except_(self, keys: Iterable[K]) -> "ReadableCollection":
        """New collection without the listed keys."""

    @abstractmethod
    def intersect(self, other: Any) -> "ReadableCollection":
        """New collection of entries whose value also appears among the values of other."""

    @abstractmethod
    def union(self, other: Any) -> "ReadableCollection":
        """New collection of own entries plus entries of other under keys not present here."""

    @abstractmethod
    def copy(self) -> "ReadableCollection":
        """New mutable collection; nested collections and plain containers copied recursively."""

    # ----- Folds -----

    @abstractmethod
    def every(self, fn: Callable[[V], bool]) -> bool:
        """True if fn(value) holds for all values. Stops at the first failure."""

    @abstractmethod
    def any(self, fn: Callable[[V], bool]) -> bool:
        """True if fn(value) holds for at least one value. Stops at the first success."""

    @abstractmethod
    def reduce(self, fn: Callable[[Any, V, bool, bool], Any], initial: Any = None) -> Any:
        """Left fold calling fn(carry, value, is_first, is_last)."""

    # ----- Conversion -----

    @abstractmethod
    def to_array(self) -> list | dict:
        """Plain list (keys exactly 0..n-1) or dict, with nested collections converted."""

    @abstractmethod
    def to_json(self, **options: Any) -> str:
        """JSON text of to_array(); options are passed verbatim to json.dumps()."""

    # ----- Protocol sugar -----

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate (key, value) pairs in insertion order."""
        return iter(self.all().items())

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return self.has(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[V]:
        return iter(self.all().values())

    def __len__(self) -> int:
        return self.count()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ReadableCollection):
            return list(self.items()) == list(other.items())
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"{class_name(self)}({self.all()!r})"
