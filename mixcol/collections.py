"""
Mixcol Collections
"""

# Standard library -----------------------------------------------------------------------------------------------------
import json
import re
import warnings
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .abc import K, V, ReadableCollection
from .exceptions import DuplicateKeyError, KeyNotFoundError
from .formatters import fmt_type, fmt_value
from .sentinels import NOT_FOUND, iffound
from .utils import fit_callback, is_valid_key, listify

# Canonical decimal integers only, "01" and "-0" stay string segments
_INT_SEGMENT = re.compile(r"0|-?[1-9][0-9]*")


# Classes --------------------------------------------------------------------------------------------------------------

class MixedCollection(ReadableCollection[K, V]):
    """
    An ordered collection of key/value pairs with mixed value types.

    - Keys are str or int and unique; insertion order is preserved.
    - set() on an existing key replaces the value in place, the position is kept.
    - add_value() appends under the next integer key: max int key + 1, or 0.
    - Values may be nested collections, plain containers or any object.
    - Mutators return self, so calls chain:

        >>> MixedCollection().add("name", "A").add_value(1).set("name", "B").to_array()
        {'name': 'B', 0: 1}

    Construction accepts a collection, a Mapping (its items, in order) or any other
    iterable, whose values are auto-indexed 0..n-1.
    """

    def __init__(self, items: "ReadableCollection | Mapping | Iterable | None" = None) -> None:
        self._items: dict[K, V] = {}
        if items is not None:
            for key, value in _iter_pairs(items):
                self.add(key, value)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[K, V]]) -> "MixedCollection[K, V]":
        """
        Build a collection from (key, value) tuples.

        Raises:
            DuplicateKeyError: If a key repeats.
        """
        collection = cls()
        for key, value in pairs:
            collection.add(key, value)
        return collection

    @classmethod
    def from_array(cls, data: "Mapping | Iterable") -> "MixedCollection":
        """Inverse of to_array(): a list is auto-indexed, a dict keeps its keys."""
        return cls(data)

    # ----- Mutations -----

    def add(self, key: K, value: V) -> "MixedCollection[K, V]":
        """
        Append a new key.

        Raises:
            DuplicateKeyError: If the key was added previously.
            TypeError: If key is not str or int.
        """
        if self.has(key):
            raise DuplicateKeyError(key)
        return self.set(key, value)

    def add_value(self, value: V) -> "MixedCollection[K, V]":
        """Append value under the next integer key."""
        self._items[self._next_index()] = value
        return self

    def add_range(self, values: Iterable[V]) -> "MixedCollection[K, V]":
        """Append each value of an iterable under sequential integer keys."""
        for value in values:
            self.add_value(value)
        return self

    def set(self, key: K, value: V) -> "MixedCollection[K, V]":
        """Insert at the end, or replace the value of an existing key in place."""
        _check_key(key)
        self._items[key] = value
        return self

    def remove(self, key: K) -> "MixedCollection[K, V]":
        """Remove key if present."""
        self._items.pop(key, None)
        return self

    def clear(self) -> "MixedCollection[K, V]":
        self._items.clear()
        return self

    def shift(self, default: Any = None) -> V | Any:
        """
        Remove and return the first value, or return default if the collection is empty.

        Integer keys of the remaining items are renumbered from 0 keeping their order,
        so coll[0] is always the head of an auto-indexed collection. String keys are untouched.
        """
        if not self._items:
            return default

        value = self._items.pop(next(iter(self._items)))

        renumbered: dict[K, V] = {}
        index = 0
        for key, item in self._items.items():
            if isinstance(key, int):
                renumbered[index] = item
                index += 1
            else:
                renumbered[key] = item
        self._items = renumbered

        return value

    def transform(self, fn: Callable[[V], Any]) -> "MixedCollection":
        """Replace every value in place by fn(value)."""
        call = fit_callback(fn, 1)
        for key, value in list(self._items.items()):
            self._items[key] = call(value)
        return self

    # ----- Lookup -----

    def get(self, key: K) -> V:
        value = self.get_or_default(key, NOT_FOUND)
        if value is NOT_FOUND:
            raise KeyNotFoundError(key)
        return value

    def get_or_default(self, key: K, default: Any = None) -> V | Any:
        try:
            return self._items.get(key, default)
        except TypeError:
            # Unhashable key
            return default

    def get_dot(self, path: str, default: Any = None) -> Any:
        """
        Return the value at the end of a dot-path, or default if any segment is missing.

        Resolution:
        - An empty path returns default.
        - A path that is itself a key wins over its segmented reading,
          so {"a.b": 1, "a": {"b": 2}} resolves "a.b" to 1.
        - Otherwise segments are looked up one level at a time. Intermediate values must
          be collections or plain dicts/lists/tuples. A segment like "0" also matches
          the integer key 0.

        Examples:
            >>> coll = MixedCollection({"users": {"victor": {"country": "Spain"}}})
            >>> coll.get_dot("users.victor.country")
            'Spain'
            >>> coll.get_dot("users.jack.country", "unknown")
            'unknown'
        """
        if not isinstance(path, str):
            raise TypeError(f"dot-path must be str, got {fmt_type(path)}")

        if path == "":
            return default

        if self.has(path):
            return self.get(path)

        if "." not in path:
            return default

        return _resolve_dot_path(path.split("."), self, default)

    def get_only(self, keys: Iterable[K]) -> "MixedCollection[K, V]":
        collection = self._make_collection()
        for key in listify(keys):
            if self.has(key):
                collection.set(key, self._items[key])
        return collection

    def has(self, key: K) -> bool:
        try:
            return key in self._items
        except TypeError:
            return False

    def all(self) -> dict[K, V]:
        return dict(self._items)

    def first_or_default(self, default: Any = None) -> V | Any:
        return next(iter(self._items.values()), default)

    def last_or_default(self, default: Any = None) -> V | Any:
        return next(reversed(self._items.values()), default)

    # ----- Size -----

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return self.count() == 0

    # ----- Queries returning new collections -----

    def keys(self) -> "MixedCollection[int, K]":
        return self._make_collection(list(self._items.keys()))

    def values(self) -> "MixedCollection[int, V]":
        return self._make_collection(list(self._items.values()))

    def map(self, fn: Callable[[V], Any]) -> "MixedCollection[K, Any]":
        call = fit_callback(fn, 1)
        return self._make_collection({key: call(value) for key, value in list(self._items.items())})

    def where(self, fn: Callable[[V, K], bool]) -> "MixedCollection[K, V]":
        call = fit_callback(fn, 2)
        return self._make_collection({key: value for key, value in list(self._items.items()) if call(value, key)})

    def reverse(self) -> "MixedCollection[K, V]":
        return self._make_collection(dict(reversed(self._items.items())))

    def except_(self, keys: Iterable[K]) -> "MixedCollection[K, V]":
        collection = self._make_collection(self._items)
        for key in listify(keys):
            collection.remove(key)
        return collection

    def intersect(self, other: "ReadableCollection | Mapping | Iterable") -> "MixedCollection[K, V]":
        """
        Entries whose value is equal to some value of other.

        Values are compared, keys are not: the result keeps this collection's keys and order.

            >>> MixedCollection(["car", "bike"]).intersect(["bike", "scooter"]).to_array()
            {1: 'bike'}
        """
        other_values = list(_plain_items(other).values())
        return self._make_collection({key: value for key, value in self._items.items() if value in other_values})

    def union(self, other: "ReadableCollection | Mapping | Iterable") -> "MixedCollection":
        """
        Own entries followed by the entries of other whose keys are not present here.

        On a key collision the value of this collection wins.
        """
        merged = dict(self._items)
        for key, value in _plain_items(other).items():
            merged.setdefault(key, value)
        return self._make_collection(merged)

    def copy(self) -> "MixedCollection[K, V]":
        return self._make_collection({key: _copy_value(value) for key, value in self._items.items()})

    # ----- Folds -----

    def every(self, fn: Callable[[V], bool]) -> bool:
        call = fit_callback(fn, 1)
        for value in list(self._items.values()):
            if not call(value):
                return False
        return True

    def any(self, fn: Callable[[V], bool]) -> bool:
        call = fit_callback(fn, 1)
        for value in list(self._items.values()):
            if call(value):
                return True
        return False

    def reduce(self, fn: Callable[[Any, V, bool, bool], Any], initial: Any = None) -> Any:
        """
        Reduce the collection to a single value.

        fn is called as fn(carry, value, is_first, is_last); trailing parameters may be omitted:

            >>> MixedCollection([1, 2, 3]).reduce(lambda carry, value: carry + value, 0)
            6
        """
        call = fit_callback(fn, 4)
        values = list(self._items.values())
        last = len(values) - 1
        carry = initial
        for index, value in enumerate(values):
            carry = call(carry, value, index == 0, index == last)
        return carry

    # ----- Conversion -----

    def to_array(self) -> list | dict:
        plain = {key: _to_plain(value) for key, value in self._items.items()}
        if list(plain) == list(range(len(plain))):
            return list(plain.values())
        return plain

    def to_json(self, **options: Any) -> str:
        """
        Serialize to_array() as JSON.

        Keyword options go to json.dumps() unchanged (indent, sort_keys, ensure_ascii, ...).
        A RuntimeWarning is issued when an int key and a str key of the same text would
        merge into one JSON object key.
        """
        plain = self.to_array()
        for first, second in _json_key_collisions(plain):
            warnings.warn(
                f"keys {fmt_value(first)} and {fmt_value(second)} collide as JSON object key {str(second)!r}, "
                f"only the last value is kept",
                RuntimeWarning,
                stacklevel=2,
            )
        return json.dumps(plain, **options)

    def to_readonly(self) -> "ReadOnlyCollection[K, V]":
        """Read-only snapshot of the current state."""
        from .readonly import ReadOnlyCollection

        return ReadOnlyCollection(self)

    # ----- Item access -----

    def __setitem__(self, key: K | None, value: V) -> None:
        """coll[key] = value sets key; coll[None] = value appends under the next integer key."""
        if key is None:
            self.add_value(value)
        else:
            self.set(key, value)

    def __delitem__(self, key: K) -> None:
        self.remove(key)

    def _make_collection(self, items: "Mapping | Iterable | None" = None) -> "MixedCollection":
        """Factory for the collections returned by queries."""
        return MixedCollection(items)

    def _next_index(self) -> int:
        int_keys = [key for key in self._items if isinstance(key, int)]
        return max(int_keys) + 1 if int_keys else 0


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_key(key: Any) -> None:
    if not is_valid_key(key):
        raise TypeError(f"collection key must be str or int, got {fmt_type(key)}")


def _iter_pairs(items: Any) -> Iterator[tuple[Any, Any]]:
    """(key, value) pairs of a collection or Mapping; values of other iterables auto-indexed."""
    if isinstance(items, ReadableCollection):
        return items.items()
    if isinstance(items, Mapping):
        return iter(items.items())
    if isinstance(items, (str, bytes, bytearray)) or not isinstance(items, Iterable):
        raise TypeError(f"expected a collection, Mapping or iterable of values, got {fmt_type(items)}")
    return enumerate(items)


def _plain_items(other: Any) -> dict:
    return dict(_iter_pairs(other))


def _copy_value(value: Any) -> Any:
    """Copy collections and plain containers recursively, share everything else."""
    from .readonly import ReadOnlyCollection

    if isinstance(value, ReadOnlyCollection):
        # Immutable snapshot, shared as is so it stays read-only
        return value
    if isinstance(value, ReadableCollection):
        return value.copy()
    if isinstance(value, dict):
        return {key: _copy_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_copy_value(item) for item in value)
    return value


def _to_plain(value: Any) -> Any:
    if isinstance(value, ReadableCollection):
        return value.to_array()
    if isinstance(value, Mapping):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_to_plain(item) for item in value)
    return value


def _lookup(container: Any, key: Any) -> Any:
    """Plain lookup in a collection, Mapping or list/tuple; NOT_FOUND on a miss."""
    if isinstance(container, ReadableCollection):
        return container.get_or_default(key, NOT_FOUND)
    if isinstance(container, Mapping):
        try:
            return container.get(key, NOT_FOUND)
        except TypeError:
            # Unhashable key
            return NOT_FOUND
    # Sequences are keyed 0..n-1, negative indexes are not keys
    if isinstance(key, int) and 0 <= key < len(container):
        return container[key]
    return NOT_FOUND


def _lookup_segment(container: Any, segment: str) -> Any:
    value = _lookup(container, segment)
    if value is NOT_FOUND and _INT_SEGMENT.fullmatch(segment):
        value = _lookup(container, int(segment))
    return value


def _resolve_dot_path(segments: list[str], container: ReadableCollection, default: Any) -> Any:
    *parents, last = segments

    for segment in parents:
        value = _lookup_segment(container, segment)
        if not isinstance(value, (ReadableCollection, Mapping, list, tuple)):
            return default
        container = value

    return iffound(_lookup_segment(container, last), default=default)


def _json_key_collisions(plain: Any) -> Iterator[tuple[Any, Any]]:
    """Yield pairs of dict keys that json.dumps() would write as the same object key."""
    if isinstance(plain, dict):
        seen: dict[str, Any] = {}
        for key in plain:
            text = str(key)
            if text in seen:
                yield seen[text], key
            seen[text] = key
        children = plain.values()
    elif isinstance(plain, (list, tuple)):
        children = plain
    else:
        return

    for child in children:
        yield from _json_key_collisions(child)
