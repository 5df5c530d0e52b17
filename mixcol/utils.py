"""
Mixcol utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import inspect
from typing import Any, Callable


# Methods --------------------------------------------------------------------------------------------------------------

def class_name(obj: Any) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.

    Examples:
        >>> class_name(MixedCollection([1]))
        'MixedCollection'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    return cls.__name__


def fit_callback(fn: Callable, max_args: int) -> Callable:
    """
    Adapt a callback so it receives only as many positional arguments as it accepts.

    Collection callbacks are documented with their full argument list, e.g.
    reduce() passes (carry, value, is_first, is_last). A callback that declares
    fewer positional parameters gets the leading ones only, so `lambda c, v: c + v`
    is a valid reducer. Callables taking *args receive all arguments.

    Builtins without an inspectable signature:
    - types such as bool, int or str are called with the first argument only,
      so where(bool) and map(str) work;
    - any other builtin receives all arguments.

    Parameters:
        fn (Callable): The user callback.
        max_args (int): Number of positional arguments the caller passes.

    Returns:
        Callable: A callable accepting exactly max_args positional arguments.

    Raises:
        TypeError: If fn is not callable.
    """
    if not callable(fn):
        raise TypeError(f"callback must be callable, got {type(fn).__name__}")

    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        if not isinstance(fn, type):
            return fn
        positional = 1
    else:
        positional = 0
        for p in params:
            if p.kind is inspect.Parameter.VAR_POSITIONAL:
                return fn
            if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
                positional += 1

    if positional >= max_args:
        return fn

    def _fitted(*args):
        return fn(*args[:positional])

    return _fitted


def is_valid_key(key: Any) -> bool:
    """True for keys a collection accepts: str or int (bool excluded, it hashes like 0 and 1)."""
    return isinstance(key, (str, int)) and not isinstance(key, bool)


def listify(x: object) -> list[object]:
    """
    Convert a key argument into a list of keys.

    Behavior:
    - str, bytes, bytearray are NOT expanded character/byte-wise; they become [value].
    - Mappings contribute their keys.
    - Any other Iterable is expanded into a list of its items.
    - Non-iterables are wrapped as a single-element list: [x].

    Examples:
    - listify("name") -> ["name"]
    - listify(3) -> [3]
    - listify(["name", "job"]) -> ["name", "job"]
    - listify({"a": 1, "b": 2}) -> ["a", "b"]
    """
    from collections.abc import Mapping, Iterable

    if isinstance(x, Mapping):
        return list(x.keys())
    if isinstance(x, (str, bytes, bytearray)):
        return [x]
    if isinstance(x, Iterable):
        return list(x)
    return [x]
