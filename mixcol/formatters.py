"""
Robust formatting of keys, values and types for exception messages.

Collection keys and values are arbitrary user data, so formatters must survive
broken __repr__ methods and very long representations.
"""

# Standard library -----------------------------------------------------------------------------------------------------

from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, max_repr: int = 120) -> str:
    """Format type information of an object or a type.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(float)
        '<type: float>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)

    return f"<type: {_fmt_truncate(type_name, max_repr)}>"


def fmt_value(x: Any, *, max_repr: int = 120) -> str:
    """
    Format a single value as a type–value pair for exception messages.

    Args:
        x: Any Python object to format.
        max_repr: Maximum length of the value's repr before truncation.

    Returns:
        Formatted string like "<int: 42>" or "<str: 'name'>".

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("users.victor", max_repr=8)
        "<str: 'user'...>"
    """
    t = type(x).__name__

    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    # Escape before truncation so the ellipsis is kept verbatim
    base_repr = base_repr.replace(">", "\\>")

    return f"<{t}: {_fmt_truncate(base_repr, max_repr)}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(repr_: str, max_len: int, ellipsis: str = "...") -> str:
    """
    Truncate to at most max_len visible characters and append the ellipsis.

    Quoted reprs keep their quotes, the ellipsis goes outside the closing quote.
    """
    if max_len <= 0:
        return ""
    if len(repr_) <= max_len:
        return repr_

    if len(repr_) >= 2 and repr_[0] in ("'", '"') and repr_[-1] == repr_[0]:
        inner_budget = max(1, max_len - 4)
        return f"{repr_[0]}{repr_[1:1 + inner_budget]}{repr_[0]}{ellipsis}"

    return repr_[:max(1, max_len)] + ellipsis
