"""
Type-aware formatting of values for exception and warning messages.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

PRIMITIVE_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
)


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, max_repr: int = 120) -> str:
    """
    Format the type of an object, or the type itself, as '<name>'.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(float)
        '<float>'
        >>> fmt_type(NumberLocale())
        '<NumberLocale>'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    name = getattr(cls, "__name__", None) or repr(cls)
    return f"<{_truncate(name, max_repr)}>"


def fmt_value(obj: Any, *, max_repr: int = 120) -> str:
    """
    Format a value for error messages.

    Primitives are shown as their repr, anything else as a '<type: repr>' pair.
    A broken __repr__ never propagates.

    Examples:
        >>> fmt_value(42)
        '42'
        >>> fmt_value("abc")
        "'abc'"
        >>> fmt_value([1, 2])
        '<list: [1, 2]>'
    """
    repr_ = _truncate(_safe_repr(obj), max_repr)
    if type(obj) in PRIMITIVE_TYPES:
        return repr_
    return f"<{type(obj).__name__}: {repr_}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _safe_repr(obj: Any) -> str:
    try:
        return repr(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"


def _truncate(s: str, max_len: int, ellipsis: str = "…") -> str:
    if max_len < 1 or len(s) <= max_len:
        return s
    return s[:max(max_len - len(ellipsis), 0)] + ellipsis
