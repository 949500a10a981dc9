"""
Standardize numeric inputs from Python stdlib and third-party libraries.

The formatter works on Python floats. Values arriving as Decimal, Fraction,
NumPy scalars or any object implementing the numeric dunder protocols are
normalized here first, so the formatting core never sees foreign types.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from typing import Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


def std_numeric(value) -> int | float:
    """
    Convert a numeric value to a standard Python int or float.

    Detection priority:
        1. int, float - returned as is
        2. __index__() - exact integers (NumPy integer scalars)
        3. .item() - array and tensor scalars
        4. integer-valued Decimal/Fraction - returned as int
        5. __float__() - Decimal, Fraction, NumPy floats and other float-likes

    Args:
        value: Numeric value to convert.

    Returns:
        int or float. Special float values (inf, -inf, nan) are preserved.

    Raises:
        TypeError: For None, bool, str and any other non-numeric type.

    Examples:
        >>> std_numeric(42)
        42
        >>> std_numeric(Decimal('2.5'))
        2.5
        >>> std_numeric(Fraction(6, 3))
        2
        >>> std_numeric("12")
        Traceback (most recent call last):
            ...
        TypeError: unsupported numeric type: <str>...
    """
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    # Fast path, Python int has arbitrary precision
    if isinstance(value, (int, float)):
        return value

    if value is None or isinstance(value, (str, bytes, bytearray)):
        raise TypeError(f"unsupported numeric type: {fmt_type(value)}, got {fmt_value(value)}")

    # NumPy integers and other exact integer types
    if hasattr(value, '__index__'):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # Array scalars: NumPy, PyTorch, JAX
    if hasattr(value, 'item') and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)):
            return std_numeric(result)

    # Integer-valued Decimal/Fraction keep exact value as int
    if type(value).__name__ in ('Decimal', 'Fraction') and hasattr(value, '__int__'):
        try:
            as_int = int(value)
            if value == type(value)(as_int):
                return as_int
        except (TypeError, ValueError, OverflowError):
            pass

    if isinstance(value, SupportsFloat):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, or types implementing __index__, __float__ or .item() "
        f"(e.g. numpy scalars, Decimal, Fraction)"
    )


def std_float(value) -> float:
    """
    Convert a numeric value to a Python float for formatting.

    Integers beyond the float range become signed infinity rather than raising.

    Raises:
        TypeError: If value is not numeric, see std_numeric().
    """
    num = std_numeric(value)
    if isinstance(num, float):
        return num
    try:
        return float(num)
    except OverflowError:
        return math.inf if num > 0 else -math.inf
