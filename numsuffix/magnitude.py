#
# Numsuffix Magnitude Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
import math

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value

# Decimal places a value is rounded to before it is floored or truncated.
# Absorbs float noise at exact boundaries: log10(1e15) == 14.999999999999998, 1.23 * 10 == 12.299999999999999
NUDGE_DIGITS = 9


# Methods --------------------------------------------------------------------------------------------------------------

def digit_count(x: int | float) -> int:
    """
    Count digits before the decimal point of abs(x), with a floor of 1.

    Examples:
        >>> digit_count(0)
        1
        >>> digit_count(0.5)
        1
        >>> digit_count(999)
        3
        >>> digit_count(1000)
        4
        >>> digit_count(-1e6)
        7

    Raises:
        TypeError: If x is not int or float.
        ValueError: If x is NaN or infinite.
    """
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        raise TypeError(f"x must be int | float, got {fmt_type(x)}")
    if isinstance(x, float) and not math.isfinite(x):
        raise ValueError(f"x must be finite, got {fmt_value(x)}")

    if x == 0:
        return 1

    digits = math.floor(round(math.log10(abs(x)), NUDGE_DIGITS)) + 1
    return max(digits, 1)


def truncate_decimals(x: float, decimals: int) -> float:
    """
    Truncate x toward zero to the given count of fractional digits.

    Unlike round(), never moves a value up to the next digit boundary: 999.99 truncated
    to 0 decimals stays 999. Negative values move toward zero as well.

    The scaled value is rounded to NUDGE_DIGITS places first, so a product like
    1.23 * 10 == 12.299999999999999 still truncates to 12.3 at one decimal.
    Decimals so many that x * 10**decimals leaves the float range return x unchanged.

    Examples:
        >>> truncate_decimals(3.789, 1)
        3.7
        >>> truncate_decimals(-3.789, 1)
        -3.7
        >>> truncate_decimals(999.99, 0)
        999.0

    Raises:
        TypeError: If decimals is not an int.
        ValueError: If decimals is negative.
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise TypeError(f"decimals must be int, got {fmt_type(decimals)}")
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")

    if x == 0:
        return 0.0

    factor = 10 ** decimals
    # Past the float range the decimals exceed the precision of x, truncation keeps it as is
    try:
        shifted = x * factor
    except OverflowError:
        return float(x)
    if isinstance(shifted, float) and math.isinf(shifted):
        return float(x)

    return math.trunc(round(shifted, NUDGE_DIGITS)) / factor


def scaled(significand: float, exponent: int) -> float:
    """
    Return significand * 10**exponent, overflowing to a signed infinity instead of raising.

    Examples:
        >>> scaled(1.5, 3)
        1500.0
        >>> scaled(-2.0, 400)
        -inf
    """
    try:
        return significand * 10.0 ** exponent
    except OverflowError:
        if significand == 0:
            return 0.0
        return math.copysign(math.inf, significand)
