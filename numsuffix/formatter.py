"""
Human-readable display of large numbers with magnitude suffixes: "12.3 billion", "4.56K", "1.00e9".

A FormatConfig bundles the display policy; fmt_number() and fmt_sig_exp() apply it.
Values below the config's min_suffix are shown as plain grouped numbers, larger values
as a significand truncated to the configured significant figures plus a tier suffix.

Examples:
    >>> fmt_number(standard_config, 12345)
    '12,345'
    >>> fmt_number(standard_config, 1.23e10)
    '12.3 billion'
    >>> fmt_number(FormatConfig.short(), 4.567e6)
    '4.56M'
    >>> fmt_number(scientific_config, 1e9)
    '1.00e9'
    >>> fmt_number(standard_config.merge(locale=NumberLocale.de()), 1234567.8)
    '1,23 million'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
import warnings
from dataclasses import dataclass
from typing import Callable, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .locales import NumberLocale, render
from .magnitude import digit_count, scaled, truncate_decimals
from .numeric import std_float
from .sentinels import UNSET, UnsetType
from .suffixes import SUFFIX_DIVISORS, suffix_style, suffix_scientific, suffix_standard, suffix_standard_short
from .suffixes import suffix_alphabetic, suffix_engineering, suffix_long_scale, suffix_long_scale_short
from .tools import fmt_type, fmt_value

# Significant digits a double can carry; more sigfigs show float noise
MAX_FLOAT_SIGFIGS = 17


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FormatConfig:
    """
    Immutable display policy for suffixed numbers.

    Build variants with merge() or the preset class methods, never by mutation.

    Attributes:
        sigfigs: Total significant digits displayed, integer and fractional together.
        suffix_divisor: Exponent step between suffix tiers; 3 for word and E-notation
            tables (one tier per 1000x), 1 for scientific notation.
        min_suffix: Absolute values below this are shown plain, without suffix.
        locale: Digit grouping, decimal point and minus sign.
        suffix: Maps the base-10 exponent of the value to suffix text. Must never raise.

    Examples:
        >>> cfg = FormatConfig.standard()
        >>> cfg.fmt(3.0e8)
        '300 million'
        >>> cfg.merge(suffix=suffix_engineering).fmt(1e7)
        '10.0E6'
        >>> cfg.merge(min_suffix=0).fmt(0)
        '0.00'
    """
    sigfigs: int = 3
    suffix_divisor: int = 3
    min_suffix: int | float = 1e5
    locale: NumberLocale = NumberLocale()
    suffix: Callable[[int], str] = suffix_standard

    def __post_init__(self):
        """Validate fields"""
        if isinstance(self.sigfigs, bool) or not isinstance(self.sigfigs, int):
            raise TypeError(f"sigfigs must be int, but found {fmt_type(self.sigfigs)}")
        if self.sigfigs < 0:
            raise ValueError(f"sigfigs must be >= 0, but found {fmt_value(self.sigfigs)}")

        if isinstance(self.suffix_divisor, bool) or not isinstance(self.suffix_divisor, int):
            raise TypeError(f"suffix_divisor must be int, but found {fmt_type(self.suffix_divisor)}")
        if self.suffix_divisor < 1:
            raise ValueError(f"suffix_divisor must be >= 1, but found {fmt_value(self.suffix_divisor)}")

        if isinstance(self.min_suffix, bool) or not isinstance(self.min_suffix, (int, float)):
            raise TypeError(f"min_suffix must be int | float, but found {fmt_type(self.min_suffix)}")
        if (isinstance(self.min_suffix, float) and math.isnan(self.min_suffix)) or self.min_suffix < 0:
            raise ValueError(f"min_suffix must be >= 0, but found {fmt_value(self.min_suffix)}")

        if not isinstance(self.locale, NumberLocale):
            raise TypeError(f"locale must be NumberLocale, but found {fmt_type(self.locale)}")

        if not callable(self.suffix):
            raise TypeError(f"suffix must be callable, but found {fmt_value(self.suffix)}")

        if self.sigfigs > MAX_FLOAT_SIGFIGS:
            warnings.warn(
                f"sigfigs={self.sigfigs} exceeds the {MAX_FLOAT_SIGFIGS} significant digits of a float, "
                f"trailing digits will show float noise",
                UserWarning,
                stacklevel=3
            )

    @classmethod
    def standard(cls) -> Self:
        """Short-scale words from 100 thousand: '12,345', '123 thousand', '12.3 billion'."""
        return cls()

    @classmethod
    def short(cls) -> Self:
        """Short-scale abbreviations: '123K', '4.56M', '7.89B'."""
        return cls(suffix=suffix_standard_short)

    @classmethod
    def engineering(cls) -> Self:
        """E-notation with exponents in multiples of 3: '10.0E6'."""
        return cls(suffix=suffix_engineering)

    @classmethod
    def scientific(cls) -> Self:
        """E-notation with a single integer digit: '1.00e9'."""
        return cls(suffix_divisor=1, suffix=suffix_scientific)

    @classmethod
    def long_scale(cls) -> Self:
        """Long-scale words: '1.23 milliard', '4.56 billion' for 10¹²."""
        return cls(suffix=suffix_long_scale)

    @classmethod
    def long_scale_short(cls) -> Self:
        """Long-scale abbreviations: '1.23Md', '4.56B' for 10¹²."""
        return cls(suffix=suffix_long_scale_short)

    @classmethod
    def alphabetic(cls) -> Self:
        """Letters past trillions: '1.23T', '4.56aa', '7.89ab'."""
        return cls(suffix=suffix_alphabetic)

    @classmethod
    def from_style(cls, name: str, **overrides) -> Self:
        """
        Preset config for a suffix style name, see suffixes.SUFFIX_STYLES.

        Args:
            name: Style name like 'standard', 'standard-short' or 'scientific'.
            overrides: Field overrides applied via merge().

        Raises:
            ValueError: If the style name is unknown.
        """
        suffix = suffix_style(name)
        return cls(suffix_divisor=SUFFIX_DIVISORS[name], suffix=suffix).merge(**overrides)

    def merge(self,
              # Attrs override
              sigfigs: int | UnsetType = UNSET,
              suffix_divisor: int | UnsetType = UNSET,
              min_suffix: int | float | UnsetType = UNSET,
              locale: NumberLocale | UnsetType = UNSET,
              suffix: Callable[[int], str] | UnsetType = UNSET,
              ) -> "FormatConfig":
        """
        Create a new FormatConfig with overridden fields.

        Parameters not provided (UNSET) are inherited from the current instance.
        """
        return FormatConfig(
            sigfigs=self.sigfigs if sigfigs is UNSET else sigfigs,
            suffix_divisor=self.suffix_divisor if suffix_divisor is UNSET else suffix_divisor,
            min_suffix=self.min_suffix if min_suffix is UNSET else min_suffix,
            locale=self.locale if locale is UNSET else locale,
            suffix=self.suffix if suffix is UNSET else suffix,
        )

    def fmt(self, number) -> str:
        """Shorthand for fmt_number(self, number)."""
        return fmt_number(self, number)


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_number(config: FormatConfig, number) -> str:
    """
    Format a number for display according to config.

    Splits the number into a significand in [1, 10) and its base-10 exponent and
    formats that pair with fmt_sig_exp().

    Args:
        config: Display policy.
        number: int, float, Decimal, Fraction, NumPy scalar or anything with __float__.

    Returns:
        Display string like '12,345', '-99,999' or '12.3 billion'.

    Raises:
        TypeError: If number is not numeric (bool and str included) or config is not a FormatConfig.
        ValueError: If number is NaN or infinite, including ints beyond the float range.
    """
    _validate_config(config)
    n = std_float(number)
    if not math.isfinite(n):
        raise ValueError(f"number must be finite, but found {fmt_value(number)}")

    exp = digit_count(n) - 1
    sig = n / 10 ** exp
    return fmt_sig_exp(config, sig, exp)


def fmt_int(config: FormatConfig, number: int) -> str:
    """
    Format an integer, a convenience over fmt_number() with the same output.

    Raises:
        TypeError: If number is not an integer (floats included); bool is rejected.
        ValueError: If number is beyond the float range.
    """
    if isinstance(number, bool):
        raise TypeError(f"number must be int, but found {fmt_type(number)}")
    try:
        number = operator.index(number)
    except TypeError as exc:
        raise TypeError(f"number must be int, but found {fmt_type(number)}") from exc
    return fmt_number(config, number)


def fmt_sig_exp(config: FormatConfig, significand, exponent: int) -> str:
    """
    Format a number given as significand * 10**exponent.

    Useful where magnitude is tracked separately from the significand, e.g. counters
    growing past the float range. The significand is expected in [1, 10); it is shifted
    by abs(exponent) % suffix_divisor digits so it spans one suffix tier, e.g. [1, 1000)
    for a divisor of 3.

    If the reconstructed value is below config.min_suffix it is shown plain, with an
    all-zero fractional part dropped. A reconstructed value overflowing to infinity is
    always suffixed.

    Examples:
        >>> fmt_sig_exp(standard_config, 1.5, 9)
        '1.50 billion'
        >>> fmt_sig_exp(standard_config, 2.0, 3)
        '2,000'
        >>> fmt_sig_exp(standard_config, 1.0, 400)
        '10.0E399'

    Raises:
        TypeError: If significand is not numeric or exponent is not an int.
        ValueError: If significand is NaN or infinite.
    """
    _validate_config(config)
    sig = std_float(significand)
    if not math.isfinite(sig):
        raise ValueError(f"significand must be finite, but found {fmt_value(significand)}")
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise TypeError(f"exponent must be int, but found {fmt_type(exponent)}")

    tier_shift = abs(exponent) % config.suffix_divisor
    n = scaled(sig, exponent)

    if abs(n) < config.min_suffix:
        return drop_zero_decimals(fmt_significant(config.locale, config.sigfigs, n), config.locale)

    tier_sig = scaled(sig, tier_shift)
    return fmt_significant(config.locale, config.sigfigs, tier_sig) + config.suffix(exponent)


def fmt_significant(locale: NumberLocale, sigfigs: int, value: float) -> str:
    """
    Render value truncated to sigfigs significant digits.

    Decimal places shrink as the integer part grows and never go negative, so integer
    digits beyond sigfigs are kept as is.

    Examples:
        >>> fmt_significant(NumberLocale.en(), 3, 12.3456)
        '12.3'
        >>> fmt_significant(NumberLocale.en(), 3, 999.99)
        '999'
        >>> fmt_significant(NumberLocale.en(), 3, 12345)
        '12,345'
        >>> fmt_significant(NumberLocale.en(), 3, -3.789)
        '-3.78'
    """
    decimals = max(0, sigfigs - digit_count(value))
    return render(truncate_decimals(value, decimals), decimals, locale)


def drop_zero_decimals(s: str, locale: NumberLocale) -> str:
    """
    Drop a fractional part made of zeros only: '3.00' → '3', '3.10' stays.

    Examples:
        >>> drop_zero_decimals("1,234.00", NumberLocale.en())
        '1,234'
        >>> drop_zero_decimals("1.234,50", NumberLocale.de())
        '1.234,50'
    """
    int_part, sep, frac_part = s.rpartition(locale.decimal)
    if sep and frac_part and frac_part.strip("0") == "":
        return int_part
    return s


def _validate_config(config: FormatConfig):
    if not isinstance(config, FormatConfig):
        raise TypeError(f"config must be FormatConfig, but found {fmt_type(config)}")


# Presets --------------------------------------------------------------------------------------------------------------

standard_config = FormatConfig.standard()
scientific_config = FormatConfig.scientific()
