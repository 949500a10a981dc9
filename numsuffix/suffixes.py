#
# Numsuffix Suffix Tables
#

# Standard library -----------------------------------------------------------------------------------------------------
from itertools import product
from string import ascii_lowercase
from types import MappingProxyType
from typing import Callable, Final, Mapping, Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_value

# Tables are indexed by tier, where tier = exponent // 3 (one tier per 1000x)

# @formatter:off

STANDARD: Final[tuple[str, ...]] = (
    "",                      # 10⁰
    " thousand",             # 10³
    " million",              # 10⁶
    " billion",              # 10⁹
    " trillion",             # 10¹²
    " quadrillion",
    " quintillion",
    " sextillion",
    " septillion",
    " octillion",
    " nonillion",            # 10³⁰
    " decillion",
    " undecillion",
    " duodecillion",
    " tredecillion",
    " quattuordecillion",
    " quindecillion",
    " sexdecillion",
    " septendecillion",
    " octodecillion",
    " novemdecillion",       # 10⁶⁰
    " vigintillion",
    " unvigintillion",
    " duovigintillion",
    " trevigintillion",
    " quattuorvigintillion",
    " quinvigintillion",
    " sexvigintillion",
    " septenvigintillion",
    " octovigintillion",
    " novemvigintillion",    # 10⁹⁰
    " trigintillion",
    " untrigintillion",
    " duotrigintillion",     # 10⁹⁹
)

STANDARD_SHORT: Final[tuple[str, ...]] = (
    "", "K", "M", "B", "T", "Qa", "Qi", "Sx", "Sp", "Oc", "No",
    "Dc", "UDc", "DDc", "TDc", "QaDc", "QiDc", "SxDc", "SpDc", "ODc", "NDc",
    "Vg", "UVg", "DVg", "TVg", "QaVg", "QiVg", "SxVg", "SpVg", "OVg", "NVg",
    "Tg", "UTg", "DTg",
)

# Long scale: a new word every 10⁶, with -iard names in between
LONG_SCALE: Final[tuple[str, ...]] = (
    "",                      # 10⁰
    " thousand",             # 10³
    " million",              # 10⁶
    " milliard",             # 10⁹
    " billion",              # 10¹²
    " billiard",
    " trillion",             # 10¹⁸
    " trilliard",
    " quadrillion",          # 10²⁴
    " quadrilliard",
    " quintillion",          # 10³⁰
    " quintilliard",
    " sextillion",
    " sextilliard",
    " septillion",
    " septilliard",
    " octillion",
    " octilliard",
    " nonillion",
    " nonilliard",
    " decillion",            # 10⁶⁰
    " decilliard",
)

LONG_SCALE_SHORT: Final[tuple[str, ...]] = (
    "", "K", "M", "Md", "B", "Bd", "T", "Td", "Qa", "Qad", "Qi", "Qid",
    "Sx", "Sxd", "Sp", "Spd", "Oc", "Ocd", "No", "Nod", "Dc", "Dcd",
)

# K, M, B, T, then aa, ab, ... az, ba, ... zz
ALPHABETIC: Final[tuple[str, ...]] = (
    ("", "K", "M", "B", "T") + tuple(a + b for a, b in product(ascii_lowercase, repeat=2))
)

# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def suffix_lookup(table: Sequence[str], tier: int) -> str:
    """
    Suffix of a tier from a table, or the generated 'E<tier * 3>' suffix outside the table.

    The fallback is always in thousands (tier * 3), whatever the table's own step is.

    Examples:
        >>> suffix_lookup(STANDARD, 2)
        ' million'
        >>> suffix_lookup(STANDARD, 40)
        'E120'
    """
    if 0 <= tier < len(table):
        return table[tier]
    return f"E{tier * 3}"


def suffix_standard(digits: int) -> str:
    """Short-scale words: ' thousand', ' million', ' billion', ..."""
    return suffix_lookup(STANDARD, _tier(digits))


def suffix_standard_short(digits: int) -> str:
    """Short-scale abbreviations: 'K', 'M', 'B', 'T', 'Qa', ..."""
    return suffix_lookup(STANDARD_SHORT, _tier(digits))


def suffix_long_scale(digits: int) -> str:
    """Long-scale words: ' million', ' milliard', ' billion', ..."""
    return suffix_lookup(LONG_SCALE, _tier(digits))


def suffix_long_scale_short(digits: int) -> str:
    """Long-scale abbreviations: 'M', 'Md', 'B', 'Bd', ..."""
    return suffix_lookup(LONG_SCALE_SHORT, _tier(digits))


def suffix_alphabetic(digits: int) -> str:
    """'K', 'M', 'B', 'T', then 'aa', 'ab', ..."""
    return suffix_lookup(ALPHABETIC, _tier(digits))


def suffix_scientific(digits: int) -> str:
    """
    E-notation on the raw exponent: 'e9' for 10⁹, nothing up to 10³.

    Meant for a divisor of 1, so the significand stays in [1, 10).
    """
    if digits <= 3:
        return ""
    return f"e{digits}"


def suffix_engineering(digits: int) -> str:
    """
    E-notation with the exponent rounded down to a multiple of 3: 'E6' for 10⁷.
    """
    if digits <= 3:
        return ""
    return f"E{(digits // 3) * 3}"


SUFFIX_STYLES: Final[Mapping[str, Callable[[int], str]]] = MappingProxyType({
    "standard": suffix_standard,
    "standard-short": suffix_standard_short,
    "engineering": suffix_engineering,
    "scientific": suffix_scientific,
    "long-scale": suffix_long_scale,
    "long-scale-short": suffix_long_scale_short,
    "alphabetic": suffix_alphabetic,
})

# Exponent step between tiers of each style, see FormatConfig.suffix_divisor
SUFFIX_DIVISORS: Final[Mapping[str, int]] = MappingProxyType({
    "standard": 3,
    "standard-short": 3,
    "engineering": 3,
    "scientific": 1,
    "long-scale": 3,
    "long-scale-short": 3,
    "alphabetic": 3,
})

_STYLE_TABLES: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "standard": STANDARD,
    "standard-short": STANDARD_SHORT,
    "long-scale": LONG_SCALE,
    "long-scale-short": LONG_SCALE_SHORT,
    "alphabetic": ALPHABETIC,
})


def suffix_style(name: str) -> Callable[[int], str]:
    """
    Suffix function registered under a style name.

    Raises:
        ValueError: If the style name is unknown.
    """
    try:
        return SUFFIX_STYLES[name]
    except (KeyError, TypeError):
        raise ValueError(f"suffix style expected one of {tuple(SUFFIX_STYLES)}, "
                         f"but found {fmt_value(name)}") from None


def suffix_table(name: str) -> tuple[str, ...]:
    """
    Static suffix table behind a table-driven style.

    Raises:
        ValueError: If the style is unknown or generates its suffixes without a table.
    """
    if name not in _STYLE_TABLES:
        raise ValueError(f"suffix table expected one of {tuple(_STYLE_TABLES)}, "
                         f"but found {fmt_value(name)}")
    return _STYLE_TABLES[name]


def _tier(digits: int) -> int:
    """Integer division by 3, truncating toward zero for negative exponents."""
    tier = abs(digits) // 3
    return tier if digits >= 0 else -tier


# Module Sanity Checks -------------------------------------------------------------------------------------------------

if set(_STYLE_TABLES) - set(SUFFIX_STYLES):
    raise AssertionError("Configuration Error: every suffix table must have a registered suffix style.")

if set(SUFFIX_DIVISORS) != set(SUFFIX_STYLES):
    raise AssertionError("Configuration Error: every suffix style must have exactly one suffix divisor.")
