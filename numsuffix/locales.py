"""
Locale punctuation for numeric display: digit grouping, decimal point and negative sign.

Only the rendering of digits is locale-aware here. Suffix words are not translated.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import UNSET, UnsetType
from .tools import fmt_type, fmt_value

NNBSP = "\u202f"  # narrow no-break space
NBSP = "\u00a0"  # no-break space


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberLocale:
    """
    Number punctuation of a locale.

    Attributes:
        group: Digit grouping separator inserted every three integer digits; may be empty.
        decimal: Decimal point character.
        minus: Prefix for negative values; an ASCII hyphen-minus by default, not a typographic minus.
        grouping: Insert group separators at all.

    Examples:
        >>> render(1234567.891, 2, NumberLocale.en())
        '1,234,567.89'
        >>> render(1234567.891, 2, NumberLocale.de())
        '1.234.567,89'
        >>> render(-1234.5, 1, NumberLocale.plain())
        '-1234.5'
    """
    group: str = ","
    decimal: str = "."
    minus: str = "-"
    grouping: bool = True

    def __post_init__(self):
        """Validate fields"""
        for name in ("group", "decimal", "minus"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"locale {name} must be str, but found {fmt_type(value)}")

        if not isinstance(self.grouping, bool):
            raise TypeError(f"locale grouping must be bool, but found {fmt_type(self.grouping)}")

        if not self.decimal:
            raise ValueError("locale decimal separator must be a non-empty string")

        if self.grouping and self.group == self.decimal:
            raise ValueError(f"locale group and decimal separators must differ, "
                             f"but both are {fmt_value(self.decimal)}")

    @classmethod
    def en(cls) -> Self:
        """English: 1,234,567.89"""
        return cls(group=",", decimal=".")

    @classmethod
    def de(cls) -> Self:
        """German and most continental European locales: 1.234.567,89"""
        return cls(group=".", decimal=",")

    @classmethod
    def fr(cls) -> Self:
        """French: 1 234 567,89 with a narrow no-break space."""
        return cls(group=NNBSP, decimal=",")

    @classmethod
    def ch(cls) -> Self:
        """Swiss: 1'234'567.89"""
        return cls(group="'", decimal=".")

    @classmethod
    def plain(cls) -> Self:
        """No grouping: 1234567.89"""
        return cls(group="", decimal=".", grouping=False)

    @classmethod
    def from_tag(cls, tag: str) -> Self:
        """
        Resolve a locale from a language tag like 'en', 'de-DE', 'fr_CA' or 'de-CH'.

        A language-region pair wins over the bare language, so 'de-CH' resolves to Swiss
        punctuation and 'de-AT' to German.

        Raises:
            TypeError: If tag is not a str.
            ValueError: If the language is not known.
        """
        if not isinstance(tag, str):
            raise TypeError(f"locale tag must be str, but found {fmt_type(tag)}")

        parts = tag.strip().replace("_", "-").lower().split("-")
        if len(parts) > 1 and f"{parts[0]}-{parts[1]}" in _REGION_LOCALES:
            return _REGION_LOCALES[f"{parts[0]}-{parts[1]}"]
        if parts[0] in _LANGUAGE_LOCALES:
            return _LANGUAGE_LOCALES[parts[0]]

        raise ValueError(f"unknown locale tag {fmt_value(tag)}, "
                         f"expected a language among {tuple(sorted(_LANGUAGE_LOCALES))}")

    def merge(self,
              group: str | UnsetType = UNSET,
              decimal: str | UnsetType = UNSET,
              minus: str | UnsetType = UNSET,
              grouping: bool | UnsetType = UNSET,
              ) -> "NumberLocale":
        """
        Create a new NumberLocale with overridden fields.

        Parameters not provided (UNSET) are inherited from the current instance.
        """
        return NumberLocale(
            group=self.group if group is UNSET else group,
            decimal=self.decimal if decimal is UNSET else decimal,
            minus=self.minus if minus is UNSET else minus,
            grouping=self.grouping if grouping is UNSET else grouping,
        )


# @formatter:off
_LANGUAGE_LOCALES = {
    "en": NumberLocale.en(), "ja": NumberLocale.en(), "zh": NumberLocale.en(), "ko": NumberLocale.en(),
    "de": NumberLocale.de(), "es": NumberLocale.de(), "it": NumberLocale.de(), "nl": NumberLocale.de(),
    "pt": NumberLocale.de(), "da": NumberLocale.de(), "id": NumberLocale.de(), "tr": NumberLocale.de(),
    "fr": NumberLocale.fr(),
    "ru": NumberLocale(group=NBSP, decimal=","), "pl": NumberLocale(group=NBSP, decimal=","),
    "cs": NumberLocale(group=NBSP, decimal=","), "sv": NumberLocale(group=NBSP, decimal=","),
    "fi": NumberLocale(group=NBSP, decimal=","), "nb": NumberLocale(group=NBSP, decimal=","),
}

_REGION_LOCALES = {
    "de-ch": NumberLocale.ch(), "it-ch": NumberLocale.ch(), "fr-ch": NumberLocale(group=NNBSP, decimal="."),
    "de-li": NumberLocale.ch(),
}
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def render(value: float, decimals: int, locale: NumberLocale) -> str:
    """
    Render a float with exactly `decimals` fractional digits using locale punctuation.

    Rounds to the nearest representable decimal like format(); callers wanting
    truncation pass an already truncated value.

    Examples:
        >>> render(1234.5, 2, NumberLocale.en())
        '1,234.50'
        >>> render(-0.25, 1, NumberLocale.fr())
        '-0,2'
        >>> render(float('-inf'), 2, NumberLocale.en())
        '-inf'

    Raises:
        TypeError: If decimals is not an int or locale is not a NumberLocale.
        ValueError: If decimals is negative.
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise TypeError(f"decimals must be int, got {fmt_type(decimals)}")
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    if not isinstance(locale, NumberLocale):
        raise TypeError(f"locale must be NumberLocale, got {fmt_type(locale)}")

    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return f"{locale.minus}inf" if value < 0 else "inf"

    body = format(abs(value), f",.{decimals}f" if locale.grouping else f".{decimals}f")
    int_part, _, frac_part = body.partition(".")

    if locale.grouping:
        int_part = int_part.replace(",", locale.group)

    number = f"{int_part}{locale.decimal}{frac_part}" if frac_part else int_part
    return f"{locale.minus}{number}" if value < 0 else number
