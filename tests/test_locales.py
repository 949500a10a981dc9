#
# Numsuffix - Locales Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import FrozenInstanceError

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numsuffix.locales import NBSP, NNBSP, NumberLocale, render


# Tests ----------------------------------------------------------------------------------------------------------------

class TestNumberLocale:

    def test_defaults_english(self):
        assert NumberLocale() == NumberLocale.en()

    def test_frozen(self):
        loc = NumberLocale()
        with pytest.raises(FrozenInstanceError):
            loc.group = "."

    @pytest.mark.parametrize('kwargs, error', [
        pytest.param(dict(group=1), TypeError, id='group_type'),
        pytest.param(dict(decimal=None), TypeError, id='decimal_type'),
        pytest.param(dict(minus=b"-"), TypeError, id='minus_type'),
        pytest.param(dict(grouping=1), TypeError, id='grouping_type'),
        pytest.param(dict(decimal=""), ValueError, id='empty_decimal'),
        pytest.param(dict(group=".", decimal="."), ValueError, id='same_separators'),
    ])
    def test_invalid(self, kwargs, error):
        with pytest.raises(error):
            NumberLocale(**kwargs)

    def test_same_separators_without_grouping(self):
        loc = NumberLocale(group=".", decimal=".", grouping=False)
        assert render(1234.5, 1, loc) == "1234.5"

    def test_merge(self):
        loc = NumberLocale.en().merge(minus="−")
        assert loc.minus == "−"
        assert loc.group == ","
        assert NumberLocale.en().minus == "-"

    @pytest.mark.parametrize('tag, expected', [
        pytest.param("en", NumberLocale.en(), id='en'),
        pytest.param("en-US", NumberLocale.en(), id='en_US'),
        pytest.param("de_DE", NumberLocale.de(), id='de_DE'),
        pytest.param("de-AT", NumberLocale.de(), id='de_AT'),
        pytest.param("de-CH", NumberLocale.ch(), id='de_CH'),
        pytest.param(" FR ", NumberLocale.fr(), id='fr_padded_upper'),
        pytest.param("ru", NumberLocale(group=NBSP, decimal=","), id='ru'),
    ])
    def test_from_tag(self, tag, expected):
        assert NumberLocale.from_tag(tag) == expected

    def test_from_tag_unknown(self):
        with pytest.raises(ValueError, match="unknown locale tag"):
            NumberLocale.from_tag("xx-YY")

    def test_from_tag_type(self):
        with pytest.raises(TypeError):
            NumberLocale.from_tag(None)


class TestRender:

    @pytest.mark.parametrize('value, decimals, locale, expected', [
        pytest.param(1234567.891, 2, NumberLocale.en(), "1,234,567.89", id='en'),
        pytest.param(1234567.891, 2, NumberLocale.de(), "1.234.567,89", id='de'),
        pytest.param(1234567.891, 2, NumberLocale.fr(), f"1{NNBSP}234{NNBSP}567,89", id='fr'),
        pytest.param(1234567.891, 2, NumberLocale.ch(), "1'234'567.89", id='ch'),
        pytest.param(1234567.891, 2, NumberLocale.plain(), "1234567.89", id='plain'),
        pytest.param(1234.5, 2, NumberLocale.en(), "1,234.50", id='zero_padded'),
        pytest.param(999.0, 0, NumberLocale.en(), "999", id='no_decimals'),
        pytest.param(0.0, 2, NumberLocale.en(), "0.00", id='zero'),
        pytest.param(-99999.0, 0, NumberLocale.en(), "-99,999", id='negative'),
        pytest.param(-1.5, 1, NumberLocale.de(), "-1,5", id='negative_de'),
        pytest.param(-1.5, 1, NumberLocale.en().merge(minus="−"), "−1.5", id='custom_minus'),
        pytest.param(float("inf"), 2, NumberLocale.en(), "inf", id='inf'),
        pytest.param(float("-inf"), 2, NumberLocale.en(), "-inf", id='neg_inf'),
        pytest.param(float("nan"), 2, NumberLocale.en(), "nan", id='nan'),
    ])
    def test_values(self, value, decimals, locale, expected):
        assert render(value, decimals, locale) == expected

    def test_invalid_args(self):
        with pytest.raises(ValueError):
            render(1.0, -1, NumberLocale())
        with pytest.raises(TypeError):
            render(1.0, 1.0, NumberLocale())
        with pytest.raises(TypeError):
            render(1.0, 1, "en")
