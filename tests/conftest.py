#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numsuffix.formatter import FormatConfig

PRESETS = {
    "standard": FormatConfig.standard,
    "short": FormatConfig.short,
    "engineering": FormatConfig.engineering,
    "scientific": FormatConfig.scientific,
    "long_scale": FormatConfig.long_scale,
    "long_scale_short": FormatConfig.long_scale_short,
    "alphabetic": FormatConfig.alphabetic,
}


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(params=list(PRESETS), ids=list(PRESETS))
def preset_config(request) -> FormatConfig:
    """Every preset FormatConfig in turn."""
    return PRESETS[request.param]()


@pytest.fixture
def suffix_digits():
    """Count digits of the significand in a suffixed display string."""

    def _count(s: str) -> int:
        number = s.lstrip("-")
        head = ""
        for ch in number:
            if ch.isdigit() or ch in ",.":
                head += ch
            else:
                break
        return sum(ch.isdigit() for ch in head)

    return _count
