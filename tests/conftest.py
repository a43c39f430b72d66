#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from sexa.symbols import Symbols
from sexa.units import angle_from_sexa


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def ascii_symbols() -> Symbols:
    return Symbols.ascii()


@pytest.fixture
def blank_symbols() -> Symbols:
    """No unit glyphs and no decimal separator, for fixed columns."""
    return Symbols.blank()


@pytest.fixture
def obliquity() -> float:
    """23°26′44″ in radians."""
    return angle_from_sexa(" ", 23, 26, 44)
