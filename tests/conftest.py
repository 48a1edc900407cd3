#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from rounder.number import DecimalNumber


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def num() -> Callable[[str], DecimalNumber]:
    """Parse a decimal literal, shorthand for DecimalNumber.from_text."""
    return DecimalNumber.from_text


@pytest.fixture
def nums() -> Callable[..., list[DecimalNumber]]:
    """Parse several decimal literals into a list."""

    def _parse(*texts: str) -> list[DecimalNumber]:
        return [DecimalNumber.from_text(t) for t in texts]

    return _parse
