#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from varinspect.options import reset_options


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def default_options():
    """Run every test against the built-in inspect defaults."""
    reset_options()
    yield
    reset_options()
