import pytest
from css_selector_builder import SelectorLoader, css_selector_builder

@pytest.fixture
def builder():
    """Return the shared selector builder facade."""
    return css_selector_builder

@pytest.fixture
def loader():
    """Return a SelectorLoader that checks rendered selectors with cssselect."""
    return SelectorLoader(check_syntax=True)
