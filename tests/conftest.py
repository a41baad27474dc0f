import pytest

from uniescape import UniescapeTransformer
from uniescape.registry import reset_shared_registry


@pytest.fixture(autouse=True)
def fresh_registry():
    """Give every test its own shared registry."""
    reset_shared_registry()
    yield
    reset_shared_registry()


@pytest.fixture
def transformer():
    """Fixture that provides a UniescapeTransformer instance for tests."""
    return UniescapeTransformer()
