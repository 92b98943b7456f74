# tests/conftest.py
import pytest

from pyqty.core.quantity import Quantity
from pyqty.units.registry import DEFAULT_REGISTRY as _registry


@pytest.fixture(scope="session")
def registry():
    return _registry


@pytest.fixture
def fresh_registry():
    """Fully bootstrapped registry, isolated from DEFAULT_REGISTRY."""
    from pyqty.units.registry import _bootstrap_default_registry

    return _bootstrap_default_registry()


@pytest.fixture
def restore_formatter():
    saved = Quantity.formatter
    yield
    Quantity.formatter = saved
