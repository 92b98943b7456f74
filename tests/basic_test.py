import importlib
import importlib.metadata as metadata
import builtins
import io

import pytest


def test_version_fallback(monkeypatch):
    # Force PackageNotFoundError
    monkeypatch.setattr(metadata, "version", lambda _: (_ for _ in ()).throw(metadata.PackageNotFoundError))

    # Fake pyproject.toml content
    fake_toml = b"[project]\nversion = '0.1.0'\n"
    monkeypatch.setattr(builtins, "open", lambda *_: io.BytesIO(fake_toml))

    # Reload the module so the fallback branch executes
    import pyqty
    importlib.reload(pyqty)

    assert pyqty.__version__ == "0.1.0"


def test_lazy_exports_resolve_to_defining_modules():
    import pyqty
    from pyqty.core.quantity import Q, Quantity
    from pyqty.core.conversion import swift_converter

    assert pyqty.Quantity is Quantity
    assert pyqty.Q is Q
    assert pyqty.swift_converter is swift_converter
    assert "parse" in dir(pyqty)


def test_unknown_attribute_raises():
    import pyqty

    with pytest.raises(AttributeError):
        pyqty.does_not_exist


def test_units_namespace_exposes_default_registry():
    import pyqty.units as units
    from pyqty.units.registry import DEFAULT_REGISTRY

    assert units.default_registry is DEFAULT_REGISTRY
    assert "default_registry" in dir(units)
    with pytest.raises(AttributeError):
        units.nope
