"""
pyqty: units of measure for Python.

pyqty parses quantities such as ``"2.5 kg*m/s^2"``, converts them between
compatible units, and does arithmetic on them while keeping track of their
dimension. This module exposes a minimal, stable public API. Heavy
subsystems (the unit registry and its parser) are imported lazily to avoid
import-time side effects and circular imports.
"""

from importlib import metadata as _metadata
from typing import Any

__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject for local dev.
try:
    __version__ = _metadata.version("pyqty")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# public name -> defining module
_LAZY = {
    "Quantity": "pyqty.core.quantity",
    "Q": "pyqty.core.quantity",
    "parse": "pyqty.core.quantity",
    "swift_converter": "pyqty.core.conversion",
    "get_kinds": "pyqty.core.dimensions",
    "get_units": "pyqty.units.registry",
    "get_aliases": "pyqty.units.registry",
    "mul_safe": "pyqty.core.utils",
    "div_safe": "pyqty.core.utils",
    "QuantityError": "pyqty.core.errors",
    "UnitParseError": "pyqty.core.errors",
    "InvalidArgumentError": "pyqty.core.errors",
    "IncompatibleUnitsError": "pyqty.core.errors",
    "TemperatureDomainError": "pyqty.core.errors",
    "DivideByZeroError": "pyqty.core.errors",
    "UnknownKindError": "pyqty.core.errors",
    "UnknownUnitError": "pyqty.core.errors",
}


def __getattr__(name: str) -> Any:
    module = _LAZY.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module

    value = getattr(import_module(module), name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY))


__all__ = ["__version__", "__license__", *_LAZY]
