"""
pyqty.core.errors
=================

Exception hierarchy raised by the quantity engine.

Every error derives from :class:`QuantityError` and from the builtin exception
that plain Python code would raise in the same situation, so callers may catch
either ``QuantityError`` or e.g. ``TypeError`` for an incompatible conversion.
"""

from __future__ import annotations


class QuantityError(Exception):
    """Base class for all pyqty errors."""


class UnitParseError(QuantityError, ValueError):
    """Malformed quantity string, exponent or unrecognized unit."""


class InvalidArgumentError(QuantityError, TypeError):
    """Constructor or API argument has the wrong shape."""


class IncompatibleUnitsError(QuantityError, TypeError):
    """Units with different signatures were compared, combined or converted."""

    def __init__(self, left: str, right: str) -> None:
        super().__init__(f"Incompatible units: {left} and {right}")
        self.left = left
        self.right = right


class TemperatureDomainError(QuantityError, ValueError):
    """Illegal operation on an absolute temperature."""


class DivideByZeroError(QuantityError, ZeroDivisionError):
    """Division by a zero scalar, quantity or precision."""

    def __init__(self, message: str = "Divide by zero") -> None:
        super().__init__(message)


class UnknownKindError(QuantityError, ValueError):
    """Requested kind is not part of the signature table."""


class UnknownUnitError(QuantityError, ValueError):
    """Requested unit name is not part of the definition table."""


__all__ = [
    "QuantityError",
    "UnitParseError",
    "InvalidArgumentError",
    "IncompatibleUnitsError",
    "TemperatureDomainError",
    "DivideByZeroError",
    "UnknownKindError",
    "UnknownUnitError",
]
