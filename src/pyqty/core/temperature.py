"""
pyqty.core.temperature
======================

Absolute temperatures and temperature differences.

Two atom families share the temperature signature:

- degrees (``<kelvin>``, ``<celsius>``, ``<fahrenheit>``, ``<rankine>``) are
  differences and convert linearly;
- absolute temperatures (``<temp-K>``, ``<temp-C>``, ``<temp-F>``,
  ``<temp-R>``) are points on an offset scale and convert through kelvin.

The helpers here take and return :class:`~pyqty.core.quantity.Quantity`
instances; results are built with the class of their source operand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Sequence

from pyqty.core.errors import TemperatureDomainError
from pyqty.core.unit import UNITY, UNITY_ARRAY
from pyqty.units.registry import DEFAULT_REGISTRY

if TYPE_CHECKING:
    from pyqty.core.quantity import Quantity

TEMP_K = "<temp-K>"
TEMP_C = "<temp-C>"
TEMP_F = "<temp-F>"
TEMP_R = "<temp-R>"

DEG_K = "<kelvin>"
DEG_C = "<celsius>"
DEG_F = "<fahrenheit>"
DEG_R = "<rankine>"

TEMPERATURE_ATOMS = frozenset({TEMP_K, TEMP_C, TEMP_F, TEMP_R})
DEGREE_ATOMS = frozenset({DEG_K, DEG_C, DEG_F, DEG_R})

# Degree atom measuring differences on the scale of each absolute temperature
TEMPERATURE_TO_DEGREE: Dict[str, str] = {
    TEMP_K: DEG_K,
    TEMP_C: DEG_C,
    TEMP_F: DEG_F,
    TEMP_R: DEG_R,
}

ABSOLUTE_ZERO_CELSIUS = 273.15
ABSOLUTE_ZERO_FAHRENHEIT = 459.67


def _single_atom(numerator: Sequence[str], denominator: Sequence[str]) -> str | None:
    if len(numerator) != 1 or tuple(denominator) != UNITY_ARRAY:
        return None
    return numerator[0]


def is_temperature_atoms(numerator: Sequence[str], denominator: Sequence[str]) -> bool:
    """True for exactly one absolute temperature atom over unity."""
    return _single_atom(numerator, denominator) in TEMPERATURE_ATOMS


def is_degree_atoms(numerator: Sequence[str], denominator: Sequence[str]) -> bool:
    """True for exactly one degree atom over unity."""
    return _single_atom(numerator, denominator) in DEGREE_ATOMS


def contains_temperature(atoms: Sequence[str]) -> bool:
    return any("temp" in atom for atom in atoms if atom != UNITY)


def degree_atom_of(temp: "Quantity") -> str:
    atom = temp.numerator[0]
    try:
        return TEMPERATURE_TO_DEGREE[atom]
    except KeyError:
        raise TemperatureDomainError(
            f"Unknown type for temp conversion from: {temp.unit()}"
        ) from None


# ---------------- arithmetic ----------------
def add_temp_degrees(temp: "Quantity", deg: "Quantity") -> "Quantity":
    """Shift an absolute temperature by a degree difference."""
    shift = deg.to(_degree_unit(temp)).scalar
    return temp.__class__(temp.scalar + shift, temp.numerator, temp.denominator)


def subtract_temp_degrees(temp: "Quantity", deg: "Quantity") -> "Quantity":
    shift = deg.to(_degree_unit(temp)).scalar
    return temp.__class__(temp.scalar - shift, temp.numerator, temp.denominator)


def subtract_temperatures(lhs: "Quantity", rhs: "Quantity") -> "Quantity":
    """Difference of two absolute temperatures, as degrees on the scale of ``lhs``."""
    rhs_converted = rhs.to(lhs.unit())
    return lhs.__class__(
        lhs.scalar - rhs_converted.scalar, (degree_atom_of(lhs),), UNITY_ARRAY
    )


def _degree_unit(temp: "Quantity") -> str:
    return DEFAULT_REGISTRY.output_name(degree_atom_of(temp))


# ---------------- conversions ----------------
def to_temp(src: "Quantity", dst: "Quantity") -> "Quantity":
    """Convert ``src`` to the absolute temperature scale of ``dst``."""
    base = src.base_scalar
    atom = dst.numerator[0]
    if atom == TEMP_K:
        scalar = base
    elif atom == TEMP_C:
        scalar = base - ABSOLUTE_ZERO_CELSIUS
    elif atom == TEMP_F:
        scalar = base * 9 / 5 - ABSOLUTE_ZERO_FAHRENHEIT
    elif atom == TEMP_R:
        scalar = base * 9 / 5
    else:
        raise TemperatureDomainError(f"Unknown type for temp conversion to: {dst.unit()}")
    return src.__class__(scalar, dst.numerator, dst.denominator)


def to_degrees(src: "Quantity", dst: "Quantity") -> "Quantity":
    """Convert ``src`` to the degree scale of ``dst``, dropping any offset."""
    deg_k = _to_deg_k(src)
    atom = dst.numerator[0]
    if atom in (DEG_K, DEG_C):
        scalar = deg_k
    elif atom in (DEG_F, DEG_R):
        scalar = deg_k * 9 / 5
    else:
        raise TemperatureDomainError(f"Unknown type for degree conversion to: {dst.unit()}")
    return src.__class__(scalar, dst.numerator, dst.denominator)


def _to_deg_k(qty: "Quantity") -> float:
    if qty.is_degrees():
        return qty.base_scalar

    atom = qty.numerator[0]
    if atom in (TEMP_K, TEMP_C):
        return qty.scalar
    if atom in (TEMP_F, TEMP_R):
        return qty.scalar * 5 / 9
    raise TemperatureDomainError(f"Unknown type for temp conversion from: {qty.unit()}")


def to_temp_k(qty: "Quantity") -> "Quantity":
    """Absolute temperature ``qty`` expressed in ``tempK``."""
    atom = qty.numerator[0]
    if atom == TEMP_K:
        scalar = qty.scalar
    elif atom == TEMP_C:
        scalar = qty.scalar + ABSOLUTE_ZERO_CELSIUS
    elif atom == TEMP_F:
        scalar = (qty.scalar + ABSOLUTE_ZERO_FAHRENHEIT) * 5 / 9
    elif atom == TEMP_R:
        scalar = qty.scalar * 5 / 9
    else:
        raise TemperatureDomainError(f"Unknown type for temp conversion from: {qty.unit()}")
    return qty.__class__(scalar, (TEMP_K,), UNITY_ARRAY)


__all__ = [
    "TEMPERATURE_ATOMS",
    "DEGREE_ATOMS",
    "TEMPERATURE_TO_DEGREE",
    "is_temperature_atoms",
    "is_degree_atoms",
    "contains_temperature",
    "degree_atom_of",
    "add_temp_degrees",
    "subtract_temp_degrees",
    "subtract_temperatures",
    "to_temp",
    "to_degrees",
    "to_temp_k",
]
