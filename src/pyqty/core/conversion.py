"""
pyqty.core.conversion
=====================

Reduction of atom sequences to base units, and bulk conversion.

:func:`to_base_units` only depends on the unit, not on the scalar, so its
result is memoized per unit string in a process-wide cache. Entries are
never evicted; :func:`clear_cache` drops them all and is called whenever the
default registry changes.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, Dict, List, Sequence, Union

from pyqty.core.unit import UNITY, ScalarAndUnit
from pyqty.core.utils import mul_safe
from pyqty.units.registry import DEFAULT_REGISTRY, UnitsRegistry

if TYPE_CHECKING:
    from pyqty.core.quantity import Quantity

logger = logging.getLogger(__name__)

Number = Union[int, float]
Converter = Callable[[Union[Number, Sequence[Number]]], Union[float, List[float]]]

_BASE_UNIT_CACHE: Dict[str, ScalarAndUnit] = {}
_CACHE_LOCK = threading.Lock()


def to_base_units(
    numerator: Sequence[str],
    denominator: Sequence[str],
    registry: UnitsRegistry = DEFAULT_REGISTRY,
) -> ScalarAndUnit:
    """
    Expand every atom into its base-unit definition.

    Prefixes and unit scalars in the numerator multiply the factor, those in
    the denominator divide it. Unity and atoms the registry does not know
    contribute nothing.

    Examples
    --------
    >>> to_base_units(("<kilo>", "<meter>"), ("<hour>",))
    ScalarAndUnit(scalar=0.2777777777777778, numerator=('<meter>',), denominator=('<second>',))
    """
    num: List[str] = []
    den: List[str] = []
    q = 1.0
    for atom in numerator:
        if atom == UNITY:
            continue
        prefix = registry.prefix_value(atom)
        if prefix is not None:
            q = mul_safe(q, prefix)
            continue
        unit = registry.unit_value(atom)
        if unit is not None:
            q *= unit.scalar
            num.extend(a for a in unit.numerator if a != UNITY)
            den.extend(a for a in unit.denominator if a != UNITY)

    for atom in denominator:
        if atom == UNITY:
            continue
        prefix = registry.prefix_value(atom)
        if prefix is not None:
            q /= prefix
            continue
        unit = registry.unit_value(atom)
        if unit is not None:
            q /= unit.scalar
            den.extend(a for a in unit.numerator if a != UNITY)
            num.extend(a for a in unit.denominator if a != UNITY)

    return ScalarAndUnit(q, tuple(num), tuple(den))


def cached_base_units(units: str, numerator: Sequence[str], denominator: Sequence[str]) -> ScalarAndUnit:
    """:func:`to_base_units` of the default registry, memoized under the unit string ``units``."""
    cached = _BASE_UNIT_CACHE.get(units)
    if cached is not None:
        return cached

    reduced = to_base_units(numerator, denominator)
    with _CACHE_LOCK:
        reduced = _BASE_UNIT_CACHE.setdefault(units, reduced)
    logger.debug("cached base units for %r: %s", units, reduced)
    return reduced


def clear_cache() -> None:
    with _CACHE_LOCK:
        _BASE_UNIT_CACHE.clear()
    logger.debug("base unit cache cleared")


DEFAULT_REGISTRY.on_change(clear_cache)


def swift_converter(src_units: str, dst_units: str) -> Converter:
    """
    Build a fast converter of raw numbers from ``src_units`` to ``dst_units``.

    The base-scalar ratio is computed once; the returned function accepts a
    number or a list/tuple of numbers (returning a list). No safe rounding
    is applied. Absolute temperatures convert through a full quantity per
    value, their scales being offset.

    Raises
    ------
    IncompatibleUnitsError
        If the units have different signatures.

    Examples
    --------
    >>> convert = swift_converter("MPa", "bar")
    >>> convert([250, 10, 15])
    [2500.0, 100.0, 150.0]
    """
    from pyqty.core.quantity import Quantity

    src = Quantity.from_string(src_units)
    dst = Quantity.from_string(dst_units)

    if src.eq(dst):
        return _identity

    convert: Callable[[Number], float]
    if not src.is_temperature():
        ratio_num, ratio_den = src.base_scalar, dst.base_scalar

        def convert(value: Number) -> float:
            return value * ratio_num / ratio_den
    else:
        def convert(value: Number) -> float:
            return src.mul(value).to(dst).scalar

    def converter(value):
        if isinstance(value, (list, tuple)):
            return [convert(v) for v in value]
        return convert(value)

    return converter


def _identity(value):
    if isinstance(value, tuple):
        return list(value)
    return value


__all__ = [
    "to_base_units",
    "cached_base_units",
    "clear_cache",
    "swift_converter",
]
