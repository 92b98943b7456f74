"""
pyqty.core.algebra
==================

Combination of numerator/denominator atom sequences for multiplication and
division.

Each unit is counted +1 per numerator occurrence and -1 per denominator
occurrence, keyed by the unit atom without its prefix. The first prefix seen
for a unit is kept; later occurrences under another prefix contribute the
ratio ``prefix / first_prefix`` to a scale factor, so ``km * m`` becomes
``km2`` scaled by ``1/1000``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from pyqty.core.unit import UNITY, UNITY_ARRAY
from pyqty.core.utils import div_safe

PrefixLookup = Callable[[str], Optional[float]]


@dataclass(slots=True)
class _Term:
    count: int
    unit: str
    prefix: Optional[str]
    scale_num: float = 1.0
    scale_den: float = 1.0


def _combine(
    combined: Dict[str, _Term],
    atoms: Sequence[str],
    direction: int,
    prefix_value: PrefixLookup,
) -> None:
    i = 0
    while i < len(atoms):
        value = prefix_value(atoms[i])
        if value is not None:
            prefix: Optional[str] = atoms[i]
            unit = atoms[i + 1] if i + 1 < len(atoms) else None
            i += 2
        else:
            prefix, unit, value = None, atoms[i], 1.0
            i += 1

        if not unit or unit == UNITY:
            continue

        term = combined.get(unit)
        if term is None:
            combined[unit] = _Term(direction, unit, prefix)
            continue

        term.count += direction
        first_value = prefix_value(term.prefix) if term.prefix else 1.0
        ratio = div_safe(value, first_value)
        if direction == 1:
            term.scale_num *= ratio
        else:
            term.scale_den *= ratio


def clean_terms(
    num1: Sequence[str],
    den1: Sequence[str],
    num2: Sequence[str],
    den2: Sequence[str],
    prefix_value: PrefixLookup,
) -> Tuple[Tuple[str, ...], Tuple[str, ...], float]:
    """
    Combine ``num1/den1`` with ``num2/den2`` and cancel common units.

    Pass the second operand's sides swapped to divide instead of multiply.

    Parameters
    ----------
    num1, den1, num2, den2 : sequence of str
        Atom sequences, prefixes immediately before the unit they qualify.
    prefix_value : callable
        Returns the scalar of a prefix atom, or None for non-prefix atoms.

    Returns
    -------
    tuple
        ``(numerator, denominator, scale)``; an empty side is the unity
        sequence.
    """
    combined: Dict[str, _Term] = {}
    _combine(combined, [a for a in num1 if a != UNITY], 1, prefix_value)
    _combine(combined, [a for a in den1 if a != UNITY], -1, prefix_value)
    _combine(combined, [a for a in num2 if a != UNITY], 1, prefix_value)
    _combine(combined, [a for a in den2 if a != UNITY], -1, prefix_value)

    num: List[str] = []
    den: List[str] = []
    scale = 1.0
    for term in combined.values():
        atoms = [term.unit] if term.prefix is None else [term.prefix, term.unit]
        if term.count > 0:
            num.extend(atoms * term.count)
        elif term.count < 0:
            den.extend(atoms * -term.count)
        scale *= div_safe(term.scale_num, term.scale_den)

    return tuple(num) or UNITY_ARRAY, tuple(den) or UNITY_ARRAY, scale


__all__ = ["clean_terms"]
