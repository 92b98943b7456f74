"""
pyqty.core.utils
================

Numeric-safety and formatting helpers shared by the quantity engine.

Binary floating point turns ``0.1 * 0.1`` into ``0.010000000000000002``.
:func:`mul_safe` and :func:`div_safe` count the decimal digits carried by each
operand and round the raw IEEE result back to that many decimals. The
algebra engine, base-unit reduction, conversion and precision rounding all go
through these two helpers so results agree to the last digit.

Numbers are rendered with :func:`format_number`, which follows the
ECMAScript ``Number#toString`` layout (``2`` rather than ``2.0``, ``0.000066``
rather than ``6.6e-05``) so rendered quantities stay reparseable.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Callable, Dict, List, Sequence

from pyqty.core.errors import DivideByZeroError

# Plain decimal notation is used while the decimal point sits in this window.
_MAX_PLAIN_POSITION = 21
_MIN_PLAIN_POSITION = -6


def _fractional_digits(num: float) -> int:
    """Return how many times ``num`` must be scaled by 10 to become integral."""
    if not math.isfinite(num):
        return 0

    count = 0
    while num % 1 != 0:
        num *= 10
        count += 1
    return count


def round_decimals(value: float, decimals: int) -> float:
    """Round half up (towards +inf) at ``decimals`` decimal places."""
    if decimals > 308:
        return value
    factor = 10.0 ** decimals
    scaled = value * factor
    if not math.isfinite(scaled):
        return value

    rounded = math.floor(scaled)
    if scaled - rounded >= 0.5:
        rounded += 1
    return rounded / factor


def mul_safe(*numbers: float) -> float:
    """
    Multiply ``numbers`` while avoiding binary floating point artifacts.

    Examples
    --------
    >>> mul_safe(0.1, 0.1)
    0.01
    >>> mul_safe(6e-12, 100000)
    6e-07
    """
    result = 1.0
    decimals = 0
    for number in numbers:
        decimals += _fractional_digits(number)
        result *= number

    return round_decimals(result, decimals) if decimals != 0 else result


def div_safe(num: float, den: float) -> float:
    """
    Divide ``num`` by ``den`` while avoiding binary floating point artifacts.

    Raises
    ------
    DivideByZeroError
        If ``den`` is exactly zero.
    """
    if den == 0:
        raise DivideByZeroError()

    factor = 10.0 ** _fractional_digits(den)
    inv_den = factor / (factor * den)
    return mul_safe(num, inv_den)


def format_number(value: float) -> str:
    """Render a float the way an ECMAScript host prints a Number."""
    if isinstance(value, bool):
        value = int(value)
    value = float(value)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr() yields the shortest digit string that round-trips
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    k = len(digits)
    n = k + exponent

    if k <= n <= _MAX_PLAIN_POSITION:
        body = digits + "0" * (n - k)
    elif 0 < n <= _MAX_PLAIN_POSITION:
        body = f"{digits[:n]}.{digits[n:]}"
    elif _MIN_PLAIN_POSITION < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def simplify_unit_names(names: Sequence[str]) -> List[str]:
    """Collapse repeated names into counted powers: ``['s','m','s'] -> ['s2','m']``."""
    counts: Dict[str, int] = {}
    for name in names:
        counts[name] = counts.get(name, 0) + 1
    return [name + (str(count) if count > 1 else "") for name, count in counts.items()]


def find_unit_with_prefix_in_list(
    unit: Sequence[str],
    atoms: Sequence[str],
    is_prefix: Callable[[str], bool],
) -> int:
    """
    Return the index of the first occurrence of the ``unit`` atom run in ``atoms``.

    A bare single-atom unit does not match directly after a prefix atom, so
    ``<meter>`` is not found inside ``<kilo> <meter>``.
    """
    size = len(unit)
    target = tuple(unit)
    for i in range(len(atoms) - size + 1):
        if tuple(atoms[i:i + size]) != target:
            continue
        if size != 1 or i == 0 or not is_prefix(atoms[i - 1]):
            return i
    return -1


__all__ = [
    "mul_safe",
    "div_safe",
    "round_decimals",
    "format_number",
    "simplify_unit_names",
    "find_unit_with_prefix_in_list",
]
