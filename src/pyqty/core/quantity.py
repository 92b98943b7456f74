"""
pyqty.core.quantity
===================

The :class:`Quantity` value type: a scalar together with numerator and
denominator unit atoms.

Every quantity knows its ``base_scalar`` (the scalar once reduced to base
units) and its ``signature`` (an integer encoding of its dimension). Two
quantities are compatible when their signatures are equal; comparison and
linear conversion work on base scalars.

>>> from pyqty import Q
>>> Q("25 kg").to("g").to_string()
'25000 g'
>>> (Q("3 m") * Q("4 m")).to_string()
'12 m2'
"""

from __future__ import annotations

import math
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Sequence, Tuple, Union

from pyqty.core.algebra import clean_terms
from pyqty.core.conversion import cached_base_units
from pyqty.core.dimensions import Dimension, kind_for_signature
from pyqty.core.errors import (
    DivideByZeroError,
    IncompatibleUnitsError,
    InvalidArgumentError,
    QuantityError,
    TemperatureDomainError,
)
from pyqty.core.temperature import (
    add_temp_degrees,
    contains_temperature,
    is_degree_atoms,
    is_temperature_atoms,
    subtract_temp_degrees,
    subtract_temperatures,
    to_degrees,
    to_temp,
    to_temp_k,
)
from pyqty.core.unit import UNITY, UNITY_ARRAY, ScalarAndUnit
from pyqty.core.utils import (
    div_safe,
    find_unit_with_prefix_in_list,
    format_number,
    mul_safe,
    round_decimals,
    simplify_unit_names,
)
from pyqty.units.parser import parse_quantity
from pyqty.units.registry import DEFAULT_REGISTRY

Number = Union[int, float]
Formatter = Callable[[float, str], str]
UnitSource = Union["Quantity", str]
Source = Union["Quantity", str, Number]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite_number(value: Any) -> bool:
    return _is_number(value) and math.isfinite(value)


def default_formatter(scalar: float, units: str) -> str:
    """Render ``scalar`` and ``units`` separated by a space."""
    return f"{format_number(scalar)} {units}".strip()


def _output_names(atoms: Sequence[str]) -> list[str]:
    names = []
    i = 0
    while i < len(atoms):
        atom = atoms[i]
        if DEFAULT_REGISTRY.is_prefix(atom) and i + 1 < len(atoms):
            names.append(DEFAULT_REGISTRY.output_name(atom) + DEFAULT_REGISTRY.output_name(atoms[i + 1]))
            i += 2
        else:
            names.append(DEFAULT_REGISTRY.output_name(atom))
            i += 1
    return names


def _stringify_units(atoms: Tuple[str, ...]) -> str:
    atoms = tuple(a for a in atoms if a != UNITY)
    if not atoms:
        return "1"
    return "*".join(simplify_unit_names(_output_names(atoms)))


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


class Quantity:
    """
    A physical quantity with a scalar and a unit made of atoms.

    Construct it with :func:`Q` or one of the ``from_*`` classmethods; the
    plain constructor takes the raw record (scalar, numerator atoms,
    denominator atoms).

    Attributes
    ----------
    scalar : float
        Magnitude in the quantity's own unit.
    numerator, denominator : tuple of str
        Unit atoms; a side without units is ``("<1>",)``.
    base_scalar : float
        Magnitude once reduced to base units.
    signature : int
        Encoded dimension vector; equal signatures mean compatible units.
    init : object
        The value the quantity was constructed from.

    Raises
    ------
    TemperatureDomainError
        For temperature atoms in a denominator or next to other atoms, and
        for absolute temperatures below absolute zero.
    """

    __slots__ = (
        "scalar",
        "numerator",
        "denominator",
        "base_scalar",
        "signature",
        "init",
        "_units",
        "_is_base",
        "_conversion_cache",
    )

    formatter: ClassVar[Formatter] = default_formatter

    def __init__(
        self,
        scalar: Number,
        numerator: Optional[Sequence[str]] = None,
        denominator: Optional[Sequence[str]] = None,
        *,
        init: Any = None,
    ):
        if not _is_number(scalar):
            raise InvalidArgumentError(f"Scalar must be a number, got {type(scalar).__name__}")

        self.scalar = float(scalar)
        self.numerator: Tuple[str, ...] = tuple(numerator) if numerator else UNITY_ARRAY
        self.denominator: Tuple[str, ...] = tuple(denominator) if denominator else UNITY_ARRAY

        if contains_temperature(self.denominator):
            raise TemperatureDomainError("Cannot divide with temperatures")
        if contains_temperature(self.numerator):
            if len(self.numerator) > 1:
                raise TemperatureDomainError("Cannot multiply by temperatures")
            if self.denominator != UNITY_ARRAY:
                raise TemperatureDomainError("Cannot divide with temperatures")

        self.init = init if init is not None else ScalarAndUnit(self.scalar, self.numerator, self.denominator)
        self._units: Optional[str] = None
        self._is_base: Optional[bool] = None
        self._conversion_cache: Dict[str, Quantity] = {}

        if self.is_base():
            self.base_scalar = self.scalar
            self.signature = Dimension.from_atoms(
                self.numerator, self.denominator, DEFAULT_REGISTRY.kind_of
            ).signature
        else:
            base = self.to_base()
            self.base_scalar = base.scalar
            self.signature = base.signature

        if self.is_temperature() and self.base_scalar < 0:
            raise TemperatureDomainError("Temperatures must not be less than absolute zero")

    # ---------------- construction ----------------
    @classmethod
    def from_string(cls, text: str) -> "Quantity":
        """Parse ``"<number> <units>"``; the number defaults to 1."""
        record = parse_quantity(text)
        return cls(record.scalar, record.numerator, record.denominator, init=text)

    @classmethod
    def from_number(cls, value: Number, unit: Optional[str] = None) -> "Quantity":
        """A quantity of ``value`` in ``unit`` (unitless when ``unit`` is omitted)."""
        if not _is_finite_number(value):
            raise InvalidArgumentError(f"Finite number expected, got {value!r}")
        if unit is None:
            return cls(value, init=value)
        if not isinstance(unit, str):
            raise InvalidArgumentError(f"Units must be a string, got {type(unit).__name__}")

        record = parse_quantity(unit)
        return cls(value, record.numerator, record.denominator, init=value)

    @classmethod
    def from_record(cls, record: Union[ScalarAndUnit, Mapping[str, Any]]) -> "Quantity":
        """Build from a :class:`ScalarAndUnit` or a mapping with a ``scalar`` key."""
        if isinstance(record, ScalarAndUnit):
            return cls(record.scalar, record.numerator, record.denominator, init=record)
        if isinstance(record, Mapping) and "scalar" in record:
            return cls(
                record["scalar"],
                record.get("numerator"),
                record.get("denominator"),
                init=record,
            )
        raise InvalidArgumentError("Record must provide a scalar")

    @classmethod
    def from_quantity(cls, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            raise InvalidArgumentError(f"Quantity expected, got {type(other).__name__}")
        return cls(other.scalar, other.numerator, other.denominator, init=other)

    @classmethod
    def parse_or_none(cls, text: str) -> Optional["Quantity"]:
        """Like :meth:`from_string`, but returns None instead of raising on bad input."""
        if not isinstance(text, str):
            raise InvalidArgumentError("Argument should be a string")
        try:
            return cls.from_string(text)
        except QuantityError:
            return None

    @classmethod
    def _coerce(cls, other: Any) -> "Quantity":
        if isinstance(other, str):
            return cls.from_string(other)
        if isinstance(other, Quantity):
            return other
        raise InvalidArgumentError(f"Quantity or string expected, got {type(other).__name__}")

    # ---------------- introspection ----------------
    def unit(self) -> str:
        """Unit string such as ``"kg*m/s2"``; empty for a unitless quantity."""
        if self._units is None:
            num_unity = self.numerator == UNITY_ARRAY
            den_unity = self.denominator == UNITY_ARRAY
            if num_unity and den_unity:
                self._units = ""
            else:
                units = _stringify_units(self.numerator)
                if not den_unity:
                    units += "/" + _stringify_units(self.denominator)
                self._units = units
        return self._units

    def kind(self) -> Optional[str]:
        """Kind name of the signature (``"length"``, ``"speed"``, ...), None if unlisted."""
        return kind_for_signature(self.signature)

    def is_unitless(self) -> bool:
        return self.numerator == UNITY_ARRAY and self.denominator == UNITY_ARRAY

    def is_base(self) -> bool:
        """True when every atom is a base atom (or unity)."""
        if self._is_base is None:
            self._is_base = all(
                atom == UNITY or DEFAULT_REGISTRY.is_base_unit(atom)
                for atom in (*self.numerator, *self.denominator)
            )
        return self._is_base

    def is_degrees(self) -> bool:
        """A single temperature difference atom (``degC``, ``K``, ...) over unity."""
        return is_degree_atoms(self.numerator, self.denominator)

    def is_temperature(self) -> bool:
        """A single absolute temperature atom (``tempC``, ``tempK``, ...) over unity."""
        return is_temperature_atoms(self.numerator, self.denominator)

    def is_compatible(self, other: Any) -> bool:
        if isinstance(other, str):
            other = Quantity.from_string(other)
        if not isinstance(other, Quantity):
            return False
        return self.signature == other.signature

    def is_inverse(self, other: Any) -> bool:
        """True when ``other`` has the dimension of ``1 / self``."""
        if isinstance(other, str):
            other = Quantity.from_string(other)
        if not isinstance(other, Quantity):
            return False
        return -self.signature == other.signature

    # ---------------- comparison ----------------
    def compare_to(self, other: UnitSource) -> int:
        """
        -1, 0 or 1 as ``self`` is smaller, equal or larger than ``other``.

        Raises
        ------
        IncompatibleUnitsError
            If the signatures differ.
        """
        other = self._coerce(other)
        if not self.is_compatible(other):
            raise IncompatibleUnitsError(self.unit(), other.unit())
        if self.base_scalar < other.base_scalar:
            return -1
        if self.base_scalar == other.base_scalar:
            return 0
        return 1

    def eq(self, other: UnitSource) -> bool:
        return self.compare_to(other) == 0

    def lt(self, other: UnitSource) -> bool:
        return self.compare_to(other) == -1

    def lte(self, other: UnitSource) -> bool:
        return self.eq(other) or self.lt(other)

    def gt(self, other: UnitSource) -> bool:
        return self.compare_to(other) == 1

    def gte(self, other: UnitSource) -> bool:
        return self.eq(other) or self.gt(other)

    def same(self, other: "Quantity") -> bool:
        """Identical scalar and identical unit string (stricter than :meth:`eq`)."""
        return self.scalar == other.scalar and self.unit() == other.unit()

    # ---------------- conversion ----------------
    def to(self, other: Optional[UnitSource]) -> "Quantity":
        """
        Convert to the units of ``other``.

        ``other`` is a unit string or a quantity whose scalar is ignored.
        Results are cached per target string; converting to the current
        unit returns ``self``. Inverse units (``ohm`` and ``S``) convert
        through :meth:`inverse`.

        Raises
        ------
        IncompatibleUnitsError
            If the units are neither compatible nor inverse.
        """
        if other is None:
            return self
        if isinstance(other, Quantity):
            return self.to(other.unit())
        if not isinstance(other, str):
            raise InvalidArgumentError(f"Target units must be a string, got {type(other).__name__}")

        cached = self._conversion_cache.get(other)
        if cached is not None:
            return cached

        target = Quantity.from_string(other)
        if target.unit() == self.unit():
            return self

        if not self.is_compatible(target):
            if not self.is_inverse(target):
                raise IncompatibleUnitsError(self.unit(), target.unit())
            result = self.inverse().to(other)
        elif target.is_temperature():
            result = to_temp(self, target)
        elif target.is_degrees():
            result = to_degrees(self, target)
        else:
            result = self.__class__(
                div_safe(self.base_scalar, target.base_scalar),
                target.numerator,
                target.denominator,
            )

        self._conversion_cache[other] = result
        return result

    def to_base(self) -> "Quantity":
        """Equivalent quantity in base units; absolute temperatures go to ``tempK``."""
        if self.is_base():
            return self
        if self.is_temperature():
            return to_temp_k(self)

        base = cached_base_units(self.unit(), self.numerator, self.denominator)
        return self.__class__(mul_safe(base.scalar, self.scalar), base.numerator, base.denominator)

    def to_float(self) -> float:
        """The scalar of a unitless quantity."""
        if self.is_unitless():
            return self.scalar
        raise InvalidArgumentError(
            f"Can't convert to float unless unitless (units: {self.unit()}), use .scalar"
        )

    def to_prec(self, precision: Source) -> "Quantity":
        """
        Round to the nearest multiple of ``precision``.

        ``precision`` is a quantity, a quantity string or a bare number taken
        in the units of ``self``.

        Examples
        --------
        >>> Q("5.5 ft").to_prec("2 ft").to_string()
        '6 ft'
        >>> Q("6.3782 m").to_prec("cm").to_string()
        '6.38 m'
        """
        if _is_number(precision):
            prec = Quantity.from_string(f"{format_number(precision)} {self.unit()}")
        else:
            prec = self._coerce(precision)

        if not self.is_unitless():
            prec = prec.to(self.unit())
        elif not prec.is_unitless():
            raise IncompatibleUnitsError(self.unit(), prec.unit())

        if prec.scalar == 0:
            raise DivideByZeroError()

        rounded = mul_safe(_round_half_up(self.scalar / prec.scalar), prec.scalar)
        return self.__class__.from_string(f"{format_number(rounded)} {self.unit()}".strip())

    def convert_single_unit(self, src: UnitSource, dst: UnitSource) -> "Quantity":
        """
        Replace one simple unit factor, wherever it occurs, by another.

        ``src`` must be a single unit with an optional prefix, and neither
        ``src`` nor ``dst`` may have a denominator.

        >>> Q("42 m/s").convert_single_unit("s", "h").to_string()
        '151200 m/h'
        """
        src_q = self._coerce(src)
        dst_q = self._coerce(dst)

        if src_q.denominator != UNITY_ARRAY or dst_q.denominator != UNITY_ARRAY:
            raise InvalidArgumentError("Units should have no denominator for a single unit conversion")

        is_prefix = DEFAULT_REGISTRY.is_prefix
        src_atoms = src_q.numerator
        single = (len(src_atoms) == 1 and not is_prefix(src_atoms[0])) or (
            len(src_atoms) == 2 and is_prefix(src_atoms[0]) and not is_prefix(src_atoms[1])
        )
        if not single:
            raise InvalidArgumentError("Numerator units should be a single unit with an (optional) prefix")

        forward = src_q.to(dst_q).scalar
        backward = dst_q.to(src_q).scalar

        scalar = self.scalar
        numerator = list(self.numerator)
        denominator = list(self.denominator)
        for atoms, factor in ((numerator, forward), (denominator, backward)):
            start = 0
            while True:
                found = find_unit_with_prefix_in_list(src_atoms, atoms[start:], is_prefix)
                if found < 0:
                    break
                found += start
                atoms[found:found + len(src_atoms)] = dst_q.numerator
                scalar = mul_safe(scalar, factor)
                start = found + len(dst_q.numerator)

        return self.__class__(scalar, numerator, denominator)

    # ---------------- arithmetic ----------------
    def add(self, other: UnitSource) -> "Quantity":
        other = self._coerce(other)
        if not self.is_compatible(other):
            raise IncompatibleUnitsError(self.unit(), other.unit())

        if self.is_temperature() and other.is_temperature():
            raise TemperatureDomainError("Cannot add two temperatures")
        if self.is_temperature():
            return add_temp_degrees(self, other)
        if other.is_temperature():
            return add_temp_degrees(other, self)

        return self.__class__(self.scalar + other.to(self).scalar, self.numerator, self.denominator)

    def sub(self, other: UnitSource) -> "Quantity":
        other = self._coerce(other)
        if not self.is_compatible(other):
            raise IncompatibleUnitsError(self.unit(), other.unit())

        if self.is_temperature() and other.is_temperature():
            return subtract_temperatures(self, other)
        if self.is_temperature():
            return subtract_temp_degrees(self, other)
        if other.is_temperature():
            raise TemperatureDomainError("Cannot subtract a temperature from a differential degree unit")

        return self.__class__(self.scalar - other.to(self).scalar, self.numerator, self.denominator)

    def mul(self, other: Source) -> "Quantity":
        if _is_number(other):
            return self.__class__(mul_safe(self.scalar, other), self.numerator, self.denominator)
        other = self._coerce(other)

        if (self.is_temperature() or other.is_temperature()) and not (
            self.is_unitless() or other.is_unitless()
        ):
            raise TemperatureDomainError("Cannot multiply by temperatures")

        # degrees keep their own atoms so that degC*degF stays as is
        if self.is_compatible(other) and self.signature != 400:
            other = other.to(self)
        num, den, scale = clean_terms(
            self.numerator, self.denominator, other.numerator, other.denominator,
            DEFAULT_REGISTRY.prefix_value,
        )
        return self.__class__(mul_safe(self.scalar, other.scalar, scale), num, den)

    def div(self, other: Source) -> "Quantity":
        if _is_number(other):
            if other == 0:
                raise DivideByZeroError()
            return self.__class__(self.scalar / other, self.numerator, self.denominator)
        other = self._coerce(other)

        if other.scalar == 0:
            raise DivideByZeroError()
        if other.is_temperature():
            raise TemperatureDomainError("Cannot divide with temperatures")
        if self.is_temperature() and not other.is_unitless():
            raise TemperatureDomainError("Cannot divide with temperatures")

        if self.is_compatible(other) and self.signature != 400:
            other = other.to(self)
        num, den, scale = clean_terms(
            self.numerator, self.denominator, other.denominator, other.numerator,
            DEFAULT_REGISTRY.prefix_value,
        )
        return self.__class__(mul_safe(self.scalar, scale) / other.scalar, num, den)

    def inverse(self) -> "Quantity":
        """``1 / self``; undefined for temperatures, degrees and zero."""
        if self.is_temperature() or self.is_degrees():
            raise TemperatureDomainError("Cannot divide with temperatures")
        if self.scalar == 0:
            raise DivideByZeroError()
        return self.__class__(1 / self.scalar, self.denominator, self.numerator)

    # ---------------- rendering ----------------
    def to_string(
        self,
        target: Union[str, Number, "Quantity", None] = None,
        max_decimals: Optional[int] = None,
    ) -> str:
        """
        Reparseable ``"<scalar> <units>"`` string.

        Parameters
        ----------
        target : str, int or Quantity, optional
            Units to convert to, or the maximum number of decimals in the
            current units, or a precision passed to :meth:`to_prec`.
        max_decimals : int, optional
            Maximum number of decimals of the rendered scalar.
        """
        if _is_number(target):
            max_decimals = int(target)
            target = None
        elif isinstance(target, Quantity):
            return self.to_prec(target).to_string(max_decimals=max_decimals)
        elif target is not None and not isinstance(target, str):
            raise InvalidArgumentError(f"Unsupported target: {type(target).__name__}")

        out = self.to(target)
        scalar = round_decimals(out.scalar, max_decimals) if max_decimals is not None else out.scalar
        return f"{format_number(scalar)} {out.unit()}".strip()

    def format(
        self,
        target_units: Union[str, Formatter, None] = None,
        formatter: Optional[Formatter] = None,
    ) -> str:
        """
        Render through ``formatter(scalar, units)``, after converting to
        ``target_units`` if given. ``formatter`` defaults to
        :attr:`Quantity.formatter`; it may also be passed as the only argument.
        """
        if callable(target_units):
            return self.format(None, target_units)

        formatter = formatter or type(self).formatter
        target = self.to(target_units)
        return formatter(target.scalar, target.unit())

    # ---------------- python protocol ----------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.is_compatible(other) and self.eq(other)

    def __hash__(self) -> int:
        return hash((self.signature, self.base_scalar))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (Quantity, str)):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (Quantity, str)):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (Quantity, str)):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (Quantity, str)):
            return NotImplemented
        return self.gte(other)

    def __add__(self, other: UnitSource) -> "Quantity":
        if not isinstance(other, (Quantity, str)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: str) -> "Quantity":
        if not isinstance(other, str):
            return NotImplemented
        return Quantity.from_string(other).add(self)

    def __sub__(self, other: UnitSource) -> "Quantity":
        if not isinstance(other, (Quantity, str)):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: str) -> "Quantity":
        if not isinstance(other, str):
            return NotImplemented
        return Quantity.from_string(other).sub(self)

    def __mul__(self, other: Source) -> "Quantity":
        if not (_is_number(other) or isinstance(other, (Quantity, str))):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Union[Number, str]) -> "Quantity":
        # 3 * Q("2 m") -> 6 m
        if _is_number(other):
            return self.mul(other)
        if isinstance(other, str):
            return Quantity.from_string(other).mul(self)
        return NotImplemented

    def __truediv__(self, other: Source) -> "Quantity":
        if not (_is_number(other) or isinstance(other, (Quantity, str))):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Union[Number, str]) -> "Quantity":
        # 1 / Q("4 s") -> 0.25 1/s
        if _is_number(other):
            return self.inverse().mul(other)
        if isinstance(other, str):
            return Quantity.from_string(other).div(self)
        return NotImplemented

    def __neg__(self) -> "Quantity":
        return self.__class__(-self.scalar, self.numerator, self.denominator)

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def __format__(self, spec: str) -> str:
        """
        ``f"{q}"`` renders in the current units; any other specifier is taken
        as target units.

        >>> f"{Q('1.5 m'):cm}"
        '150 cm'
        """
        spec = (spec or "").strip()
        return self.to_string(spec or None)


# ---------------------------------------------------------------------------
# Factory and module level helpers
# ---------------------------------------------------------------------------

def Q(value: Any, unit: Optional[str] = None) -> Quantity:
    """
    Build a quantity from whatever shape ``value`` has.

    - ``Q("2 m/s")``: parse a string;
    - ``Q(2, "m/s")``: a finite number with a unit string;
    - ``Q(2)``: a unitless number;
    - ``Q(other)``: copy another quantity;
    - ``Q({"scalar": 2, "numerator": ["<meter>"]})`` or a
      :class:`ScalarAndUnit`: a raw record.

    Raises
    ------
    InvalidArgumentError
        For any other argument shape, or a non-finite number.
    UnitParseError
        If a string cannot be parsed.
    """
    if unit is not None:
        if not (_is_finite_number(value) and isinstance(unit, str)):
            raise InvalidArgumentError(
                "Only number accepted as initialization value when units are explicitly provided"
            )
        return Quantity.from_number(value, unit)

    if isinstance(value, str):
        return Quantity.from_string(value)
    if _is_number(value):
        return Quantity.from_number(value)
    if isinstance(value, Quantity):
        return Quantity.from_quantity(value)
    if isinstance(value, ScalarAndUnit) or (isinstance(value, Mapping) and "scalar" in value):
        return Quantity.from_record(value)
    raise InvalidArgumentError(
        "Only string, number or quantity accepted as single initialization value"
    )


def parse(text: str) -> Optional[Quantity]:
    """
    Parse ``text`` into a quantity, or return None if it is not one.

    Raises
    ------
    InvalidArgumentError
        If ``text`` is not a string.
    """
    return Quantity.parse_or_none(text)


__all__ = ["Quantity", "Q", "parse", "default_formatter"]
