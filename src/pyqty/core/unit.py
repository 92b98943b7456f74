from __future__ import annotations

from dataclasses import dataclass, field
from math import isfinite
from typing import Tuple

UNITY = "<1>"
UNITY_ARRAY: Tuple[str, ...] = (UNITY,)


def _is_atom(name: str) -> bool:
    return len(name) > 2 and name.startswith("<") and name.endswith(">")


@dataclass(frozen=True, slots=True)
class PrefixDefinition:
    """A multiplicative decimal (or binary) prefix such as ``<kilo>``."""

    atom: str
    aliases: Tuple[str, ...]
    scalar: float

    def __post_init__(self) -> None:
        if not _is_atom(self.atom):
            raise ValueError(f"Prefix atom must look like '<name>', got {self.atom!r}")
        if not self.aliases:
            raise ValueError(f"Prefix {self.atom} needs at least one alias")
        if not (self.scalar > 0 and isfinite(self.scalar)):
            raise ValueError(f"Prefix {self.atom}: scalar must be a positive, finite number")

    @property
    def output_name(self) -> str:
        return self.aliases[0]


@dataclass(frozen=True, slots=True)
class UnitDefinition:
    """
    One indivisible unit concept of the definition table.

    Attributes
    ----------
    atom : str
        Canonical identifier, e.g. ``"<meter>"``.
    aliases : tuple of str
        Accepted spellings; the first one is used for output.
    scalar : float
        Factor converting one of this unit into its base atoms.
    kind : str
        Kind tag. For base atoms this is one of the fundamental dimensions
        feeding the signature vector.
    numerator, denominator : tuple of str
        Base atoms this unit reduces to (empty for unity).
    """

    atom: str
    aliases: Tuple[str, ...]
    scalar: float
    kind: str
    numerator: Tuple[str, ...] = field(default=())
    denominator: Tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if not _is_atom(self.atom):
            raise ValueError(f"Unit atom must look like '<name>', got {self.atom!r}")
        if not self.aliases:
            raise ValueError(f"Unit {self.atom} needs at least one alias")
        if not (self.scalar > 0 and isfinite(self.scalar)):
            raise ValueError(f"Unit {self.atom}: scalar must be a positive, finite number")
        for part in (*self.numerator, *self.denominator):
            if not _is_atom(part):
                raise ValueError(f"Unit {self.atom}: invalid base atom {part!r}")

    @property
    def output_name(self) -> str:
        return self.aliases[0]

    @property
    def name(self) -> str:
        """Atom without its angle brackets (``"<meter>" -> "meter"``)."""
        return self.atom[1:-1]


@dataclass(frozen=True, slots=True)
class ScalarAndUnit:
    """Raw quantity record: a scalar with numerator and denominator atoms."""

    scalar: float
    numerator: Tuple[str, ...] = field(default=())
    denominator: Tuple[str, ...] = field(default=())


__all__ = ["UNITY", "UNITY_ARRAY", "PrefixDefinition", "UnitDefinition", "ScalarAndUnit"]
