# pyqty.core.dimensions

from __future__ import annotations
from typing import Callable, Dict, Iterable, List, Optional, Tuple

# Slot order of the dimension vector. The signature treats slot i as the
# base-20 digit of weight 20**i, so this order is part of the encoding.
SIGNATURE_VECTOR: Tuple[str, ...] = (
    "length",
    "time",
    "temperature",
    "mass",
    "current",
    "substance",
    "luminosity",
    "currency",
    "information",
    "angle",
)

_RADIX = 20

# Signature -> kind name.
# Novak, G.S., Jr. "Conversion of units of measurement", IEEE Transactions on
# Software Engineering, 21(8), Aug 1995, pp. 651-661.
KINDS: Dict[int, str] = {
    -312078: "elastance",
    -312058: "resistance",
    -312038: "inductance",
    -152058: "potential",
    -152040: "magnetism",
    -152038: "magnetism",
    -7997: "specific_volume",
    -79: "snap",
    -59: "jolt",
    -39: "acceleration",
    -38: "radiation",
    -20: "frequency",
    -19: "speed",
    -18: "viscosity",
    -17: "volumetric_flow",
    -1: "wavenumber",
    0: "unitless",
    1: "length",
    2: "area",
    3: "volume",
    20: "time",
    400: "temperature",
    7941: "yank",
    7942: "power",
    7959: "pressure",
    7961: "force",
    7962: "energy",
    7979: "viscosity",
    7980: "mass_flow",
    7981: "momentum",
    7982: "angular_momentum",
    7997: "density",
    7998: "area_density",
    8000: "mass",
    152020: "radiation_exposure",
    159999: "magnetism",
    160000: "current",
    160020: "charge",
    312058: "conductance",
    312078: "capacitance",
    3199980: "activity",
    3199997: "molar_concentration",
    3200000: "substance",
    63999998: "illuminance",
    64000000: "luminous_power",
    1280000000: "currency",
    25599999980: "information_rate",
    25600000000: "information",
    511999999980: "angular_velocity",
    512000000000: "angle",
}

# --- Core object -------------------------------------------------------------

class Dimension(tuple):
    """
    Immutable 10-length vector of integer exponents, one per entry of
    `SIGNATURE_VECTOR`.

    Tuple subclass => hashable, comparable, usable as dict keys.
    """

    __slots__ = ()

    def __new__(cls, data: Iterable[int] = (0,) * len(SIGNATURE_VECTOR)) -> "Dimension":
        if isinstance(data, Dimension):
            return tuple.__new__(cls, data)

        t = tuple(int(x) for x in data)
        if len(t) != len(SIGNATURE_VECTOR):
            raise ValueError(f"Dimension must have length {len(SIGNATURE_VECTOR)} ({', '.join(SIGNATURE_VECTOR)}).")
        return tuple.__new__(cls, t)

    @classmethod
    def from_atoms(
        cls,
        numerator: Iterable[str],
        denominator: Iterable[str],
        kind_of: Callable[[str], Optional[str]],
    ) -> "Dimension":
        """Count base atoms per slot: +1 for numerator atoms, -1 for denominator atoms.

        Atoms whose kind is not a slot name (``counting``, unity, ...) are ignored.
        """
        vector = [0] * len(SIGNATURE_VECTOR)
        for atoms, step in ((numerator, 1), (denominator, -1)):
            for atom in atoms:
                kind = kind_of(atom)
                if kind in SIGNATURE_VECTOR:
                    vector[SIGNATURE_VECTOR.index(kind)] += step
        return cls(vector)

    @property
    def signature(self) -> int:
        """Mixed-radix encoding ``sum(v[i] * 20**i)``."""
        return sum(v * _RADIX ** i for i, v in enumerate(self))

    def __repr__(self) -> str:
        parts = ""
        for name, v in zip(SIGNATURE_VECTOR, self, strict=True):
            if v != 0:
                parts += f"[{name}^{v}]"
        return parts or "[1]"


def kind_for_signature(signature: int) -> Optional[str]:
    """Kind name of a signature, or None for an uncategorized composite."""
    return KINDS.get(signature)


def get_kinds() -> List[str]:
    """Known kind names, without duplicates, in table order."""
    return list(dict.fromkeys(KINDS.values()))


__all__ = [
    "Dimension",
    "SIGNATURE_VECTOR",
    "KINDS",
    "kind_for_signature",
    "get_kinds",
]
