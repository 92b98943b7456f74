"""
pyqty.units.registry
====================

A structured, extensible and testable registry of units and prefixes.

- Encapsulates the definition table in a `UnitsRegistry` class (thread-safe).
- Data-driven registration from :mod:`pyqty.units.definitions`.
- Unicode NFC normalization of every alias (``"Ω"`` as ohm sign or greek omega).
- Lookup maps derived from the table: alias -> atom, atom -> definition,
  atom -> output name, prefix values and the set of base atoms.
- Clear public API: `register`, `register_prefix`, `get`, `has`,
  `get_units`, `get_aliases`.

Registering a definition notifies the listeners added with `on_change`, which
is how the tokenizer and base-unit caches built on this registry are dropped.
"""
from __future__ import annotations

import logging
import threading
import unicodedata
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from pyqty.core.dimensions import get_kinds
from pyqty.core.errors import UnknownKindError, UnknownUnitError
from pyqty.core.unit import PrefixDefinition, UnitDefinition
from pyqty.units.definitions import BASE_UNITS, PREFIXES, UNITS

logger = logging.getLogger(__name__)

# Kinds that never show up in `get_units()`
_HIDDEN_KINDS = frozenset({"", "prefix"})


def normalize_symbol(s: str) -> str:
    """Unicode normalize a user supplied symbol to NFC."""
    if not s:
        return s
    return unicodedata.normalize("NFC", s)


class UnitsRegistry:
    """Thread-safe registry of `UnitDefinition` and `PrefixDefinition` records.

    The registry does *not* parse compound expressions (like ``"m/s^2"``).
    It maps single aliases to atoms; the tokenizer in
    :mod:`pyqty.units.parser` is layered above this API.
    """

    def __init__(self, base_units: Iterable[str] = ()) -> None:
        self._lock = threading.RLock()
        self._units: Dict[str, UnitDefinition] = {}
        self._prefixes: Dict[str, PrefixDefinition] = {}
        self._unit_aliases: Dict[str, str] = {}
        self._prefix_aliases: Dict[str, str] = {}
        self._base_units: frozenset[str] = frozenset(base_units)
        self._listeners: List[Callable[[], None]] = []
        self._max_unit_len = 0
        self._max_prefix_len = 0

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    # -------------------------- public API ---------------------------------
    def register(self, unit: UnitDefinition, replace: bool = False) -> None:
        """Register (or overwrite if replace is True) a unit under its atom and aliases."""
        aliases = [normalize_symbol(a) for a in unit.aliases]
        with self._lock:
            if not replace:
                if unit.atom in self._units:
                    raise ValueError(
                        f"Cannot register unit '{unit.atom}': "
                        "a unit with this atom already exists."
                    )
                for alias in aliases:
                    if alias in self._unit_aliases:
                        raise ValueError(
                            f"Cannot register unit '{unit.atom}': alias '{alias}' "
                            f"already names '{self._unit_aliases[alias]}'."
                        )
            elif unit.atom in self._units:
                self._drop_aliases(self._unit_aliases, unit.atom)

            self._units[unit.atom] = unit
            for alias in aliases:
                self._unit_aliases[alias] = unit.atom
            self._max_unit_len = max(self._max_unit_len, *(len(a) for a in aliases))
        self._notify()

    def register_prefix(self, prefix: PrefixDefinition, replace: bool = False) -> None:
        """Register (or overwrite if replace is True) a prefix under its atom and aliases."""
        aliases = [normalize_symbol(a) for a in prefix.aliases]
        with self._lock:
            if not replace:
                if prefix.atom in self._prefixes:
                    raise ValueError(
                        f"Cannot register prefix '{prefix.atom}': "
                        "a prefix with this atom already exists."
                    )
                for alias in aliases:
                    if alias in self._prefix_aliases:
                        raise ValueError(
                            f"Cannot register prefix '{prefix.atom}': alias '{alias}' "
                            f"already names '{self._prefix_aliases[alias]}'."
                        )
            elif prefix.atom in self._prefixes:
                self._drop_aliases(self._prefix_aliases, prefix.atom)

            self._prefixes[prefix.atom] = prefix
            for alias in aliases:
                self._prefix_aliases[alias] = prefix.atom
            self._max_prefix_len = max(self._max_prefix_len, *(len(a) for a in aliases))
        self._notify()

    def set_base_units(self, atoms: Iterable[str]) -> None:
        with self._lock:
            self._base_units = frozenset(atoms)
        self._notify()

    def on_change(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` (without arguments) after every registration."""
        with self._lock:
            self._listeners.append(callback)

    def has(self, name: str) -> bool:
        return self.resolve(name) is not None

    def resolve(self, name: str) -> Optional[str]:
        """Return the unit atom an alias (or atom) names, or None."""
        sym = normalize_symbol(name)
        with self._lock:
            if sym in self._units:
                return sym
            return self._unit_aliases.get(sym)

    def get(self, name: str) -> UnitDefinition:
        """Lookup a unit definition by atom or alias.

        Raises `UnknownUnitError` if unknown.
        """
        atom = self.resolve(name)
        if atom is None:
            raise UnknownUnitError(f"Unit not recognized: {name}")
        with self._lock:
            return self._units[atom]

    # --------------------- atom level queries ------------------------------
    def is_prefix(self, atom: str) -> bool:
        return atom in self._prefixes

    def prefix_value(self, atom: str) -> Optional[float]:
        prefix = self._prefixes.get(atom)
        return prefix.scalar if prefix is not None else None

    def unit_value(self, atom: str) -> Optional[UnitDefinition]:
        return self._units.get(atom)

    def output_name(self, atom: str) -> str:
        prefix = self._prefixes.get(atom)
        if prefix is not None:
            return prefix.output_name
        unit = self._units.get(atom)
        if unit is None:
            raise UnknownUnitError(f"Unit not recognized: {atom}")
        return unit.output_name

    def kind_of(self, atom: str) -> Optional[str]:
        unit = self._units.get(atom)
        return unit.kind if unit is not None else None

    def is_base_unit(self, atom: str) -> bool:
        return atom in self._base_units

    # --------------------- tokenizer support -------------------------------
    def match_units(self, text: str, start: int) -> List[Tuple[str, str]]:
        """All unit aliases that occur at ``text[start:]``, longest first, as ``(alias, atom)``."""
        return self._match(self._unit_aliases, self._max_unit_len, text, start)

    def match_prefixes(self, text: str, start: int) -> List[Tuple[str, str]]:
        """All prefix aliases that occur at ``text[start:]``, longest first, as ``(alias, atom)``."""
        return self._match(self._prefix_aliases, self._max_prefix_len, text, start)

    # --------------------- introspection -----------------------------------
    def get_units(self, kind: Optional[str] = None) -> List[str]:
        """Unit names (atoms without brackets), optionally restricted to a kind.

        Raises `UnknownKindError` when ``kind`` is not a known kind name.
        """
        with self._lock:
            units = list(self._units.values())

        if kind is None:
            names = [u.name for u in units if u.kind not in _HIDDEN_KINDS]
        elif kind not in get_kinds():
            raise UnknownKindError(f"Kind not recognized: {kind}")
        else:
            names = [u.name for u in units if u.kind == kind]
        return sorted(names, key=str.lower)

    def get_aliases(self, name: str) -> List[str]:
        """Alternative names of the unit ``name`` resolves to."""
        return list(self.get(name).aliases)

    # ------------------------- internals -----------------------------------
    @staticmethod
    def _drop_aliases(aliases: Dict[str, str], atom: str) -> None:
        for alias in [a for a, target in aliases.items() if target == atom]:
            del aliases[alias]

    @staticmethod
    def _match(
        aliases: Mapping[str, str], max_len: int, text: str, start: int
    ) -> List[Tuple[str, str]]:
        found = []
        for size in range(min(max_len, len(text) - start), 0, -1):
            token = text[start:start + size]
            atom = aliases.get(token)
            if atom is not None:
                found.append((token, atom))
        return found

    def _notify(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
        logger.debug("unit registry changed, notifying %d listener(s)", len(listeners))
        for callback in listeners:
            callback()


# ---------------------------------------------------------------------------
# Bootstrap a default registry from the definition table
# ---------------------------------------------------------------------------

def _bootstrap_default_registry() -> UnitsRegistry:
    reg = UnitsRegistry(BASE_UNITS)
    for prefix in PREFIXES:
        reg.register_prefix(prefix)
    for unit in UNITS:
        reg.register(unit)
    return reg


# Public, shared default registry
DEFAULT_REGISTRY: UnitsRegistry = _bootstrap_default_registry()


def get_units(kind: Optional[str] = None) -> List[str]:
    return DEFAULT_REGISTRY.get_units(kind)


def get_aliases(unit_name: str) -> List[str]:
    return DEFAULT_REGISTRY.get_aliases(unit_name)


__all__ = [
    "UnitsRegistry",
    "DEFAULT_REGISTRY",
    "normalize_symbol",
    "get_units",
    "get_aliases",
]
