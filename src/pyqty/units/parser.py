"""
pyqty.units.parser
==================

Parsing of quantity strings such as ``"2.5 kg*m/s^2"`` into a
:class:`~pyqty.core.unit.ScalarAndUnit` record.

Parsing happens in three steps:

1. The leading number (sign, integer, decimal or scientific notation) is split
   from the unit expression, which is split at the first ``/``.
2. Exponents are expanded by repetition (``"m^2"`` -> ``"m m"``, ``"s-1"`` moves
   one ``s`` to the denominator). Only single digit powers in ``-4..4`` are
   accepted, and only in the numerator may they be negative.
3. Each side is tokenized into prefix and unit atoms. At every position the
   tokenizer prefers an unprefixed unit, then a prefixed one, both
   longest-alias first, and picks the first choice that still lets the rest
   of the string be covered. A token must end at the end of input or on an
   ASCII word boundary or before a separator (whitespace or ``*``).

Tokenized unit strings are cached per tokenizer; the cache is cleared whenever
the underlying registry changes.
"""
from __future__ import annotations

import logging
import re
import threading
from typing import Dict, List, Optional, Tuple

from pyqty.core.errors import InvalidArgumentError, UnitParseError
from pyqty.core.unit import ScalarAndUnit
from pyqty.units.registry import DEFAULT_REGISTRY, UnitsRegistry, normalize_symbol

logger = logging.getLogger(__name__)

_SIGNED_NUMBER = r"[+-]?\s*(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)(?:[Ee][+-]?[0-9]+)?"
_QTY_STRING_RE = re.compile(rf"({_SIGNED_NUMBER})?\s*([^/]*)(?:/(.+))?")
_WHITESPACE_RE = re.compile(r"\s")

# Largest absolute power accepted by the exponent expansion
MAX_POWER = 4

Atoms = Tuple[str, ...]


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _is_word_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


def _is_separator(ch: str) -> bool:
    return ch.isspace() or ch == "*"


# ---------------- Exponent expansion ----------------
class _ExponentExpander:
    """
    Rewrites ``<name>[^|**][-]<digit>`` by repeating ``name``.

    Grammar of one power term:
      term  := NAME ['^' | '**'] ['-'] DIGIT
      NAME  := run of characters other than whitespace, '*', '^' and ASCII digits

    A digit run directly followed by an ASCII letter is part of a name
    (``cmH2O``). Everything that is not a power term is copied as-is, so the
    tokenizer reports unknown leftovers.
    """

    def __init__(self, text: str, allow_negative: bool, tokenizer: "UnitTokenizer"):
        self.s = text
        self.n = len(text)
        self.i = 0
        self.allow_negative = allow_negative
        self.tokenizer = tokenizer
        self.kept: List[str] = []
        self.moved: List[str] = []

    def expand(self) -> Tuple[str, List[str]]:
        """Return the expanded text and the names moved to the denominator."""
        while self.i < self.n:
            if _is_separator(self.s[self.i]):
                self.kept.append(self.s[self.i])
                self.i += 1
                continue
            name = self._parse_name()
            if not name:
                # stray '^' or digit; left for the tokenizer to reject
                self.kept.append(self.s[self.i])
                self.i += 1
                continue
            self._parse_power(name)
        return "".join(self.kept), self.moved

    def _parse_power(self, raw_name: str) -> None:
        start = self.i
        name = raw_name
        negative = False
        explicit = True
        if self._peek("^"):
            self.i += 1
        elif self._peek("**"):
            self.i += 2
        else:
            explicit = False

        if self._peek("-"):
            negative = True
            self.i += 1
        elif self.i == start and raw_name.endswith("-"):
            # 's-2': the sign was swallowed by the name run
            name = raw_name[:-1]
            negative = True

        digits = self._parse_digits()
        if not digits or (self.i < self.n and _is_ascii_letter(self.s[self.i])):
            # not a power term: keep the name, resume right after it
            self.i = start
            self.kept.append(raw_name)
            return

        if len(digits) > 1 and not explicit:
            # a digit run glued to a name is not a power; the tokenizer rejects it
            self.kept.append(raw_name + digits)
            return

        if not name:
            raise UnitParseError("Unit exponent is missing its unit")
        if negative and not self.allow_negative:
            raise UnitParseError(f"Negative unit exponent not allowed in denominator: {name}")
        if len(digits) > 1 or int(digits) > MAX_POWER:
            raise UnitParseError(f"Unit exponent out of range (-{MAX_POWER}..{MAX_POWER}): {name}")

        power = int(digits)
        if power == 0:
            # a zero power must still name a valid unit
            if not self.tokenizer.is_valid(name):
                raise UnitParseError(f"Unit not recognized: {name}")
            return
        if negative:
            self.moved.extend([name] * power)
        else:
            self.kept.append(" ".join([name] * power) + " ")

    # ---- token helpers ----
    def _parse_name(self) -> str:
        i0 = self.i
        while self.i < self.n:
            ch = self.s[self.i]
            if _is_separator(ch) or ch == "^" or _is_ascii_digit(ch):
                break
            self.i += 1
        return self.s[i0:self.i]

    def _parse_digits(self) -> str:
        i0 = self.i
        while self.i < self.n and _is_ascii_digit(self.s[self.i]):
            self.i += 1
        return self.s[i0:self.i]

    def _peek(self, tok: str) -> bool:
        return self.s.startswith(tok, self.i)


# ---------------- Tokenizer ----------------
class UnitTokenizer:
    """Turns a unit string such as ``"kg m s"`` into atoms, bound to one registry."""

    def __init__(self, registry: UnitsRegistry):
        self.registry = registry
        self._cache: Dict[str, Atoms] = {}
        self._lock = threading.Lock()
        registry.on_change(self.clear_cache)

    def tokenize(self, units: str) -> Atoms:
        """
        Normalized atoms for ``units``.

        Raises
        ------
        UnitParseError
            If the string is not entirely covered by known (prefixed) units.
        """
        cached = self._cache.get(units)
        if cached is not None:
            return cached

        atoms = self._cover(units)
        if atoms is None:
            raise UnitParseError(f"Unit not recognized: {units}")

        with self._lock:
            atoms = self._cache.setdefault(units, atoms)
        logger.debug("cached unit tokens for %r: %s", units, atoms)
        return atoms

    def is_valid(self, units: str) -> bool:
        try:
            self.tokenize(units)
        except UnitParseError:
            return False
        return True

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()
        logger.debug("unit token cache cleared")

    def _cover(self, text: str) -> Optional[Atoms]:
        n = len(text)
        first = 0
        while first < n and text[first].isspace():
            first += 1
        if first == n:
            return None

        # plans[i]: atoms of the token starting at i and the start of the next one
        plans: Dict[int, Optional[Tuple[Atoms, int]]] = {}
        for start in range(n - 1, first - 1, -1):
            plans[start] = self._first_plan(text, start, plans)

        atoms: List[str] = []
        pos = first
        while pos < n:
            plan = plans[pos]
            if plan is None:
                return None
            token_atoms, pos = plan
            atoms.extend(token_atoms)
        return tuple(atoms)

    def _first_plan(
        self,
        text: str,
        start: int,
        plans: Dict[int, Optional[Tuple[Atoms, int]]],
    ) -> Optional[Tuple[Atoms, int]]:
        n = len(text)

        def follow(end: int) -> Optional[int]:
            if (
                end < n
                and not _is_separator(text[end])
                and _is_word_char(text[end - 1]) == _is_word_char(text[end])
            ):
                return None
            nxt = end
            while nxt < n and _is_separator(text[nxt]):
                nxt += 1
            if nxt < n and plans.get(nxt) is None:
                return None
            return nxt

        for alias, atom in self.registry.match_units(text, start):
            nxt = follow(start + len(alias))
            if nxt is not None:
                return (atom,), nxt

        for prefix_alias, prefix_atom in self.registry.match_prefixes(text, start):
            unit_start = start + len(prefix_alias)
            for alias, atom in self.registry.match_units(text, unit_start):
                nxt = follow(unit_start + len(alias))
                if nxt is not None:
                    return (prefix_atom, atom), nxt
        return None


DEFAULT_TOKENIZER = UnitTokenizer(DEFAULT_REGISTRY)


def expand_exponents(
    top: str, bottom: str, tokenizer: UnitTokenizer = DEFAULT_TOKENIZER
) -> Tuple[str, str]:
    """Expand powers on both sides of a unit expression."""
    top, moved = _ExponentExpander(top, True, tokenizer).expand()
    bottom, _ = _ExponentExpander(bottom, False, tokenizer).expand()
    bottom = " ".join(part for part in (bottom.strip(), *moved) if part)
    return top, bottom


def parse_quantity(text: str, tokenizer: UnitTokenizer = DEFAULT_TOKENIZER) -> ScalarAndUnit:
    """
    Parse ``text`` into a scalar and numerator/denominator atoms.

    Examples
    --------
    >>> parse_quantity("2 m^2/s")
    ScalarAndUnit(scalar=2.0, numerator=('<meter>', '<meter>'), denominator=('<second>',))
    >>> parse_quantity("kPa").numerator
    ('<kilo>', '<pascal>')
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(f"Quantity string expected, got {type(text).__name__}")

    val = normalize_symbol(text).strip()
    match = _QTY_STRING_RE.fullmatch(val)
    if match is None:
        raise UnitParseError(f"{val}: Quantity not recognized")

    scalar_text, top, bottom = match.groups()
    # whitespace between sign and digits is tolerated
    scalar = float(_WHITESPACE_RE.sub("", scalar_text)) if scalar_text else 1.0

    top, bottom = expand_exponents(top or "", bottom or "", tokenizer)

    numerator: Atoms = tokenizer.tokenize(top.strip()) if top.strip() else ()
    denominator: Atoms = tokenizer.tokenize(bottom.strip()) if bottom.strip() else ()
    return ScalarAndUnit(scalar, numerator, denominator)


def parse_units(units: str) -> Atoms:
    """Tokenize a bare unit string (no number, no exponents) with the default registry."""
    return DEFAULT_TOKENIZER.tokenize(normalize_symbol(units).strip())


def clear_cache() -> None:
    DEFAULT_TOKENIZER.clear_cache()


__all__ = [
    "UnitTokenizer",
    "DEFAULT_TOKENIZER",
    "MAX_POWER",
    "expand_exponents",
    "parse_quantity",
    "parse_units",
    "clear_cache",
]
