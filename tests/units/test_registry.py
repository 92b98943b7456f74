# pytest tests for pyqty.units.registry
#
# These tests exercise alias normalization, registration conflicts, change
# listeners, thread-safety, and the convenience functions that delegate to
# DEFAULT_REGISTRY. Registrations always go to an isolated registry instance.

import threading

import pytest

import pyqty.units.registry as regmod
from pyqty.core.errors import UnknownKindError, UnknownUnitError
from pyqty.core.unit import PrefixDefinition, UnitDefinition
from pyqty.units.definitions import BASE_UNITS, PREFIXES, UNITS
from pyqty.units.registry import UnitsRegistry, normalize_symbol


@pytest.fixture()
def reg(fresh_registry):
    return fresh_registry


def smoot(*aliases):
    return UnitDefinition("<smoot>", aliases or ("smoot",), 1.7018, "length", ("<meter>",))


# ---------------------------------------------------------------------------
# Definition table
# ---------------------------------------------------------------------------

def test_every_unit_and_prefix_is_registered(reg):
    for unit in UNITS:
        assert reg.get(unit.atom) is unit
    for prefix in PREFIXES:
        assert reg.is_prefix(prefix.atom)
        assert reg.prefix_value(prefix.atom) == prefix.scalar


def test_base_units_are_flagged(reg):
    for atom in BASE_UNITS:
        assert reg.is_base_unit(atom)
    assert not reg.is_base_unit("<foot>")


def test_aliases_are_unique_across_units():
    seen = {}
    for unit in UNITS:
        for alias in unit.aliases:
            alias = normalize_symbol(alias)
            assert alias not in seen, f"{alias} names {seen.get(alias)} and {unit.atom}"
            seen[alias] = unit.atom


def test_base_definitions_only_use_base_atoms():
    base = set(BASE_UNITS) | {"<1>"}
    for unit in UNITS:
        assert set(unit.numerator) <= base, unit.atom
        assert set(unit.denominator) <= base, unit.atom


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name, atom", [
    ("m", "<meter>"),
    ("metres", "<meter>"),
    ("<meter>", "<meter>"),
    ("\u2126", "<ohm>"),
    ("\u03a9", "<ohm>"),
    ("degC", "<celsius>"),
])
def test_resolve(reg, name, atom):
    assert reg.resolve(name) == atom
    assert reg.has(name)
    assert name in reg


def test_unknown_unit(reg):
    assert reg.resolve("bogus") is None
    with pytest.raises(UnknownUnitError):
        reg.get("bogus")
    # prefixes are not units
    assert reg.resolve("k") is None


def test_output_name(reg):
    assert reg.output_name("<kilo>") == "k"
    assert reg.output_name("<pound>") == "lbs"
    assert reg.output_name("<temp-C>") == "tempC"
    with pytest.raises(UnknownUnitError):
        reg.output_name("<bogus>")


def test_kind_of(reg):
    assert reg.kind_of("<meter>") == "length"
    assert reg.kind_of("<kilo>") is None


def test_match_units_longest_first(reg):
    assert reg.match_units("mmHg", 0)[0] == ("mmHg", "<mmHg>")
    assert [alias for alias, _ in reg.match_units("min", 0)] == ["min", "mi", "m"]


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def test_register_custom_unit(reg):
    reg.register(smoot("smoot", "smoots"))
    assert reg.get("smoots").scalar == 1.7018
    assert "smoot" in reg.get_units("length")


def test_register_duplicate_atom_raises(reg):
    reg.register(smoot())
    with pytest.raises(ValueError):
        reg.register(smoot("other"))


def test_register_duplicate_alias_raises(reg):
    with pytest.raises(ValueError):
        reg.register(UnitDefinition("<meter2>", ("m",), 1.0, "length", ("<meter>",)))


def test_register_replace_repoints_aliases(reg):
    reg.register(smoot("smoot", "sm"))
    reg.register(smoot("smoot"), replace=True)
    assert reg.resolve("sm") is None
    assert reg.resolve("smoot") == "<smoot>"


def test_register_prefix_duplicate_alias_raises(reg):
    with pytest.raises(ValueError):
        reg.register_prefix(PrefixDefinition("<kilo2>", ("k",), 1000.0))


def test_register_normalizes_aliases(reg):
    # "e" followed by a combining acute accent composes to U+00E9
    reg.register(UnitDefinition("<toise>", ("toise\u0301",), 1.949, "length", ("<meter>",)))
    assert reg.resolve("tois\u00e9") == "<toise>"
    assert reg.resolve("toise\u0301") == "<toise>"


def test_listeners_are_notified(reg):
    calls = []
    reg.on_change(lambda: calls.append("changed"))
    reg.register(smoot())
    reg.register_prefix(PrefixDefinition("<double>", ("xx",), 2.0))
    reg.set_base_units(BASE_UNITS)
    assert calls == ["changed"] * 3


@pytest.mark.parametrize("kwargs", [
    dict(atom="meter", aliases=("m",), scalar=1.0, kind="length"),
    dict(atom="<x>", aliases=(), scalar=1.0, kind="length"),
    dict(atom="<x>", aliases=("x",), scalar=0.0, kind="length"),
    dict(atom="<x>", aliases=("x",), scalar=1.0, kind="length", numerator=("meter",)),
])
def test_invalid_definitions_raise(kwargs):
    with pytest.raises(ValueError):
        UnitDefinition(**kwargs)


# ---------------------------------------------------------------------------
# Thread-safety
# ---------------------------------------------------------------------------

def test_thread_safe_lookups_during_registration(reg):
    errs = []

    def reader():
        try:
            for _ in range(200):
                assert reg.get("m").atom == "<meter>"
        except Exception as e:  # pragma: no cover - reported below
            errs.append(e)

    def writer(i):
        try:
            reg.register(UnitDefinition(f"<unit{i}>", (f"unit{i}",), 1.0, "length", ("<meter>",)))
        except Exception as e:  # pragma: no cover - reported below
            errs.append(e)

    threads = [threading.Thread(target=reader) for _ in range(8)]
    threads += [threading.Thread(target=writer, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not errs
    assert all(reg.has(f"unit{i}") for i in range(8))


# ---------------------------------------------------------------------------
# Introspection and convenience functions
# ---------------------------------------------------------------------------

def test_get_units_sorted_case_insensitively(reg):
    units = reg.get_units()
    assert units == sorted(units, key=str.lower)
    assert "1" not in units
    assert "meter" in units


def test_get_units_by_kind(reg):
    assert reg.get_units("currency") == ["cents", "dollar"]
    assert reg.get_units("resistance") == ["ohm"]


def test_get_units_unknown_kind(reg):
    with pytest.raises(UnknownKindError):
        reg.get_units("nonsense")


def test_get_aliases(reg):
    assert reg.get_aliases("ft") == ["ft", "foot", "feet", "'"]


def test_convenience_functions_use_default_registry(monkeypatch, reg):
    reg.register(smoot())
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", reg)
    assert "smoot" in regmod.get_units("length")
    assert regmod.get_aliases("smoot") == ["smoot"]
