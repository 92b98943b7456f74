import logging

import pytest

import pyqty.core.conversion as conversion
from pyqty.core.conversion import swift_converter, to_base_units
from pyqty.core.errors import IncompatibleUnitsError
from pyqty.core.unit import UnitDefinition

# -------------------------------
# to_base_units
# -------------------------------

def test_to_base_units_expands_prefixes_and_units():
    out = to_base_units(("<kilo>", "<meter>"), ("<hour>",))
    assert out.numerator == ("<meter>",)
    assert out.denominator == ("<second>",)
    assert out.scalar == pytest.approx(1000 / 3600)


def test_to_base_units_of_farad():
    out = to_base_units(("<farad>",), ())
    assert out.scalar == 1
    assert out.numerator.count("<second>") == 4
    assert out.numerator.count("<ampere>") == 2
    assert sorted(out.denominator) == ["<kilogram>", "<meter>", "<meter>"]


def test_to_base_units_drops_unity_atoms():
    out = to_base_units(("<hertz>", "<meter>"), ())
    assert out.numerator == ("<meter>",)
    assert out.denominator == ("<second>",)

    out = to_base_units(("<joule>",), ("<1>",))
    assert "<1>" not in out.numerator + out.denominator


def test_to_base_units_with_isolated_registry(fresh_registry):
    fresh_registry.register(
        UnitDefinition("<smoot>", ("smoot",), 1.7018, "length", ("<meter>",))
    )
    out = to_base_units(("<smoot>",), (), registry=fresh_registry)
    assert out.scalar == 1.7018
    assert out.numerator == ("<meter>",)


# -------------------------------
# Base unit cache
# -------------------------------

def test_cached_base_units_memoizes_per_unit_string(caplog):
    conversion.clear_cache()
    with caplog.at_level(logging.DEBUG, logger="pyqty.core.conversion"):
        first = conversion.cached_base_units("kg/h", ("<kilogram>",), ("<hour>",))
        second = conversion.cached_base_units("kg/h", ("<kilogram>",), ("<hour>",))
    assert first is second
    assert sum("cached base units" in r.getMessage() for r in caplog.records) == 1


def test_clear_cache_empties_the_cache():
    conversion.cached_base_units("km", ("<kilo>", "<meter>"), ())
    conversion.clear_cache()
    assert conversion._BASE_UNIT_CACHE == {}


# -------------------------------
# swift_converter
# -------------------------------

def test_swift_converter_number_and_list():
    convert = swift_converter("MPa", "bar")
    assert convert(2.5) == pytest.approx(25)
    assert convert([250, 10, 15]) == pytest.approx([2500, 100, 150])
    assert isinstance(convert((1, 2)), list)


def test_swift_converter_identity_for_equal_units():
    convert = swift_converter("m", "meters")
    value = [1, 2, 3]
    assert convert(value) is value
    assert convert((1, 2, 3)) == [1, 2, 3]
    assert convert(4) == 4


def test_swift_converter_temperatures():
    assert swift_converter("tempF", "tempC")(32) == pytest.approx(0, abs=1e-9)
    assert swift_converter("tempC", "tempK")([0, 100]) == pytest.approx([273.15, 373.15])


def test_swift_converter_degrees():
    assert swift_converter("degC", "degF")(10) == pytest.approx(18)


def test_swift_converter_incompatible_units_raise():
    with pytest.raises(IncompatibleUnitsError):
        swift_converter("m", "s")
