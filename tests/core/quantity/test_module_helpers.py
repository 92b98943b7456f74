import pytest

import pyqty
from pyqty.core.errors import InvalidArgumentError, UnknownKindError, UnknownUnitError
from pyqty.core.quantity import Quantity, parse


# -------------------------------
# parse
# -------------------------------

def test_parse_valid_string():
    q = parse("1 m")
    assert isinstance(q, Quantity)
    assert q.unit() == "m"


@pytest.mark.parametrize("text", ["aa", "VL170111115924", "1 m^7", "2 s/tempF"])
def test_parse_invalid_string_returns_none(text):
    assert parse(text) is None


def test_parse_non_string_raises():
    with pytest.raises(InvalidArgumentError):
        parse(2)
    with pytest.raises(InvalidArgumentError):
        parse(None)


@pytest.mark.parametrize("text", ["mole/l", "mol/l", "mol/L", "mol/litres", "5 mol/l", "3.4554e10 mol/l"])
def test_parse_unit_without_scalar(text):
    assert parse(text).unit() == "mol/l"


def test_kind_of_parsed_quantities():
    assert parse("kg/h").kind() == "mass_flow"
    assert parse("m/s").kind() == "speed"
    assert parse("kg*m/s^2*A").kind() is None


# -------------------------------
# Package level helpers
# -------------------------------

def test_package_factory_and_parse():
    assert pyqty.Q("25 kg").to("g").to_string() == "25000 g"
    assert pyqty.parse("bogus unit") is None


def test_get_kinds():
    kinds = pyqty.get_kinds()
    assert "resistance" in kinds
    assert "mass_flow" in kinds


def test_get_units():
    assert "dollar" in pyqty.get_units("currency")
    assert "cents" in pyqty.get_units("currency")
    assert "sievert" in pyqty.get_units()
    assert "1" not in pyqty.get_units()


def test_get_units_of_unknown_kind_raises():
    with pytest.raises(UnknownKindError):
        pyqty.get_units("bogus_kind")
    with pytest.raises(ValueError):
        pyqty.get_units("bogus_kind")


def test_get_aliases():
    assert "meter" in pyqty.get_aliases("m")
    assert "metres" in pyqty.get_aliases("meter")
    with pytest.raises(UnknownUnitError):
        pyqty.get_aliases("bogus")


def test_safe_arithmetic_is_exported():
    assert pyqty.mul_safe(0.1, 0.1) == 0.01
    assert pyqty.div_safe(0.000773, 0.000001) == 773
