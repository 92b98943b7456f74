import math

import pytest

from pyqty.core.errors import InvalidArgumentError, UnitParseError
from pyqty.core.quantity import Q, Quantity
from pyqty.core.unit import ScalarAndUnit


# -------------------------------
# From strings
# -------------------------------

def test_scalar_and_units_from_string():
    q = Q("2.5 kg*m/s^2")
    assert q.scalar == 2.5
    assert q.numerator == ("<kilogram>", "<meter>")
    assert q.denominator == ("<second>", "<second>")
    assert q.unit() == "kg*m/s2"


def test_scalar_defaults_to_one():
    q = Q("m")
    assert q.scalar == 1
    assert q.unit() == "m"


@pytest.mark.parametrize("text, scalar", [
    ("1.5e3 m", 1500),
    ("-2 m", -2),
    ("+2 m", 2),
    (".5 m", 0.5),
    ("3E-2 m", 0.03),
])
def test_number_formats(text, scalar):
    assert Q(text).scalar == scalar


def test_whitespace_between_sign_and_scalar():
    q = Q("-  1m")
    assert q.scalar == -1
    assert q.unit() == "m"


def test_whitespace_wrapped_value_is_kept_as_init():
    text = "  66 cm3  "
    q = Q(text)
    assert q.init == text
    assert q.unit() == "cm3"


@pytest.mark.parametrize("text", ["", "   ", "1"])
def test_empty_string_is_unitless_one(text):
    assert Q(text).same(Q("1"))
    assert Q(text).is_unitless()


def test_base_scalar():
    assert Q("0.018 MPa").base_scalar == 18000
    assert Q("66 cm3").base_scalar == 0.000066
    assert Q("100 nF").base_scalar == pytest.approx(1e-7)


@pytest.mark.parametrize("text", [
    "m-",
    "mmm",
    "aa",
    "-m",
    "3p0",
    "3p-0",
    "593720475cm^4939207503",
    "0.11 180°/sec",
    "1 m^5",
    "1 m/s^-1",
])
def test_invalid_strings_raise(text):
    with pytest.raises(UnitParseError):
        Q(text)


# -------------------------------
# Powers
# -------------------------------

def test_zero_power_is_unitless():
    assert Q("1 m^0").is_unitless()


@pytest.mark.parametrize("text", ["1 /s", "1 1/s", "1 s^-1", "1 s-1", "1 s**-1"])
def test_inverse_seconds_spellings(text):
    q = Q(text)
    assert q.numerator == ("<1>",)
    assert q.denominator == ("<second>",)


def test_powers_on_both_sides():
    q = Q("1 m^2/s^2*J^3")
    assert q.numerator == ("<meter>", "<meter>")
    assert q.denominator == ("<second>", "<second>", "<joule>", "<joule>", "<joule>")


def test_power_without_caret():
    assert Q("2 m2").unit() == "m2"
    assert Q("2 cmH2O").unit() == "cmH2O"


# -------------------------------
# Aliases and unicode
# -------------------------------

@pytest.mark.parametrize("text", ["0 Kelvin", "0 K", "0 ºC", "0 Celsius", "0 Centigrade", "0 ºF", "0 Fahrenheit"])
def test_temperature_aliases(text):
    assert Q(text).kind() == "temperature"


def test_micro_sign_and_greek_mu():
    assert Q("1 \u00b5m").eq(Q("1 um"))
    assert Q("1 \u03bcm").eq(Q("1 um"))
    assert Q("1 mcg").unit() == "ug"


def test_ohm_sign_and_greek_omega():
    # the ohm sign is folded into the greek capital omega
    assert Q("1 \u2126").unit() == "\u03a9"
    assert Q("1 \u03a9").unit() == "\u03a9"
    assert Q("1 \u2126").kind() == "resistance"


# -------------------------------
# Other constructors
# -------------------------------

def test_from_number_with_unit():
    q = Q(1337, "N")
    assert q.scalar == 1337
    assert q.unit() == "N"
    assert q.init == 1337


def test_from_number_without_unit():
    q = Q(2)
    assert q.is_unitless()
    assert q.scalar == 2


def test_from_quantity_copies():
    src = Q("2 m")
    q = Q(src)
    assert q is not src
    assert q.same(src)
    assert q.init is src


def test_from_record():
    q = Q({"scalar": 2, "numerator": ["<meter>"], "denominator": ["<second>"]})
    assert q.unit() == "m/s"
    q = Q(ScalarAndUnit(3.0, ("<kilo>", "<gram>")))
    assert q.unit() == "kg"
    assert q.base_scalar == 3


def test_from_record_without_scalar_raises():
    with pytest.raises(InvalidArgumentError):
        Quantity.from_record({"numerator": ["<meter>"]})


def test_plain_constructor_fills_unity():
    q = Quantity(2)
    assert q.numerator == ("<1>",)
    assert q.denominator == ("<1>",)
    assert isinstance(q.init, ScalarAndUnit)


@pytest.mark.parametrize("args", [
    (math.nan,),
    (math.inf,),
    ("2", "m"),
    (2, 3),
    (None,),
    ([1, 2],),
    (True,),
])
def test_bad_factory_arguments_raise(args):
    with pytest.raises(InvalidArgumentError):
        Q(*args)


def test_non_number_scalar_raises_type_error():
    with pytest.raises(TypeError):
        Quantity("2")
