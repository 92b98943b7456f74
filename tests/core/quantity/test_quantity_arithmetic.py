import pytest

from pyqty.core.errors import DivideByZeroError, IncompatibleUnitsError, InvalidArgumentError
from pyqty.core.quantity import Q


# -------------------------------
# add / sub
# -------------------------------

def test_add_keeps_units_of_left_operand():
    result = Q("2.5m").add("3cm")
    assert result.scalar == pytest.approx(2.53)
    assert result.unit() == "m"

    result = Q("3cm").add("2.5m")
    assert result.scalar == 253
    assert result.unit() == "cm"


def test_sub():
    result = Q("2.5m").sub("3cm")
    assert result.scalar == pytest.approx(2.47)
    assert result.unit() == "m"


def test_add_incompatible_raises():
    with pytest.raises(IncompatibleUnitsError):
        Q("1 m").add("1 s")
    with pytest.raises(IncompatibleUnitsError):
        Q("1 m").sub("1 kg")


def test_add_rejects_numbers():
    with pytest.raises(InvalidArgumentError):
        Q("1 m").add(3)


# -------------------------------
# mul
# -------------------------------

def test_mul_compatible_units_converts_right_operand():
    result = Q("2.5m").mul("3cm")
    assert result.scalar == 0.075
    assert result.unit() == "m2"


def test_mul_by_number():
    result = Q("2.5m").mul(2)
    assert result.scalar == 5
    assert result.unit() == "m"


def test_mul_unrelated_units():
    result = Q("2 kg").mul("3 m/s")
    assert result.scalar == 6
    assert result.unit() == "kg*m/s"


def test_mul_with_prefixes_and_inverses():
    result = Q("3 1/km2").mul("4 m")
    assert result.scalar == 0.012
    assert result.unit() == "1/km"

    result = Q("4 m").mul("3 1/km2")
    assert result.scalar == 0.000012
    assert result.unit() == "1/m"


def test_mul_cancels_to_unitless():
    result = Q("2 m/s").mul("3 s/m")
    assert result.is_unitless()
    assert result.scalar == 6


# -------------------------------
# div
# -------------------------------

def test_div():
    result = Q("7.5kg").div("2.5m^2")
    assert result.scalar == 3
    assert result.unit() == "kg/m2"


def test_div_by_number():
    assert Q("3 m").div(4).scalar == 0.75


def test_div_compatible_units_is_unitless():
    result = Q("1 m").div("50 cm")
    assert result.is_unitless()
    assert result.scalar == 2


def test_div_with_prefixes():
    result = Q("3m*A").div("4 km")
    assert result.scalar == 0.00075
    assert result.unit() == "A"

    result = Q("3 m").div("4 km*A")
    assert result.scalar == 0.00075
    assert result.unit() == "1/A"

    result = Q("3 m").div("4 km*cA")
    assert result.scalar == 0.00075
    assert result.unit() == "1/cA"


def test_div_inverse_quantities():
    siemens = Q("10 S")
    per_siemens = Q(".5 S").inverse()

    result = siemens.div(per_siemens)
    assert result.scalar == 5
    assert result.unit() == "S2"

    result = per_siemens.div(siemens)
    assert result.scalar == 0.2
    assert result.unit() == "1/S2"


def test_div_by_zero_raises():
    with pytest.raises(DivideByZeroError):
        Q("1 m").div(0)
    with pytest.raises(DivideByZeroError):
        Q("1 m").div("0 s")


# -------------------------------
# inverse
# -------------------------------

def test_inverse():
    result = Q("4 s").inverse()
    assert result.scalar == 0.25
    assert result.unit() == "1/s"
    assert Q("2 m/s").inverse().unit() == "s/m"


@pytest.mark.parametrize("text", ["3 m/s", "10 ohm", "0.25 kPa", "-4 kg*m/s2"])
def test_inverse_twice_is_equal_to_the_original(text):
    q = Q(text)
    twice = q.inverse().inverse()
    assert twice.eq(q)
    assert twice.unit() == q.unit()


def test_inverse_of_zero_raises():
    with pytest.raises(DivideByZeroError):
        Q("0 m").inverse()
