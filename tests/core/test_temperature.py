import pytest

from pyqty.core.errors import TemperatureDomainError
from pyqty.core.quantity import Q
from pyqty.core.temperature import (
    contains_temperature,
    degree_atom_of,
    is_degree_atoms,
    is_temperature_atoms,
    to_temp_k,
)

# -------------------------------
# Atom predicates
# -------------------------------

def test_is_temperature_atoms():
    assert is_temperature_atoms(("<temp-C>",), ("<1>",))
    assert not is_temperature_atoms(("<celsius>",), ("<1>",))
    assert not is_temperature_atoms(("<temp-C>",), ("<second>",))


def test_is_degree_atoms():
    for atom in ("<kelvin>", "<celsius>", "<fahrenheit>", "<rankine>"):
        assert is_degree_atoms((atom,), ("<1>",))
    assert not is_degree_atoms(("<kelvin>", "<kelvin>"), ("<1>",))
    assert not is_degree_atoms(("<temp-K>",), ("<1>",))


def test_contains_temperature_skips_unity():
    assert contains_temperature(("<temp-F>",))
    assert not contains_temperature(("<1>",))
    assert not contains_temperature(("<kelvin>", "<meter>"))


def test_degree_atom_of():
    assert degree_atom_of(Q("1 tempF")) == "<fahrenheit>"
    assert degree_atom_of(Q("1 tempR")) == "<rankine>"
    with pytest.raises(TemperatureDomainError):
        degree_atom_of(Q("1 m"))


# -------------------------------
# Kelvin reduction
# -------------------------------

@pytest.mark.parametrize("text, kelvin", [
    ("0 tempK", 0.0),
    ("0 tempC", 273.15),
    ("32 tempF", 273.15),
    ("491.67 tempR", 273.15),
])
def test_to_temp_k(text, kelvin):
    out = to_temp_k(Q(text))
    assert out.unit() == "tempK"
    assert out.scalar == pytest.approx(kelvin)


def test_quantities_below_absolute_zero_are_rejected():
    with pytest.raises(TemperatureDomainError):
        Q("-273.16 tempC")
    with pytest.raises(TemperatureDomainError):
        Q("-1 tempR")
    # degrees are differences and may be negative
    assert Q("-300 degC").scalar == -300
