import math

import pytest

from emfield.errors import DomainError
from emfield.fields import ElectricField, MagneticField
from emfield.vector import Vector3


@pytest.mark.parametrize("cls", [ElectricField, MagneticField])
def test_default_field_is_zero(cls):
    f = cls()
    assert (f.x, f.y, f.z) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("cls", [ElectricField, MagneticField])
def test_components_delegate_to_vector(cls):
    f = cls(1.0, 2.0, 3.0)
    f.y = 20.0
    assert f.vector == Vector3(1.0, 20.0, 3.0)
    f.vector.set_z(30.0)
    assert f.z == 30.0


def test_calculated_e_is_nan_before_calculation():
    assert math.isnan(ElectricField().get_calculated_e())


def test_calculated_b_is_nan_before_calculation():
    assert math.isnan(MagneticField().get_calculated_b())


def test_calculate_electric_field():
    e = ElectricField(1.0, 2.0, 3.0)
    result = e.calculate_electric_field(1e-9, 0.1)
    assert result == e.get_calculated_e() == e.calculated_e
    assert result == pytest.approx(898.755, rel=1e-3)


def test_calculate_magnetic_field():
    b = MagneticField(7.0, 8.0, 9.0)
    b.calculate_magnetic_field(1.0, 0.1)
    assert b.get_calculated_b() == pytest.approx(2e-6, rel=1e-12)


def test_calculation_overwrites_previous_value():
    e = ElectricField()
    e.calculate_electric_field(1e-9, 0.1)
    e.calculate_electric_field(1e-9, 0.2)
    assert e.get_calculated_e() == pytest.approx(898.755 / 4, rel=1e-3)


def test_zero_distance_gives_inf():
    e = ElectricField()
    b = MagneticField()
    e.calculate_electric_field(1e-9, 0.0)
    b.calculate_magnetic_field(1.0, 0.0)
    assert e.get_calculated_e() == math.inf
    assert b.get_calculated_b() == math.inf


def test_strict_calculation_raises():
    with pytest.raises(DomainError):
        ElectricField().calculate_electric_field(1e-9, 0.0, strict=True)
    with pytest.raises(DomainError):
        MagneticField().calculate_magnetic_field(1.0, -1.0, strict=True)


def test_electric_addition():
    e1 = ElectricField(1.0, 2.0, 3.0)
    e2 = ElectricField(4.0, 5.0, 6.0)
    e1.calculate_electric_field(1e-9, 0.1)
    e3 = e1 + e2
    assert isinstance(e3, ElectricField)
    assert (e3.x, e3.y, e3.z) == (5.0, 7.0, 9.0)
    assert math.isnan(e3.get_calculated_e())
    assert e2.add(e1).vector == e3.vector


def test_magnetic_addition():
    b1 = MagneticField(7.0, 8.0, 9.0)
    b2 = MagneticField(10.0, 11.0, 12.0)
    b1.calculate_magnetic_field(1.0, 0.1)
    b3 = b1 + b2
    assert isinstance(b3, MagneticField)
    assert (b3.x, b3.y, b3.z) == (17.0, 19.0, 21.0)
    assert math.isnan(b3.get_calculated_b())


def test_mixing_field_kinds_is_rejected():
    with pytest.raises(TypeError):
        ElectricField() + MagneticField()
    with pytest.raises(TypeError):
        MagneticField().add(ElectricField())


def test_copy_drops_calculated_value():
    e = ElectricField(1.0, 2.0, 3.0)
    e.calculate_electric_field(1e-9, 0.1)
    c = e.copy()
    c.x = 9.0
    assert e.x == 1.0
    assert math.isnan(c.get_calculated_e())


def test_display_strings():
    e = ElectricField(5.0, 7.0, 9.0)
    e.calculate_electric_field(1e-9, 0.1)
    assert str(e) == "Electric Field Components: (5, 7, 9)"
    assert e.to_display_string() == str(e)
    assert str(MagneticField(17.0, 19.0, 21.0)) == "Magnetic Field Components: (17, 19, 21)"


def test_print_components(capsys):
    ElectricField(1.0, 2.0, 3.0).print_components()
    MagneticField(7.0, 8.0, 9.0).print_components()
    assert capsys.readouterr().out == "Components: (1, 2, 3)\nComponents: (7, 8, 9)\n"
