from __future__ import annotations

from math import nan

from emfield.laws import electric_field_magnitude, magnetic_field_magnitude
from emfield.vector import Vector3, format_triple


def _component(name: str) -> property:
    # forwards one component of the held vector
    def fget(self) -> float:
        return getattr(self.vector, name)

    def fset(self, value: float) -> None:
        setattr(self.vector, name, value)

    return property(fget, fset, doc=f"{name}-component of the field vector")


def _check_same_kind(a, b) -> None:
    if type(a) is not type(b):
        raise TypeError(
            f"cannot add {type(b).__name__} to {type(a).__name__}"
        )


class ElectricField:
    """
    Electric field vector plus the magnitude from the last Coulomb's law
    evaluation. `calculated_e` is `nan` until `calculate_electric_field`
    is called.
    """

    __slots__ = ("vector", "calculated_e")

    x = _component("x")
    y = _component("y")
    z = _component("z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.vector = Vector3(x, y, z)
        self.calculated_e = nan

    @classmethod
    def from_vector(cls, vector: Vector3) -> ElectricField:
        return cls(*vector)

    def calculate_electric_field(self, q: float, r: float, strict: bool = False) -> float:
        """
        Store and return E = Q / (4 * pi * r^2 * eps).

        Parameters
        ----------
        q : float
            Point charge in coulombs.
        r : float
            Distance in metres. r = 0 gives `inf` unless `strict` is set.
        strict : bool
            Raise `DomainError` for r <= 0 instead.

        Returns
        -------
        float
        """
        self.calculated_e = electric_field_magnitude(q, r, strict=strict)
        return self.calculated_e

    def get_calculated_e(self) -> float:
        return self.calculated_e

    def add(self, other: ElectricField) -> ElectricField:
        """
        Component-wise sum. The result is a fresh field, so its
        `calculated_e` is not carried over from either operand.
        """
        _check_same_kind(self, other)
        return ElectricField.from_vector(self.vector + other.vector)

    def __add__(self, other: ElectricField) -> ElectricField:
        if not isinstance(other, ElectricField):
            return NotImplemented
        return self.add(other)

    def copy(self) -> ElectricField:
        return ElectricField.from_vector(self.vector)

    def print_components(self) -> None:
        self.vector.print_components()

    def to_display_string(self) -> str:
        return "Electric Field Components: " + format_triple(self.vector)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"ElectricField(x={self.x!r}, y={self.y!r}, z={self.z!r})"


class MagneticField:
    """
    Magnetic field vector plus the magnitude from the last Ampère's law
    evaluation for an infinite straight wire. `calculated_b` is `nan` until
    `calculate_magnetic_field` is called.
    """

    __slots__ = ("vector", "calculated_b")

    x = _component("x")
    y = _component("y")
    z = _component("z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.vector = Vector3(x, y, z)
        self.calculated_b = nan

    @classmethod
    def from_vector(cls, vector: Vector3) -> MagneticField:
        return cls(*vector)

    def calculate_magnetic_field(self, i: float, r: float, strict: bool = False) -> float:
        """
        Store and return B = (mu * I) / (2 * pi * r).

        Parameters
        ----------
        i : float
            Wire current in amperes.
        r : float
            Distance from the wire in metres.
        strict : bool
            Raise `DomainError` for r <= 0.

        Returns
        -------
        float
        """
        self.calculated_b = magnetic_field_magnitude(i, r, strict=strict)
        return self.calculated_b

    def get_calculated_b(self) -> float:
        return self.calculated_b

    def add(self, other: MagneticField) -> MagneticField:
        _check_same_kind(self, other)
        return MagneticField.from_vector(self.vector + other.vector)

    def __add__(self, other: MagneticField) -> MagneticField:
        if not isinstance(other, MagneticField):
            return NotImplemented
        return self.add(other)

    def copy(self) -> MagneticField:
        return MagneticField.from_vector(self.vector)

    def print_components(self) -> None:
        self.vector.print_components()

    def to_display_string(self) -> str:
        return "Magnetic Field Components: " + format_triple(self.vector)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"MagneticField(x={self.x!r}, y={self.y!r}, z={self.z!r})"
