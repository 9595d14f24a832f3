from __future__ import annotations

from typing import Iterator, Sequence

import numpy as np
import numpy.typing as npt


def format_number(value: float) -> str:
    # six significant digits, same as a default C++ ostream
    return format(float(value), "g")


def format_triple(values: Sequence[float]) -> str:
    return "(" + ", ".join(format_number(v) for v in values) + ")"


class Vector3:
    """
    Three float64 components (x, y, z) in a fixed numpy array of shape (3,).
    Defaults to (0, 0, 0).
    """

    __slots__ = ("_data",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> Vector3:
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"expected 3 components, got shape {arr.shape}")
        return cls(*arr)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float) -> None:
        self._data[0] = value

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float) -> None:
        self._data[1] = value

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float) -> None:
        self._data[2] = value

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def get_z(self) -> float:
        return self.z

    def set_x(self, x: float) -> None:
        self.x = x

    def set_y(self, y: float) -> None:
        self.y = y

    def set_z(self, z: float) -> None:
        self.z = z

    def add(self, other: Vector3) -> Vector3:
        """Component-wise sum as a new vector; neither operand is modified."""
        if not isinstance(other, Vector3):
            raise TypeError(f"cannot add {type(other).__name__} to Vector3")
        return Vector3.from_array(self._data + other._data)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def norm(self) -> float:
        return float(np.linalg.norm(self._data))

    def copy(self) -> Vector3:
        return Vector3.from_array(self._data)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        return self._data.copy()

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def format_components(self) -> str:
        return "Components: " + format_triple(self)

    def print_components(self) -> None:
        print(self.format_components())

    def __repr__(self) -> str:
        return f"Vector3(x={self.x!r}, y={self.y!r}, z={self.z!r})"
