from math import pi

import numpy as np

from emfield.constants import Constants, FREE_SPACE_CONSTS
from emfield.errors import DomainError


def _check_distance(r: float, strict: bool) -> None:
    if strict and not r > 0:
        raise DomainError(f"distance must be positive, got r={r}")


def electric_field_magnitude(
    q: float,
    r: float,
    consts: Constants = FREE_SPACE_CONSTS,
    strict: bool = False,
) -> float:
    """
    Electric field magnitude of a point charge (Coulomb's law).

    E = Q / (4 * pi * r^2 * eps)

    With `strict` unset, r = 0 is not guarded against and gives `inf`
    (or `nan` when Q is also 0).

    Parameters
    ----------
    q : float
        Source charge in coulombs.
    r : float
        Distance from the charge in metres.
    consts : `Constants`
    strict : bool
        Raise `DomainError` when r <= 0.

    Returns
    -------
    float
        Field magnitude in N/C.
    """
    _check_distance(r, strict)
    with np.errstate(divide="ignore", invalid="ignore"):
        r = np.float64(r)
        e = np.float64(q) / (4 * pi * r * r * consts.eps)
    return float(e)


def magnetic_field_magnitude(
    i: float,
    r: float,
    consts: Constants = FREE_SPACE_CONSTS,
    strict: bool = False,
) -> float:
    """
    Magnetic field magnitude at distance r from an infinite straight wire
    (Ampère's law).

    B = (mu * I) / (2 * pi * r)

    Parameters
    ----------
    i : float
        Current in amperes.
    r : float
        Distance from the wire in metres.
    consts : `Constants`
    strict : bool
        Raise `DomainError` when r <= 0.

    Returns
    -------
    float
        Field magnitude in T.
    """
    _check_distance(r, strict)
    with np.errstate(divide="ignore", invalid="ignore"):
        b = (consts.mu * np.float64(i)) / (2 * pi * np.float64(r))
    return float(b)
