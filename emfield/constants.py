from dataclasses import dataclass
from functools import cached_property
from math import pi, sqrt
from typing import Final


@dataclass(frozen=True)
class Constants:
    eps: float
    mu: float

    @cached_property
    def c(self):
        return 1 / sqrt(self.eps * self.mu)


FREE_SPACE_CONSTS: Final[Constants] = Constants(
    eps=8.854_187_817e-12, mu=4 * pi * 1e-7
)

EPSILON_0: Final[float] = FREE_SPACE_CONSTS.eps
MU_0: Final[float] = FREE_SPACE_CONSTS.mu
