# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Linear ODE with sinusoidal forcing.

    y'(t) = A sin(omega t) - lambda y(t)

Each state component k has its own amplitude A[k] and shares lambda and
omega. The exact solution (variation of parameters) is

    y(t0 + tau) = exp(-lambda tau) y0
                  + A / (lambda^2 + omega^2)
                    * [lambda sin(omega (t0 + tau)) - omega cos(omega (t0 + tau))
                       - exp(-lambda tau) (lambda sin(omega t0) - omega cos(omega t0))]

Negative lambda gives exponential growth, positive lambda decay.
"""

import math
from dataclasses import dataclass
from typing import MutableSequence, Sequence

import numpy as np

from initial_value_problems.domain.errors import check_index, check_length
from initial_value_problems.domain.ode import OrdinaryDifferentialEquation


@dataclass(frozen=True)
class Sinusoidal(OrdinaryDifferentialEquation):
    """Sinusoidally forced first-order ODE.

    Attributes:
        lam: Decay rate lambda (1/s).
        omega: Angular frequency of the forcing (rad/s).
        amp: Forcing amplitude per state component.
    """
    lam: float = -0.2
    omega: float = 4.0
    amp: tuple[float, ...] = (0.5,)

    def __post_init__(self) -> None:
        amp = tuple(float(a) for a in np.ravel(np.asarray(self.amp, dtype=np.float64)))
        if not amp:
            raise ValueError("amp must have at least one component")
        if self.lam == 0.0 and self.omega == 0.0:
            raise ValueError("lam and omega cannot both be zero")
        object.__setattr__(self, "amp", amp)
        object.__setattr__(self, "lam", float(self.lam))
        object.__setattr__(self, "omega", float(self.omega))

    @property
    def dimension(self) -> int:
        """Number of state components."""
        return len(self.amp)

    def rhs(self, time: float, state: Sequence[float]) -> np.ndarray:
        """Unscaled right-hand side f(time, state)."""
        y = np.asarray(state, dtype=np.float64)
        check_length("state", len(y), self.dimension)
        return np.asarray(self.amp) * math.sin(self.omega * time) - self.lam * y

    def explicit(
        self,
        time: float,
        state: MutableSequence[float],
        alpha: float,
    ) -> MutableSequence[float]:
        y = np.asarray(state, dtype=np.float64)
        state[:] = y + self.rhs(time, y) * alpha
        return state

    def implicit_residual(
        self,
        residual: MutableSequence[float],
        time: float,
        state: Sequence[float],
        increment: Sequence[float],
        alpha: float,
        beta: float = 1.0,
    ) -> MutableSequence[float]:
        y = np.asarray(state, dtype=np.float64)
        inc = np.asarray(increment, dtype=np.float64)
        check_length("state", len(y), self.dimension)
        check_length("increment", len(inc), self.dimension)
        check_length("residual", len(residual), self.dimension)

        forcing = np.asarray(self.amp) * math.sin(self.omega * time)
        residual[:] = inc - alpha * (forcing - self.lam * (y + beta * inc))
        return residual

    def analytical_component(
        self,
        initial_time: float,
        initial_state: Sequence[float],
        elapsed: float,
        index: int,
    ) -> float:
        check_index(index, len(initial_state), self.dimension)

        lam, omega = self.lam, self.omega
        decay = math.exp(-lam * elapsed)
        t1 = initial_time + elapsed

        phase0 = lam * math.sin(omega * initial_time) - omega * math.cos(omega * initial_time)
        phase1 = lam * math.sin(omega * t1) - omega * math.cos(omega * t1)
        forced = (phase1 - decay * phase0) / (lam * lam + omega * omega)

        return decay * float(initial_state[index]) + self.amp[index] * forced

    def analytical_solution(
        self,
        initial_time: float,
        initial_state: Sequence[float],
        elapsed: float,
        out: MutableSequence[float] | None = None,
    ) -> MutableSequence[float]:
        """Whole exact state at ``initial_time + elapsed``.

        Written into ``out`` when given, otherwise into a new array.
        ``initial_state`` is not modified.
        """
        check_length("initial_state", len(initial_state), self.dimension)
        values = [
            self.analytical_component(initial_time, initial_state, elapsed, i)
            for i in range(self.dimension)
        ]
        if out is None:
            return np.array(values, dtype=np.float64)
        check_length("out", len(out), self.dimension)
        out[:] = values
        return out
