# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Analytical propagation behind the integrator stepping interface.

A Propagator evaluates the model's closed-form solution instead of
simulating it, giving a reference trajectory for the numerical schemes.
Models without a closed form raise UnsupportedOperation on evaluation.
"""

from dataclasses import dataclass
from typing import MutableSequence, Sequence

import numpy as np

from initial_value_problems.domain.errors import UnsupportedOperation
from initial_value_problems.domain.ode import ExplicitODE, supports_analytical


@dataclass(frozen=True)
class Propagator:
    """Exact-solution counterpart of an Integrator."""
    ode: ExplicitODE

    name = "exact"

    @property
    def supported(self) -> bool:
        """True when the bound ODE has a closed-form solution."""
        return supports_analytical(self.ode)

    def evaluate(
        self,
        time: float,
        state: Sequence[float],
        tau: float,
        index: int,
    ) -> float:
        """Component ``index`` of the exact solution at ``time + tau``.

        ``state`` is the value at ``time`` and is not modified.
        """
        analytical = getattr(self.ode, "analytical_component", None)
        if analytical is None:
            raise UnsupportedOperation(
                f"{type(self.ode).__name__} has no analytical solution"
            )
        return analytical(time, state, tau, index)

    def __call__(
        self,
        time: float,
        state: Sequence[float],
        tau: float,
        index: int,
    ) -> float:
        return self.evaluate(time, state, tau, index)

    def propagate(
        self,
        time: float,
        state: Sequence[float],
        tau: float,
    ) -> np.ndarray:
        """All components of the exact solution at ``time + tau`` as a new array."""
        return np.array(
            [self.evaluate(time, state, tau, i) for i in range(len(state))],
            dtype=np.float64,
        )

    def step(
        self,
        time: float,
        state: MutableSequence[float],
        tau: float,
        scratch: MutableSequence[float] | None = None,
    ) -> float:
        """Overwrite ``state`` with the exact solution at ``time + tau``.

        Same signature as ``Integrator.step``; ``scratch`` is ignored.
        ``state`` is only written once every component has been evaluated.
        """
        values = self.propagate(time, state, tau)
        state[:] = values
        return time + tau
