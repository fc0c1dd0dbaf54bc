# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Capability contract for explicit first-order ODEs y'(t) = f(t, y).

Integrators never call f directly. They use two in-place evaluations:

    explicit:           y <- y + alpha * f(t, y)
    implicit_residual:  res <- inc - alpha * f(t, y + beta * inc)

An implicit scheme drives the residual to zero to recover the increment.
The analytical solution is an optional third capability.

No external dependencies beyond numpy.
"""

from abc import ABC, abstractmethod
from typing import MutableSequence, Protocol, Sequence, runtime_checkable

import numpy as np

from initial_value_problems.domain.errors import UnsupportedOperation, check_length


# --- Types ---

@runtime_checkable
class ExplicitODE(Protocol):
    """Structural typing port for models usable by every integrator."""

    order: int

    def explicit(
        self,
        time: float,
        state: MutableSequence[float],
        alpha: float,
    ) -> MutableSequence[float]: ...

    def implicit_residual(
        self,
        residual: MutableSequence[float],
        time: float,
        state: Sequence[float],
        increment: Sequence[float],
        alpha: float,
        beta: float = 1.0,
    ) -> MutableSequence[float]: ...


@runtime_checkable
class AnalyticalODE(ExplicitODE, Protocol):
    """Model that also provides its closed-form solution."""

    def analytical_component(
        self,
        initial_time: float,
        initial_state: Sequence[float],
        elapsed: float,
        index: int,
    ) -> float: ...


# --- Base class ---

class OrdinaryDifferentialEquation(ABC):
    """Abstract first-order ODE.

    Subclasses implement ``explicit``. ``implicit_residual`` has a generic
    fallback built on ``explicit``; models override it when a direct form
    is cheaper. Models with a closed form override ``analytical_component``.

    Instances are immutable and hold no per-call state, so one model may be
    shared by independent trajectories.
    """

    order: int = 1

    @abstractmethod
    def explicit(
        self,
        time: float,
        state: MutableSequence[float],
        alpha: float,
    ) -> MutableSequence[float]:
        """Overwrite ``state`` with ``state + alpha * f(time, state)`` and return it."""

    def implicit_residual(
        self,
        residual: MutableSequence[float],
        time: float,
        state: Sequence[float],
        increment: Sequence[float],
        alpha: float,
        beta: float = 1.0,
    ) -> MutableSequence[float]:
        """Overwrite ``residual`` with ``inc - alpha * f(time, state + beta * inc)``.

        f is recovered from ``explicit`` on a private copy of the blended
        state, so ``state`` and ``increment`` are never modified.
        """
        inc = np.asarray(increment, dtype=np.float64)
        check_length("increment", len(inc), len(state))
        check_length("residual", len(residual), len(state))

        blended = np.asarray(state, dtype=np.float64) + beta * inc
        advanced = self.explicit(time, blended.copy(), alpha)
        residual[:] = inc - (np.asarray(advanced, dtype=np.float64) - blended)
        return residual

    def analytical_component(
        self,
        initial_time: float,
        initial_state: Sequence[float],
        elapsed: float,
        index: int,
    ) -> float:
        """Component ``index`` of the exact solution at ``initial_time + elapsed``."""
        raise UnsupportedOperation(
            f"{type(self).__name__} has no analytical solution"
        )

    @property
    def has_analytical_solution(self) -> bool:
        """True when the subclass overrides ``analytical_component``."""
        return (
            type(self).analytical_component
            is not OrdinaryDifferentialEquation.analytical_component
        )


def supports_analytical(ode: object) -> bool:
    """True when ``ode`` provides a closed-form solution."""
    if isinstance(ode, OrdinaryDifferentialEquation):
        return ode.has_analytical_solution
    return isinstance(ode, AnalyticalODE)
