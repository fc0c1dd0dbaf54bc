# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Single-step integrators for explicit first-order ODEs.

    Forward Euler:   y1 = y0 + tau f(t0, y0)
    Backward Euler:  y1 = y0 + tau f(t0 + tau, y1)
    Midpoint:        y1 = y0 + tau f(t0 + tau/2, (y0 + y1)/2)

Each integrator binds an ODE and holds no simulation state: time and state
live in the caller's stepping loop. ``step`` mutates ``state`` in place and
returns the new time.

The implicit schemes solve for the increment inc = y1 - y0 through the
residual inc - tau f(t*, y0 + beta inc) = 0, seeded with a zeroed scratch
buffer. The root-finder is injected by the caller.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, MutableSequence

import numpy as np

from initial_value_problems.domain.errors import IntegrationFailure, check_length
from initial_value_problems.domain.ode import ExplicitODE

if TYPE_CHECKING:
    from initial_value_problems.ports.root_finder import RootFinder

logger = logging.getLogger(__name__)


def make_scratch(state: MutableSequence[float]) -> np.ndarray:
    """Zeroed float buffer shaped like ``state``, for reuse across implicit steps."""
    return np.zeros(len(state), dtype=np.float64)


@dataclass(frozen=True)
class Integrator(ABC):
    """Base for single-step schemes bound to one ODE."""
    ode: ExplicitODE

    name = "integrator"
    accuracy_order = 0
    implicit = False

    def __post_init__(self) -> None:
        order = getattr(self.ode, "order", None)
        if order != 1:
            raise ValueError(
                f"{type(self).__name__} requires a first-order ODE, got order {order!r}"
            )

    @abstractmethod
    def step(
        self,
        time: float,
        state: MutableSequence[float],
        tau: float,
        scratch: MutableSequence[float] | None = None,
    ) -> float:
        """Advance ``state`` in place by ``tau`` and return the new time."""

    def __call__(
        self,
        time: float,
        state: MutableSequence[float],
        tau: float,
        scratch: MutableSequence[float] | None = None,
    ) -> float:
        return self.step(time, state, tau, scratch)


@dataclass(frozen=True)
class ForwardEuler(Integrator):
    """Explicit Euler: one right-hand-side evaluation, no scratch buffer."""

    name = "forward_euler"
    accuracy_order = 1

    def step(
        self,
        time: float,
        state: MutableSequence[float],
        tau: float,
        scratch: MutableSequence[float] | None = None,
    ) -> float:
        """Advance ``state`` by one step of size ``tau``.

        ``scratch`` is accepted so every scheme shares one call signature;
        it is never touched.

        Returns:
            time + tau
        """
        self.ode.explicit(time, state, tau)
        return time + tau


@dataclass(frozen=True)
class _ImplicitIntegrator(Integrator):
    """Shared nonlinear solve for the implicit one-step schemes."""
    root_finder: "RootFinder" = field(compare=False)

    implicit = True

    # Fraction of the step at which f is evaluated, and the blend factor
    # beta in y0 + beta * inc.
    _time_fraction = 1.0
    _beta = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.root_finder is None:
            raise ValueError(f"{type(self).__name__} requires a root-finder")

    def step(
        self,
        time: float,
        state: MutableSequence[float],
        tau: float,
        scratch: MutableSequence[float] | None = None,
    ) -> float:
        """Advance ``state`` by one step of size ``tau``.

        Args:
            time: Current time.
            state: Current state, updated in place on success.
            tau: Step size.
            scratch: Buffer shaped like ``state``; zeroed, used as the initial
                guess, and left holding the solved increment. Allocated per
                call when omitted.

        Returns:
            time + tau

        Raises:
            IntegrationFailure: The root-finder did not converge. ``state``
                is left unmodified.
        """
        if scratch is None:
            scratch = make_scratch(state)
        check_length("scratch", len(scratch), len(state))

        eval_time = time + self._time_fraction * tau
        beta = self._beta
        ode = self.ode
        y0 = np.array(state, dtype=np.float64)

        def residual_fn(trial: np.ndarray) -> np.ndarray:
            res = np.empty_like(y0)
            ode.implicit_residual(res, eval_time, y0, trial, tau, beta)
            return res

        scratch[:] = np.zeros(len(y0))
        try:
            increment = self.root_finder.solve(
                residual_fn, np.asarray(scratch, dtype=np.float64),
            )
        except IntegrationFailure as exc:
            logger.warning(
                "%s step failed at t=%g with tau=%g: %s",
                type(self).__name__, time, tau, exc,
            )
            raise IntegrationFailure(
                f"{type(self).__name__} step from t={time} with tau={tau} "
                f"did not converge: {exc}",
                time=time,
                step_size=tau,
            ) from exc

        scratch[:] = increment
        state[:] = y0 + np.asarray(increment, dtype=np.float64)
        return time + tau


@dataclass(frozen=True)
class BackwardEuler(_ImplicitIntegrator):
    """Implicit Euler: f evaluated at the end of the step."""

    name = "backward_euler"
    accuracy_order = 1

    _time_fraction = 1.0
    _beta = 1.0


@dataclass(frozen=True)
class Midpoint(_ImplicitIntegrator):
    """Implicit midpoint rule: f at t + tau/2 and the averaged state.

    Second-order accurate; not the explicit two-stage midpoint method.
    """

    name = "midpoint"
    accuracy_order = 2

    _time_fraction = 0.5
    _beta = 0.5


SCHEMES: dict[str, type[Integrator]] = {
    ForwardEuler.name: ForwardEuler,
    BackwardEuler.name: BackwardEuler,
    Midpoint.name: Midpoint,
}


def get_scheme(
    name: str,
    ode: ExplicitODE,
    root_finder: "RootFinder | None" = None,
) -> Integrator:
    """Build the integrator registered under ``name``.

    ``root_finder`` is required by implicit schemes and ignored otherwise.
    """
    if name not in SCHEMES:
        raise ValueError(
            f"Unknown integrator: {name!r}. Use {', '.join(repr(n) for n in SCHEMES)}."
        )
    cls = SCHEMES[name]
    if cls.implicit:
        return cls(ode, root_finder=root_finder)
    return cls(ode)
