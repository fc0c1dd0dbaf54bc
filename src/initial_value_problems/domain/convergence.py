# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Convergence of numerical schemes against the analytical solution.

For step sizes h_k and maximum errors e_k the observed order between two
refinements is

    p_k = log(e_k / e_{k+1}) / log(h_k / h_{k+1})

which tends to 1 for the Euler schemes and 2 for the implicit midpoint rule.
"""

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from initial_value_problems.domain.propagator import Propagator
from initial_value_problems.domain.trajectory import Trajectory, sample_trajectory


@dataclass(frozen=True)
class ConvergenceResult:
    """Errors of one scheme over a sequence of refinements."""
    scheme_name: str
    step_sizes: tuple[float, ...]
    errors: tuple[float, ...]
    observed_orders: tuple[float, ...]


def max_abs_error(numerical: Trajectory, reference: Trajectory) -> float:
    """Largest absolute difference between two trajectories on the same grid."""
    if len(numerical) != len(reference):
        raise ValueError(
            f"Trajectory lengths differ: {len(numerical)} vs {len(reference)}"
        )
    _, approx = numerical.as_arrays()
    _, exact = reference.as_arrays()
    return float(np.max(np.abs(approx - exact)))


def observed_orders(
    step_sizes: Sequence[float],
    errors: Sequence[float],
) -> tuple[float, ...]:
    """Observed orders between successive refinements (nan when an error is zero)."""
    orders = []
    for k in range(len(errors) - 1):
        e0, e1 = errors[k], errors[k + 1]
        h0, h1 = step_sizes[k], step_sizes[k + 1]
        if e0 <= 0.0 or e1 <= 0.0 or h0 == h1:
            orders.append(math.nan)
        else:
            orders.append(math.log(e0 / e1) / math.log(h0 / h1))
    return tuple(orders)


def convergence_study(
    scheme: object,
    start: float,
    duration: float,
    initial_state: Sequence[float],
    index: int = 0,
    step_counts: Sequence[int] = (10, 20, 40, 80),
) -> ConvergenceResult:
    """Maximum error of ``scheme`` against its ODE's exact solution per step count.

    Args:
        scheme: Integrator bound to an ODE with an analytical solution.
        start: Initial time.
        duration: Integration interval length.
        initial_state: State at ``start``; not modified.
        index: Component to compare.
        step_counts: Numbers of steps over ``duration``, increasing.

    Raises:
        UnsupportedOperation: The scheme's ODE has no closed form.
    """
    if duration <= 0.0:
        raise ValueError(f"duration must be positive, got {duration}")
    if not step_counts:
        raise ValueError("step_counts must not be empty")

    reference_scheme = Propagator(scheme.ode)
    step_sizes = []
    errors = []
    for n in step_counts:
        if n < 1:
            raise ValueError(f"step counts must be >= 1, got {n}")
        tau = duration / n
        numerical = sample_trajectory(scheme, start, n + 1, tau, initial_state, index)
        reference = sample_trajectory(reference_scheme, start, n + 1, tau, initial_state, index)
        step_sizes.append(tau)
        errors.append(max_abs_error(numerical, reference))

    return ConvergenceResult(
        scheme_name=getattr(scheme, "name", type(scheme).__name__),
        step_sizes=tuple(step_sizes),
        errors=tuple(errors),
        observed_orders=observed_orders(step_sizes, errors),
    )
