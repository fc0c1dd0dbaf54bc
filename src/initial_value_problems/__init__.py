# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Initial Value Problems

Define first-order ordinary differential equations, advance them with
single-step schemes (forward Euler, backward Euler, implicit midpoint),
and compare against the closed-form solution where one exists. Includes
the sinusoidally forced linear model, trajectory sampling on uniform
grids, convergence-order studies, a scipy-backed root-finder for the
implicit schemes, and CSV export.
"""

from initial_value_problems.domain.errors import (
    IVPError,
    UnsupportedOperation,
    BoundsError,
    IntegrationFailure,
)
from initial_value_problems.domain.ode import (
    ExplicitODE,
    AnalyticalODE,
    OrdinaryDifferentialEquation,
    supports_analytical,
)
from initial_value_problems.domain.sinusoidal import Sinusoidal
from initial_value_problems.domain.integrators import (
    Integrator,
    ForwardEuler,
    BackwardEuler,
    Midpoint,
    SCHEMES,
    get_scheme,
    make_scratch,
)
from initial_value_problems.domain.propagator import Propagator
from initial_value_problems.domain.trajectory import (
    TrajectorySample,
    Trajectory,
    sample_trajectory,
)
from initial_value_problems.domain.convergence import (
    ConvergenceResult,
    max_abs_error,
    observed_orders,
    convergence_study,
)

ODE = OrdinaryDifferentialEquation

__all__ = [
    "IVPError",
    "UnsupportedOperation",
    "BoundsError",
    "IntegrationFailure",
    "ExplicitODE",
    "AnalyticalODE",
    "OrdinaryDifferentialEquation",
    "ODE",
    "supports_analytical",
    "Sinusoidal",
    "Integrator",
    "ForwardEuler",
    "BackwardEuler",
    "Midpoint",
    "SCHEMES",
    "get_scheme",
    "make_scratch",
    "Propagator",
    "TrajectorySample",
    "Trajectory",
    "sample_trajectory",
    "ConvergenceResult",
    "max_abs_error",
    "observed_orders",
    "convergence_study",
]
