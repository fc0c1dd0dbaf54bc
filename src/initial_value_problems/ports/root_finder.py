# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for nonlinear root-finding.

Implicit integrators hand a residual function and an initial guess to an
adapter implementing this port. Iteration limits and tolerances are the
adapter's configuration, not the integrator's.
"""
from typing import Callable, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RootFinder(Protocol):
    """Port for solving residual(x) = 0."""

    def solve(
        self,
        residual_fn: Callable[[np.ndarray], np.ndarray],
        initial_guess: np.ndarray,
    ) -> np.ndarray:
        """
        Find a root of ``residual_fn`` starting from ``initial_guess``.

        Args:
            residual_fn: Maps a trial vector to a residual of the same shape.
            initial_guess: Starting point; not modified.

        Returns:
            The converged root as a new array.

        Raises:
            IntegrationFailure: The iteration did not converge.
        """
        ...
