# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Root-finder adapter backed by scipy.optimize.root.

External dependency (scipy) is confined to this adapter.
"""
import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np
from scipy.optimize import root

from initial_value_problems.ports.root_finder import RootFinder
from initial_value_problems.domain.errors import IntegrationFailure

logger = logging.getLogger(__name__)

# scipy's own default xtol for 'hybr': sqrt(machine epsilon).
_DEFAULT_TOLERANCE = 1.49012e-08


@dataclass(frozen=True)
class RootFinderConfig:
    """Configuration for ScipyRootFinder.

    Attributes:
        method: scipy.optimize.root method ('hybr', 'lm', 'krylov', ...).
        tolerance: Termination tolerance passed as ``tol``.
        residual_tolerance: Largest residual component at which a root is
            accepted even when scipy reports no progress.
        max_iterations: Iteration or evaluation cap; None keeps scipy's default.
    """
    method: str = "hybr"
    tolerance: float = _DEFAULT_TOLERANCE
    residual_tolerance: float = 1e-10
    max_iterations: int | None = None

    def __post_init__(self) -> None:
        if self.tolerance <= 0.0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.residual_tolerance < 0.0:
            raise ValueError(
                f"residual_tolerance must be >= 0, got {self.residual_tolerance}"
            )
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be >= 1, got {self.max_iterations}"
            )


# Name of the iteration cap option per scipy method.
_ITERATION_OPTION = {
    "hybr": "maxfev",
    "lm": "maxiter",
    "broyden1": "maxiter",
    "broyden2": "maxiter",
    "anderson": "maxiter",
    "linearmixing": "maxiter",
    "diagbroyden": "maxiter",
    "excitingmixing": "maxiter",
    "krylov": "maxiter",
    "df-sane": "maxfev",
}


class ScipyRootFinder(RootFinder):
    """Solves residual(x) = 0 with scipy.optimize.root."""

    def __init__(self, config: RootFinderConfig = RootFinderConfig()) -> None:
        self.config = config

    def solve(
        self,
        residual_fn: Callable[[np.ndarray], np.ndarray],
        initial_guess: np.ndarray,
    ) -> np.ndarray:
        options = {}
        option_name = _ITERATION_OPTION.get(self.config.method)
        if self.config.max_iterations is not None and option_name is not None:
            options[option_name] = self.config.max_iterations

        guess = np.array(initial_guess, dtype=np.float64)
        sol = root(
            residual_fn,
            guess,
            method=self.config.method,
            tol=self.config.tolerance,
            options=options or None,
        )
        logger.debug(
            "scipy root (%s): success=%s nfev=%s",
            self.config.method, sol.success, getattr(sol, "nfev", None),
        )

        result = np.asarray(sol.x, dtype=np.float64)
        if not np.all(np.isfinite(result)):
            raise IntegrationFailure("root-finder returned a non-finite root")
        if not sol.success:
            residual = np.max(np.abs(residual_fn(result)), initial=0.0)
            if not residual <= self.config.residual_tolerance:
                raise IntegrationFailure(
                    f"root-finder did not converge: {sol.message}"
                )
            logger.debug(
                "scipy root (%s): accepting root with residual %g: %s",
                self.config.method, residual, sol.message,
            )
        return result
