# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Sampled trajectories of one state component on a uniform time grid.

Sample k sits at start + k * tau. Integrators produce it by k repeated
steps from a private copy of the initial state; a Propagator evaluates the
closed form at elapsed time k * tau. Either way the caller's initial state
is never touched and every iteration starts over from it.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from initial_value_problems.domain.errors import UnsupportedOperation, check_index
from initial_value_problems.domain.integrators import make_scratch
from initial_value_problems.domain.propagator import Propagator

logger = logging.getLogger(__name__)


# --- Types ---

@dataclass(frozen=True)
class TrajectorySample:
    """Value of the selected component at one sample time."""
    time: float
    value: float


@dataclass(frozen=True)
class Trajectory:
    """Lazy, restartable sequence of TrajectorySample.

    Attributes:
        scheme: Integrator or Propagator driving the samples.
        start: Time of the first sample.
        count: Number of samples, including the initial value.
        tau: Uniform step between samples.
        initial_state: Snapshot of the state at ``start``.
        index: Selected state component.
    """
    scheme: object
    start: float
    count: int
    tau: float
    initial_state: tuple[float, ...]
    index: int = 0

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[TrajectorySample]:
        if isinstance(self.scheme, Propagator):
            samples = self._propagated()
        else:
            samples = self._integrated()

        warned = False
        for sample in samples:
            if not warned and not math.isfinite(sample.value):
                logger.warning(
                    "Non-finite value %r from %s at t=%g",
                    sample.value, type(self.scheme).__name__, sample.time,
                )
                warned = True
            yield sample

    def _integrated(self) -> Iterator[TrajectorySample]:
        state = np.array(self.initial_state, dtype=np.float64)
        scratch = make_scratch(state) if getattr(self.scheme, "implicit", False) else None
        i = self.index

        yield TrajectorySample(self.start, float(state[i]))
        for k in range(1, self.count):
            self.scheme.step(self.start + (k - 1) * self.tau, state, self.tau, scratch)
            yield TrajectorySample(self.start + k * self.tau, float(state[i]))

    def _propagated(self) -> Iterator[TrajectorySample]:
        y0 = self.initial_state
        i = self.index

        yield TrajectorySample(self.start, float(y0[i]))
        for k in range(1, self.count):
            elapsed = k * self.tau
            value = self.scheme.evaluate(self.start, y0, elapsed, i)
            yield TrajectorySample(self.start + elapsed, float(value))

    def times(self) -> np.ndarray:
        """Sample times, without stepping the scheme."""
        return self.start + self.tau * np.arange(self.count, dtype=np.float64)

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """(times, values) of one full iteration."""
        samples = list(self)
        times = np.array([s.time for s in samples], dtype=np.float64)
        values = np.array([s.value for s in samples], dtype=np.float64)
        return times, values


def sample_trajectory(
    scheme: object,
    start: float,
    count: int,
    tau: float,
    initial_state: Sequence[float],
    index: int = 0,
) -> Trajectory:
    """Trajectory of component ``index`` over ``count`` samples spaced ``tau``.

    Args:
        scheme: Integrator (anything with ``step``) or Propagator.
        start: Time at which ``initial_state`` holds.
        count: Number of samples (>= 1); the first is the initial value.
        tau: Uniform step size.
        initial_state: State at ``start``; copied, never modified.
        index: Component to sample.

    Raises:
        ValueError: count < 1 or tau not finite.
        BoundsError: index outside the state.
        UnsupportedOperation: scheme is a Propagator over a model with no
            closed-form solution.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    if not math.isfinite(tau):
        raise ValueError(f"tau must be finite, got {tau}")
    snapshot = tuple(float(v) for v in initial_state)
    check_index(index, len(snapshot))
    if isinstance(scheme, Propagator) and not scheme.supported:
        raise UnsupportedOperation(
            f"{type(scheme.ode).__name__} has no analytical solution"
        )
    return Trajectory(
        scheme=scheme,
        start=float(start),
        count=int(count),
        tau=float(tau),
        initial_state=snapshot,
        index=index,
    )
