# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Error taxonomy for ODE models, integrators and propagators.

Every error surfaces to the immediate caller of the failing operation.
Non-finite values (overflow, NaN) are not errors: they propagate through
floating-point arithmetic like anywhere else in numpy.
"""


class IVPError(Exception):
    """Base class for all initial value problem errors."""


class UnsupportedOperation(IVPError, NotImplementedError):
    """The model does not provide the requested capability.

    Raised when an analytical solution is requested from an ODE with no
    closed form. Callers should branch on ``supports_analytical`` first.
    """


class BoundsError(IVPError, IndexError):
    """Component index or buffer length outside the valid range.

    Bounds are always checked; this indicates a defect in the caller.
    """


class IntegrationFailure(IVPError, RuntimeError):
    """The nonlinear solve of an implicit step did not converge.

    The state vector is left unmodified so the caller may shrink the step
    and retry the whole step.
    """

    def __init__(
        self,
        message: str,
        time: float | None = None,
        step_size: float | None = None,
    ) -> None:
        super().__init__(message)
        self.time = time
        self.step_size = step_size


def check_index(index: int, *lengths: int) -> None:
    """Raise BoundsError unless 0 <= index < length for every length."""
    for length in lengths:
        if not 0 <= index < length:
            raise BoundsError(
                f"Component index {index} out of range for length {length}"
            )


def check_length(name: str, actual: int, expected: int) -> None:
    """Raise BoundsError when a buffer does not match the expected length."""
    if actual != expected:
        raise BoundsError(
            f"{name} has length {actual}, expected {expected}"
        )
