# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for analytical propagation behind the stepping interface."""
import math

import numpy as np
import pytest

from initial_value_problems.domain.errors import BoundsError, UnsupportedOperation
from initial_value_problems.domain.ode import OrdinaryDifferentialEquation
from initial_value_problems.domain.propagator import Propagator
from initial_value_problems.domain.sinusoidal import Sinusoidal
from initial_value_problems.domain.trajectory import sample_trajectory


class Decay(OrdinaryDifferentialEquation):

    def explicit(self, time, state, alpha):
        y = np.asarray(state, dtype=np.float64)
        state[:] = y - y * alpha
        return state


class ClosedFormDecay(Decay):

    def analytical_component(self, initial_time, initial_state, elapsed, index):
        return initial_state[index] * math.exp(-elapsed)


class TestEvaluate:

    def test_forwards_to_model(self):
        ode = Sinusoidal(lam=0.3, omega=2.0, amp=[1.0, -0.5])
        prop = Propagator(ode)
        y0 = [0.5, 2.0]
        for i in range(2):
            assert prop.evaluate(0.2, y0, 0.7, i) == ode.analytical_component(0.2, y0, 0.7, i)

    def test_callable(self):
        prop = Propagator(Sinusoidal())
        assert prop(0.0, [1.0], 0.1, 0) == prop.evaluate(0.0, [1.0], 0.1, 0)

    def test_zero_elapsed_is_identity(self):
        assert Propagator(Sinusoidal()).evaluate(0.0, [1.0], 0.0, 0) == 1.0

    def test_state_not_modified(self):
        y0 = np.array([1.0])
        Propagator(Sinusoidal()).evaluate(0.0, y0, 0.5, 0)
        assert y0[0] == 1.0

    def test_bounds(self):
        with pytest.raises(BoundsError):
            Propagator(Sinusoidal()).evaluate(0.0, [1.0], 0.1, 1)

    def test_unsupported_model(self):
        prop = Propagator(Decay())
        assert not prop.supported
        with pytest.raises(UnsupportedOperation):
            prop.evaluate(0.0, [1.0], 0.1, 0)

    def test_supported_model(self):
        assert Propagator(Sinusoidal()).supported

    def test_user_model_with_closed_form(self):
        prop = Propagator(ClosedFormDecay())
        assert prop.supported
        values = [s.value for s in sample_trajectory(prop, 0.0, 3, 0.5, [2.0])]
        assert values == pytest.approx([2.0, 2.0 * math.exp(-0.5), 2.0 * math.exp(-1.0)])


class TestPropagate:

    def test_all_components(self):
        ode = Sinusoidal(lam=0.1, omega=1.0, amp=[1.0, 2.0, 3.0])
        y0 = np.array([1.0, 0.0, -1.0])
        out = Propagator(ode).propagate(0.0, y0, 0.3)
        assert out.shape == (3,)
        assert out == pytest.approx(ode.analytical_solution(0.0, y0, 0.3))
        assert list(y0) == [1.0, 0.0, -1.0]

    def test_step_overwrites_state(self):
        ode = Sinusoidal()
        y = np.array([1.0])
        t = Propagator(ode).step(0.0, y, 0.1)
        assert t == pytest.approx(0.1)
        assert y[0] == ode.analytical_component(0.0, [1.0], 0.1, 0)

    def test_repeated_steps_follow_exact_solution(self):
        ode = Sinusoidal(lam=0.5, omega=3.0, amp=[1.0])
        prop = Propagator(ode)
        y = np.array([1.0])
        t = 0.0
        for _ in range(10):
            t = prop.step(t, y, 0.1)
        assert y[0] == pytest.approx(ode.analytical_component(0.0, [1.0], 1.0, 0), rel=1e-12)

    def test_step_unsupported_leaves_state(self):
        y = np.array([1.0])
        with pytest.raises(UnsupportedOperation):
            Propagator(Decay()).step(0.0, y, 0.1)
        assert y[0] == 1.0
