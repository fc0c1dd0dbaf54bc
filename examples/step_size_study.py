#!/usr/bin/env python3
"""Step-size study example: explicit vs implicit schemes on a growing solution.

Samples each scheme against the exact solution, prints observed orders,
exports the samples to CSV, and drives a manual stepping loop that halves
the step after a failed implicit solve.

Usage:
    python examples/step_size_study.py
"""
import numpy as np

from initial_value_problems import (
    BackwardEuler,
    ForwardEuler,
    IntegrationFailure,
    Midpoint,
    Propagator,
    Sinusoidal,
    convergence_study,
    make_scratch,
    sample_trajectory,
)
from initial_value_problems.adapters.csv_exporter import CsvTrajectoryExporter
from initial_value_problems.adapters.scipy_root_finder import ScipyRootFinder


def main():
    ode = Sinusoidal(lam=-0.2, omega=4.0, amp=[0.5])
    y0 = [1.0]
    finder = ScipyRootFinder()
    schemes = [ForwardEuler(ode), BackwardEuler(ode, finder), Midpoint(ode, finder)]

    # --- Step 1: Sample every scheme on one grid ---
    series = {"exact": sample_trajectory(Propagator(ode), 0.0, 21, 0.1, y0)}
    for scheme in schemes:
        series[scheme.name] = sample_trajectory(scheme, 0.0, 21, 0.1, y0)

    n = CsvTrajectoryExporter().export(series, "step_size_study.csv")
    print(f"Exported {n} samples to step_size_study.csv")

    # --- Step 2: Observed convergence orders ---
    for scheme in schemes:
        result = convergence_study(scheme, 0.0, 2.0, y0, step_counts=(20, 40, 80, 160))
        orders = ", ".join(f"{p:.2f}" for p in result.observed_orders)
        print(f"  {result.scheme_name:<15} orders: {orders}")

    # --- Step 3: Manual loop with caller-side retry ---
    scheme = Midpoint(ode, finder)
    y = np.array(y0)
    scratch = make_scratch(y)
    t, tau, t_end = 0.0, 0.5, 2.0
    while t < t_end - 1e-12:
        step = min(tau, t_end - t)
        try:
            t = scheme.step(t, y, step, scratch)
        except IntegrationFailure:
            tau /= 2
    exact = Propagator(ode).evaluate(0.0, y0, t_end, 0)
    print(f"Midpoint at t={t:.2f}: {y[0]:.6f} (exact {exact:.6f})")


if __name__ == "__main__":
    main()
