# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for comparing single-step schemes.

Usage:
    # Default sinusoidal model, all schemes, 11 samples of 0.1 s
    initial-value-problems

    # Custom model and grid
    initial-value-problems --lam 0.5 --omega 2 --amp 1.0 --y0 0.0 --tau 0.05 --count 41

    # Two components, sample the second one
    initial-value-problems --amp 0.5 --amp 2.0 --y0 1.0 --y0 -1.0 --component 1

    # Observed convergence orders and CSV export
    initial-value-problems --convergence
    initial-value-problems --scheme midpoint --export-csv samples.csv
"""
import argparse
import logging
import math
import sys

from initial_value_problems.domain.errors import IVPError
from initial_value_problems.domain.sinusoidal import Sinusoidal
from initial_value_problems.domain.integrators import SCHEMES, get_scheme
from initial_value_problems.domain.propagator import Propagator
from initial_value_problems.domain.trajectory import Trajectory, sample_trajectory
from initial_value_problems.domain.convergence import ConvergenceResult, convergence_study
from initial_value_problems.ports.root_finder import RootFinder
from initial_value_problems.adapters.scipy_root_finder import RootFinderConfig, ScipyRootFinder
from initial_value_problems.adapters.csv_exporter import CsvTrajectoryExporter


def run(
    ode: Sinusoidal,
    initial_state: list[float],
    start: float,
    tau: float,
    count: int,
    component: int = 0,
    schemes: list[str] | None = None,
    root_finder: RootFinder | None = None,
) -> dict[str, Trajectory]:
    """
    Sample the exact solution and each requested scheme on one grid.

    Returns:
        Column name -> trajectory, exact solution first.
    """
    if schemes is None:
        schemes = list(SCHEMES)
    if root_finder is None:
        root_finder = ScipyRootFinder()

    series = {
        Propagator.name: sample_trajectory(
            Propagator(ode), start, count, tau, initial_state, component,
        ),
    }
    for name in schemes:
        scheme = get_scheme(name, ode, root_finder=root_finder)
        series[name] = sample_trajectory(
            scheme, start, count, tau, initial_state, component,
        )
    return series


def run_convergence(
    ode: Sinusoidal,
    initial_state: list[float],
    start: float,
    duration: float,
    component: int = 0,
    schemes: list[str] | None = None,
    root_finder: RootFinder | None = None,
) -> list[ConvergenceResult]:
    """Convergence study of each requested scheme over ``duration``."""
    if schemes is None:
        schemes = list(SCHEMES)
    if root_finder is None:
        root_finder = ScipyRootFinder()
    return [
        convergence_study(
            get_scheme(name, ode, root_finder=root_finder),
            start, duration, initial_state, component,
        )
        for name in schemes
    ]


def format_table(series: dict[str, Trajectory]) -> str:
    """Fixed-width table: time, then one column per series."""
    names = list(series)
    columns = [list(series[name]) for name in names]
    lines = ["{:>10}".format("time") + "".join(f"{n:>16}" for n in names)]
    for row in range(len(columns[0])):
        time = columns[0][row].time
        values = "".join(f"{col[row].value:>16.8f}" for col in columns)
        lines.append(f"{time:>10.4f}{values}")
    return "\n".join(lines)


def format_convergence(results: list[ConvergenceResult]) -> str:
    """One block per scheme: step size, max error and observed order."""
    lines = []
    for result in results:
        lines.append(f"{result.scheme_name}:")
        orders = ("",) + tuple(
            "nan" if math.isnan(p) else f"{p:.3f}" for p in result.observed_orders
        )
        for h, e, p in zip(result.step_sizes, result.errors, orders):
            lines.append(f"  tau={h:<10.6g} error={e:<14.6e} order={p}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Compare single-step ODE schemes against the exact solution"
    )
    model_group = parser.add_argument_group('model (sinusoidal forcing)')
    model_group.add_argument(
        '--lam', type=float, default=-0.2,
        help="Decay rate lambda (default: -0.2)"
    )
    model_group.add_argument(
        '--omega', type=float, default=4.0,
        help="Forcing angular frequency (default: 4.0)"
    )
    model_group.add_argument(
        '--amp', type=float, action='append',
        help="Forcing amplitude, once per component (default: 0.5)"
    )
    model_group.add_argument(
        '--y0', type=float, action='append',
        help="Initial value, once per component (default: 1.0)"
    )

    grid_group = parser.add_argument_group('time grid')
    grid_group.add_argument(
        '--start', type=float, default=0.0,
        help="Initial time (default: 0.0)"
    )
    grid_group.add_argument(
        '--tau', type=float, default=0.1,
        help="Step size (default: 0.1)"
    )
    grid_group.add_argument(
        '--count', type=int, default=11,
        help="Number of samples including the initial value (default: 11)"
    )
    grid_group.add_argument(
        '--component', type=int, default=0,
        help="State component to sample (default: 0)"
    )

    scheme_group = parser.add_argument_group('schemes')
    scheme_group.add_argument(
        '--scheme', action='append', choices=sorted(SCHEMES),
        help="Scheme to run, repeatable (default: all)"
    )
    scheme_group.add_argument(
        '--tolerance', type=float, default=1.49012e-08,
        help="Root-finder tolerance for implicit schemes (default: 1.49012e-08)"
    )
    scheme_group.add_argument(
        '--max-iterations', type=int, default=None,
        help="Root-finder iteration cap for implicit schemes"
    )

    output_group = parser.add_argument_group('output')
    output_group.add_argument(
        '--convergence', action='store_true', default=False,
        help="Print observed convergence orders over the grid duration"
    )
    output_group.add_argument(
        '--export-csv',
        help="Export sampled trajectories to CSV"
    )
    output_group.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    amp = args.amp or [0.5]
    y0 = args.y0 or [1.0] * len(amp)

    try:
        ode = Sinusoidal(lam=args.lam, omega=args.omega, amp=amp)
        root_finder = ScipyRootFinder(RootFinderConfig(
            tolerance=args.tolerance,
            max_iterations=args.max_iterations,
        ))

        series = run(
            ode, y0, args.start, args.tau, args.count,
            component=args.component,
            schemes=args.scheme,
            root_finder=root_finder,
        )
        print(format_table(series))

        if args.convergence:
            duration = args.tau * (args.count - 1)
            results = run_convergence(
                ode, y0, args.start, duration,
                component=args.component,
                schemes=args.scheme,
                root_finder=root_finder,
            )
            print()
            print(format_convergence(results))

        if args.export_csv:
            n = CsvTrajectoryExporter().export(series, args.export_csv)
            print(f"Exported {n} samples to {args.export_csv}")

    except (IVPError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
