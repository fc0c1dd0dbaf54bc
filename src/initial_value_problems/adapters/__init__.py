# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for external collaborators: scipy root-finding and CSV export.
"""
from initial_value_problems.adapters.scipy_root_finder import (
    RootFinderConfig,
    ScipyRootFinder,
)
from initial_value_problems.adapters.csv_exporter import CsvTrajectoryExporter

__all__ = [
    "RootFinderConfig",
    "ScipyRootFinder",
    "CsvTrajectoryExporter",
]
