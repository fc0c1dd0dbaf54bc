# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for external collaborators.

Adapters implement these for root-finding and trajectory export.
"""
from initial_value_problems.ports.root_finder import RootFinder
from initial_value_problems.ports.export import TrajectoryExporter

__all__ = [
    "RootFinder",
    "TrajectoryExporter",
]
