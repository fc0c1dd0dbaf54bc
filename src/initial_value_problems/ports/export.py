# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for trajectory export.

Adapters implement this to write sampled trajectories in various formats.
"""
from typing import Mapping, Protocol, runtime_checkable

from initial_value_problems.domain.trajectory import Trajectory


@runtime_checkable
class TrajectoryExporter(Protocol):
    """Port for exporting sampled trajectories to file."""

    def export(
        self,
        series: Mapping[str, Trajectory],
        path: str,
    ) -> int:
        """
        Export named trajectories sharing one time grid.

        Args:
            series: Column name -> trajectory, in column order.
            path: Output file path.

        Returns:
            Number of samples (rows) exported.
        """
        ...
