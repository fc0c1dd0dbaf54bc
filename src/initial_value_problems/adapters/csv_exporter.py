# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV trajectory exporter.

Exports sampled trajectories as one time column plus one column per series.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging
import math
from typing import Mapping

from initial_value_problems.ports.export import TrajectoryExporter
from initial_value_problems.domain.trajectory import Trajectory

logger = logging.getLogger(__name__)


class CsvTrajectoryExporter(TrajectoryExporter):
    """Exports named trajectories sharing one time grid to CSV."""

    def export(
        self,
        series: Mapping[str, Trajectory],
        path: str,
    ) -> int:
        if not series:
            raise ValueError("No trajectories to export")

        names = list(series)
        columns = [list(series[name]) for name in names]
        row_count = len(columns[0])
        for name, samples in zip(names, columns):
            if len(samples) != row_count:
                raise ValueError(
                    f"Trajectory {name!r} has {len(samples)} samples, expected {row_count}"
                )

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(['time'] + names)

            _warned_non_finite = False
            for row in range(row_count):
                time = columns[0][row].time
                values = []
                for name, samples in zip(names, columns):
                    sample = samples[row]
                    if not math.isclose(sample.time, time, rel_tol=1e-12, abs_tol=1e-12):
                        raise ValueError(
                            f"Trajectory {name!r} sample {row} at t={sample.time} "
                            f"does not match t={time}"
                        )
                    if not math.isfinite(sample.value) and not _warned_non_finite:
                        logger.warning(
                            "Non-finite value in %r at t=%g", name, sample.time,
                        )
                        _warned_non_finite = True
                    values.append(f'{sample.value:.12g}')
                writer.writerow([f'{time:.12g}'] + values)

        return row_count
