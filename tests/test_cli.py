# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the scheme comparison command-line interface."""
import csv

import pytest

from initial_value_problems.cli import (
    format_convergence,
    format_table,
    main,
    run,
    run_convergence,
)
from initial_value_problems.domain.sinusoidal import Sinusoidal


class TestRun:

    def test_default_schemes(self):
        series = run(Sinusoidal(), [1.0], 0.0, 0.1, 5)
        assert list(series) == ["exact", "forward_euler", "backward_euler", "midpoint"]
        assert all(len(t) == 5 for t in series.values())

    def test_selected_scheme(self):
        series = run(Sinusoidal(), [1.0], 0.0, 0.1, 3, schemes=["midpoint"])
        assert list(series) == ["exact", "midpoint"]

    def test_unknown_scheme(self):
        with pytest.raises(ValueError):
            run(Sinusoidal(), [1.0], 0.0, 0.1, 3, schemes=["rk4"])

    def test_format_table(self):
        table = format_table(run(Sinusoidal(), [1.0], 0.0, 0.1, 2, schemes=["forward_euler"]))
        lines = table.splitlines()
        assert len(lines) == 3
        assert "forward_euler" in lines[0]
        assert "1.02000000" in lines[2]

    def test_convergence_report(self):
        results = run_convergence(Sinusoidal(), [1.0], 0.0, 1.0, schemes=["forward_euler"])
        report = format_convergence(results)
        assert report.startswith("forward_euler:")
        assert "order=" in report


class TestMain:

    def test_prints_table(self, capsys):
        main(["--count", "3"])
        out = capsys.readouterr().out
        assert "exact" in out
        assert "backward_euler" in out

    def test_convergence_flag(self, capsys):
        main(["--count", "11", "--scheme", "midpoint", "--convergence"])
        out = capsys.readouterr().out
        assert "midpoint:" in out
        assert "order=" in out

    def test_export_csv(self, tmp_path, capsys):
        path = tmp_path / "samples.csv"
        main(["--count", "4", "--scheme", "forward_euler", "--export-csv", str(path)])
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["time", "exact", "forward_euler"]
        assert len(rows) == 5
        assert "Exported 4 samples" in capsys.readouterr().out

    def test_multi_component(self, capsys):
        main(["--amp", "0.5", "--amp", "2.0", "--y0", "1.0", "--y0", "-1.0",
              "--component", "1", "--count", "2"])
        assert "-1.00000000" in capsys.readouterr().out

    def test_component_out_of_range_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--component", "3"])
        assert excinfo.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_invalid_model_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--lam", "0", "--omega", "0"])
        assert excinfo.value.code == 1

    def test_unknown_scheme_rejected_by_parser(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["--scheme", "rk4"])
        assert excinfo.value.code == 2
