# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Module-level loggers are created after every import."""
import ast
from pathlib import Path

import pytest

PACKAGE_ROOT = Path(__file__).resolve().parent.parent / "src" / "initial_value_problems"


def _modules_with_logger():
    found = []
    for path in sorted(PACKAGE_ROOT.rglob("*.py")):
        if "logger = logging.getLogger(__name__)" in path.read_text(encoding="utf-8"):
            found.append(path)
    return found


def test_loggers_found():
    assert len(_modules_with_logger()) > 0


@pytest.mark.parametrize("path", _modules_with_logger(), ids=lambda p: p.name)
def test_logger_follows_imports(path):
    tree = ast.parse(path.read_text(encoding="utf-8"))
    import_lines = [
        node.lineno for node in tree.body
        if isinstance(node, (ast.Import, ast.ImportFrom))
    ]
    logger_lines = [
        node.lineno for node in tree.body
        if isinstance(node, ast.Assign)
        and any(isinstance(t, ast.Name) and t.id == "logger" for t in node.targets)
    ]
    assert logger_lines, f"{path.name}: no module-level logger"
    assert min(logger_lines) > max(import_lines), \
        f"{path.name}: logger defined before the last import"
