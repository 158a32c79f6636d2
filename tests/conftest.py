"""Shared fixtures for the test suite."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import pytest

# Drawing tests must never open a window.
matplotlib.use("Agg")


INSTANCE = """\
graph:
  nodes: [A, B, C, D, E]
  edges:
    - [A, B, 1]
    - [B, C, 1]
    - [A, C, 5]
    - [C, C, 2]
    - [A, B, 3]
query:
  start_node: A
  end_node: C
"""


@pytest.fixture
def instance_path(tmp_path: Path) -> Path:
    path = tmp_path / "instance.yaml"
    path.write_text(INSTANCE, encoding="utf-8")
    return path
