"""Tests that run the example scripts."""

from __future__ import annotations

import runpy
from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parents[2] / "examples"


@pytest.mark.parametrize("name", ["basic_usage.py", "compression_example.py"])
def test_example_runs(name: str, capsys: pytest.CaptureFixture[str]) -> None:
    """Test an example script runs to completion."""
    example_file = EXAMPLES_DIR / name
    if not example_file.exists():
        pytest.skip("Example file not found")

    runpy.run_path(str(example_file), run_name="__main__")

    out = capsys.readouterr().out
    assert "Example complete!" in out
    assert "✓" in out
