# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
#
# This file is part of the benchratio tool.
#
# Licensed under the MIT License. See LICENSE file in the project root
# for full license information.

"""
Pytest configuration and shared fixtures for benchratio tests.

Both unittest.TestCase subclasses and plain pytest functions are discovered
automatically by ``pytest``.  Run the full suite with::

    pytest tests/ -v
"""

import json
import os
import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Ensure benchratio is importable regardless of working directory
# ---------------------------------------------------------------------------
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

DATA_DIR = Path(__file__).parent / "data"
MAP_REPORT = DATA_DIR / "map_benchmarks.json"
MAP_BASELINE = "MapBenchmarks<default_std_unordered_map_t>"


def bench(name, cpu_time, real_time=None, iterations=1000, time_unit="ns"):
    """Build one benchmark entry as the harness writes it."""
    return {
        "name": name,
        "iterations": iterations,
        "real_time": cpu_time if real_time is None else real_time,
        "cpu_time": cpu_time,
        "time_unit": time_unit,
    }


def report_text(*entries, context=None):
    """Serialize *entries* into a report document."""
    return json.dumps({
        "context": {"host_name": "test"} if context is None else context,
        "benchmarks": list(entries),
    })


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def map_report_path():
    """Path to the bundled hash map benchmark report."""
    return MAP_REPORT


@pytest.fixture
def map_report_text():
    return MAP_REPORT.read_text(encoding="utf-8")


@pytest.fixture
def write_report(tmp_path):
    """Write report text to a temporary .json file and return its path."""
    def _write(text, filename="report.json"):
        path = tmp_path / filename
        path.write_text(text, encoding="utf-8")
        return path
    return _write
