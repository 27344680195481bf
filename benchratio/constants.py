# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
#
# This file is part of the benchratio tool.
#
# Licensed under the MIT License. See LICENSE file in the project root
# for full license information.

"""Canonical constants for benchmark name parsing and comparison.

Every module imports from here, so the naming convention of the benchmark
harness lives in exactly one place.
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Benchmark name layout: "<Wrapper><TypeName>>::BM_<OperationName>[/extra]"
# ---------------------------------------------------------------------------
SCOPE_SEPARATOR = "::"
TYPE_OPEN = "<"
TYPE_CLOSE = ">"
OPERATION_PREFIX = "BM_"

# ---------------------------------------------------------------------------
# Baseline selection
# ---------------------------------------------------------------------------
DEFAULT_BASELINE_PREFIX = "MapBenchmarks<default_std_unordered_map_t>"

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------
FIELD_SEPARATOR = "|"


class TimeUnit(Enum):
    """Time units a report may declare.

    Only nanoseconds are recognised; any other tag is rejected at load time.
    """

    NANOSECONDS = "ns"

    @classmethod
    def from_tag(cls, tag) -> "TimeUnit":
        """Return the unit for *tag*, raising ``ValueError`` if unknown."""
        return cls(tag)
