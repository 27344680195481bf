# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
#
# This file is part of the benchratio tool.
#
# Licensed under the MIT License. See LICENSE file in the project root
# for full license information.

"""
Relative speed of every benchmarked type against a baseline type.

For each record the operation is looked up in the baseline group and the
ratio ``baseline_cpu_time / cpu_time`` is computed.  A ratio above 1 means
the type is faster than the baseline for that operation, below 1 slower.
"""

from __future__ import annotations

import functools
import warnings
from typing import NamedTuple

import numpy as np

from .constants import DEFAULT_BASELINE_PREFIX
from .errors import DuplicateKeyError, MissingBaselineOperationError
from .names import split_name
from .report import Report


class ComparisonRow(NamedTuple):
    operation: str
    ratio: float


ComparisonTable = dict[str, list[ComparisonRow]]


# ============================================================================
# Baseline
# ============================================================================

def baseline_times(report: Report, baseline_prefix: str,
                   strict: bool = False) -> dict[str, float]:
    """Map operation name → cpu_time for records whose name starts with *baseline_prefix*.

    A repeated operation overwrites the earlier value.  A ``UserWarning`` is
    issued when the values differ; with *strict* the repeat raises
    ``DuplicateKeyError`` instead.
    """
    times: dict[str, float] = {}
    for record in report.benchmarks:
        if not record.name.startswith(baseline_prefix):
            continue
        _, operation = split_name(record.name)
        if operation in times:
            if strict:
                raise DuplicateKeyError(
                    f"Baseline operation {operation!r} measured more than once "
                    f"(last: {record.name!r})"
                )
            previous = times[operation]
            if previous != record.cpu_time:
                warnings.warn(
                    f"Baseline operation {operation!r} measured more than once "
                    f"({previous} vs {record.cpu_time}); using the last value",
                    UserWarning,
                    stacklevel=2,
                )
        times[operation] = record.cpu_time
    return times


# ============================================================================
# Ratios
# ============================================================================

def speed_ratio(baseline_time: float, time: float) -> float:
    """IEEE division ``baseline_time / time``; zero yields inf or nan, never raises."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(baseline_time) / np.float64(time))


def _compare_ratios(a: ComparisonRow, b: ComparisonRow) -> int:
    # nan is unordered: treat it as equal so the sort stays stable
    if a.ratio < b.ratio:
        return -1
    if a.ratio > b.ratio:
        return 1
    return 0


def sort_rows(rows) -> list[ComparisonRow]:
    """Stable ascending sort by ratio."""
    return sorted(rows, key=functools.cmp_to_key(_compare_ratios))


def compare(report: Report,
            baseline_prefix: str = DEFAULT_BASELINE_PREFIX,
            strict: bool = False) -> ComparisonTable:
    """
    Compute per-type, per-operation speed ratios against the baseline group.

    Every record takes part, the baseline records included (their own
    ratios are 1 unless measured more than once).  Within one type a
    repeated operation overwrites the earlier ratio unless *strict* is set.

    Returns:
        ``{type_name: [ComparisonRow(operation, ratio), ...]}`` with each row
        list sorted ascending by ratio.  Key order carries no meaning.

    Raises:
        NameExtractionError: if any benchmark name cannot be split.
        MissingBaselineOperationError: if the baseline group is empty or an
            operation has no baseline counterpart.
        DuplicateKeyError: in strict mode, on a repeated key.
    """
    baseline = baseline_times(report, baseline_prefix, strict=strict)
    if report.benchmarks and not baseline:
        raise MissingBaselineOperationError(None, baseline_prefix)

    grouped: dict[str, dict[str, float]] = {}
    for record in report.benchmarks:
        type_name, operation = split_name(record.name)
        if operation not in baseline:
            raise MissingBaselineOperationError(operation, baseline_prefix)

        rows = grouped.setdefault(type_name, {})
        if strict and operation in rows:
            raise DuplicateKeyError(
                f"Operation {operation!r} measured more than once for type {type_name!r}"
            )
        rows[operation] = speed_ratio(baseline[operation], record.cpu_time)

    return {
        type_name: sort_rows(ComparisonRow(op, ratio) for op, ratio in rows.items())
        for type_name, rows in grouped.items()
    }

