# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
#
# This file is part of the benchratio tool.
#
# Licensed under the MIT License. See LICENSE file in the project root
# for full license information.

"""Pandas integration utilities for benchratio."""

import numpy as np
import pandas as pd

from .compare import ComparisonTable
from .names import split_name
from .report import Report

REPORT_COLUMNS = ["name", "type_name", "operation", "iterations",
                  "real_time", "cpu_time", "time_unit"]
TABLE_COLUMNS = ["type_name", "operation", "ratio"]


def report_to_dataframe(report: Report) -> pd.DataFrame:
    """
    Convert a loaded report into a DataFrame, one row per benchmark record.

    Args:
        report: The report returned by ``benchratio.load``

    Returns:
        DataFrame with columns name, type_name, operation, iterations,
        real_time, cpu_time and time_unit.  Iterations are ``uint64``, times
        ``float64``.

    Raises:
        NameExtractionError: if a record name cannot be split
    """
    type_names = []
    operations = []
    for record in report.benchmarks:
        type_name, operation = split_name(record.name)
        type_names.append(type_name)
        operations.append(operation)

    return pd.DataFrame({
        "name": pd.Series([r.name for r in report.benchmarks], dtype=object),
        "type_name": pd.Series(type_names, dtype=object),
        "operation": pd.Series(operations, dtype=object),
        "iterations": np.array([r.iterations for r in report.benchmarks], dtype=np.uint64),
        "real_time": np.array([r.real_time for r in report.benchmarks], dtype=np.float64),
        "cpu_time": np.array([r.cpu_time for r in report.benchmarks], dtype=np.float64),
        "time_unit": pd.Series([r.time_unit.value for r in report.benchmarks], dtype=object),
    }, columns=REPORT_COLUMNS)


def table_to_dataframe(table: ComparisonTable) -> pd.DataFrame:
    """Long-form DataFrame (type_name, operation, ratio) in table order."""
    rows = [
        (type_name, row.operation, row.ratio)
        for type_name, type_rows in table.items()
        for row in type_rows
    ]
    df = pd.DataFrame(rows, columns=TABLE_COLUMNS)
    df["ratio"] = df["ratio"].astype(np.float64)
    return df


def ratio_matrix(table: ComparisonTable) -> pd.DataFrame:
    """Pivot of ratios: operations as rows, types as columns (NaN where unmeasured)."""
    df = table_to_dataframe(table)
    matrix = df.pivot(index="operation", columns="type_name", values="ratio")
    matrix = matrix.sort_index().sort_index(axis=1)
    matrix.columns.name = None
    return matrix
