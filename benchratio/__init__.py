# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
#
# This file is part of the benchratio tool.
#
# Licensed under the MIT License. See LICENSE file in the project root
# for full license information.

"""benchratio - relative speed of benchmarked types against a baseline."""

from .__version__ import __version__
from .compare import ComparisonRow, ComparisonTable, baseline_times, compare
from .constants import DEFAULT_BASELINE_PREFIX, TimeUnit
from .errors import (
    BenchRatioError,
    DuplicateKeyError,
    FormatError,
    MissingBaselineOperationError,
    NameExtractionError,
)
from .names import split_name
from .output import format_lines, format_ratio, write_table
from .pandas_utils import ratio_matrix, report_to_dataframe, table_to_dataframe
from .report import BenchmarkRecord, Report, ReportContext, load, load_file

__all__ = [
    "__version__",
    # Loading
    "load",
    "load_file",
    "Report",
    "ReportContext",
    "BenchmarkRecord",
    "TimeUnit",
    # Comparison
    "split_name",
    "baseline_times",
    "compare",
    "ComparisonRow",
    "ComparisonTable",
    "DEFAULT_BASELINE_PREFIX",
    # Output
    "format_ratio",
    "format_lines",
    "write_table",
    # DataFrame views
    "report_to_dataframe",
    "table_to_dataframe",
    "ratio_matrix",
    # Errors
    "BenchRatioError",
    "FormatError",
    "NameExtractionError",
    "MissingBaselineOperationError",
    "DuplicateKeyError",
]
