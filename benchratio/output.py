# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
#
# This file is part of the benchratio tool.
#
# Licensed under the MIT License. See LICENSE file in the project root
# for full license information.

"""Rendering of a comparison table as ``Type|Operation|ratio`` lines."""

from __future__ import annotations

import math

import numpy as np

from .compare import ComparisonTable
from .constants import FIELD_SEPARATOR


def format_ratio(ratio: float) -> str:
    """Shortest round-trip text of *ratio*, positional, without a trailing ``.0``.

    ``1.0`` → ``"1"``, ``0.5`` → ``"0.5"``, ``inf`` → ``"inf"``, ``nan`` → ``"NaN"``
    """
    if math.isnan(ratio):
        return "NaN"
    return np.format_float_positional(float(ratio), unique=True, trim="-")


def format_lines(table: ComparisonTable, sort_types: bool = False) -> list[str]:
    type_names = sorted(table) if sort_types else list(table)
    lines = []
    for type_name in type_names:
        for row in table[type_name]:
            lines.append(FIELD_SEPARATOR.join(
                (type_name, row.operation, format_ratio(row.ratio))
            ))
    return lines


def write_table(table: ComparisonTable, stream, sort_types: bool = False) -> int:
    """Write one line per row to *stream*; returns the number of lines written."""
    lines = format_lines(table, sort_types=sort_types)
    for line in lines:
        stream.write(line + "\n")
    return len(lines)
