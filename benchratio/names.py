# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
#
# This file is part of the benchratio tool.
#
# Licensed under the MIT License. See LICENSE file in the project root
# for full license information.

"""Benchmark name parsing."""

from __future__ import annotations

from .constants import OPERATION_PREFIX, SCOPE_SEPARATOR, TYPE_CLOSE, TYPE_OPEN
from .errors import NameExtractionError


def strip_operation_prefix(segment: str) -> str:
    """Remove every leading ``BM_`` from *segment*.

    ``"BM_Insert"``      → ``"Insert"``
    ``"BM_Find/1024"``   → ``"Find/1024"``
    """
    while segment.startswith(OPERATION_PREFIX):
        segment = segment[len(OPERATION_PREFIX):]
    return segment


def _matching_close(segment: str, open_idx: int) -> int:
    """Index of the ``>`` closing the ``<`` at *open_idx*, or -1 if unbalanced."""
    depth = 0
    for idx in range(open_idx, len(segment)):
        char = segment[idx]
        if char == TYPE_OPEN:
            depth += 1
        elif char == TYPE_CLOSE:
            depth -= 1
            if depth == 0:
                return idx
    return -1


def split_name(name: str) -> tuple[str, str]:
    """Split a composite benchmark name into ``(type_name, operation)``.

    ``"MapBenchmarks<default_std_unordered_map_t>::BM_Insert"``
    → ``("default_std_unordered_map_t", "Insert")``

    Only the first two ``::`` segments are considered.  The type name is the
    text between the first ``<`` of the type segment and its matching ``>``,
    so nested template arguments stay intact:
    ``"Map<hashtbl_t<int>>::BM_Find"`` → ``("hashtbl_t<int>", "Find")``
    """
    parts = name.split(SCOPE_SEPARATOR)
    if len(parts) < 2:
        raise NameExtractionError(name, f"missing {SCOPE_SEPARATOR!r} separator")
    type_segment, operation_segment = parts[0], parts[1]

    open_idx = type_segment.find(TYPE_OPEN)
    if open_idx < 0:
        raise NameExtractionError(name, f"missing {TYPE_OPEN!r} in type segment")
    close_idx = _matching_close(type_segment, open_idx)
    if close_idx < 0:
        raise NameExtractionError(name, f"missing matching {TYPE_CLOSE!r} in type segment")

    return type_segment[open_idx + 1:close_idx], strip_operation_prefix(operation_segment)
