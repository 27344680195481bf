# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
#
# This file is part of the benchratio tool.
#
# Licensed under the MIT License. See LICENSE file in the project root
# for full license information.

"""
Benchmark report loading.

A report is the JSON document written by a microbenchmark harness with
``--benchmark_format=json``::

    {
      "context": { ... },
      "benchmarks": [
        {"name": "Wrapper<Type>::BM_Op", "iterations": 1000,
         "real_time": 12.5, "cpu_time": 12.4, "time_unit": "ns"},
        ...
      ]
    }

The context is kept but never interpreted.  Extra keys on a benchmark entry
are ignored.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from .constants import TimeUnit
from .errors import FormatError
from .names import split_name


@dataclass(frozen=True)
class ReportContext:
    """Opaque metadata block of a report (host, CPU, build type, ...)."""

    raw: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "raw", MappingProxyType(dict(self.raw)))

    def get(self, key: str, default=None):
        return self.raw.get(key, default)


@dataclass(frozen=True)
class BenchmarkRecord:
    """One measured benchmark run."""

    name: str
    iterations: int
    real_time: float
    cpu_time: float
    time_unit: TimeUnit = TimeUnit.NANOSECONDS

    @property
    def type_name(self) -> str:
        return split_name(self.name)[0]

    @property
    def operation(self) -> str:
        return split_name(self.name)[1]


@dataclass(frozen=True)
class Report:
    """All records of one benchmark run, in document order."""

    context: ReportContext
    benchmarks: tuple[BenchmarkRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.benchmarks)

    def __iter__(self) -> Iterator[BenchmarkRecord]:
        return iter(self.benchmarks)


# ---------------------------------------------------------------------------
# Field validation
# ---------------------------------------------------------------------------

def _require(entry: dict, key: str, index: int):
    if key not in entry:
        raise FormatError(f"benchmarks[{index}]: missing required field {key!r}")
    return entry[key]


def _as_int(value, key: str, index: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"benchmarks[{index}].{key}: expected an integer, got {value!r}")
    if value < 0:
        raise FormatError(f"benchmarks[{index}].{key}: must not be negative, got {value}")
    return value


def _as_float(value, key: str, index: int) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FormatError(f"benchmarks[{index}].{key}: expected a number, got {value!r}")
    try:
        return float(value)
    except OverflowError:
        raise FormatError(f"benchmarks[{index}].{key}: integer too large for a float") from None


def _parse_record(entry, index: int) -> BenchmarkRecord:
    if not isinstance(entry, dict):
        raise FormatError(f"benchmarks[{index}]: expected an object, got {type(entry).__name__}")

    name = _require(entry, "name", index)
    if not isinstance(name, str):
        raise FormatError(f"benchmarks[{index}].name: expected a string, got {name!r}")

    unit_tag = _require(entry, "time_unit", index)
    try:
        time_unit = TimeUnit.from_tag(unit_tag)
    except ValueError:
        raise FormatError(
            f"benchmarks[{index}].time_unit: unsupported unit {unit_tag!r} "
            f"(expected {TimeUnit.NANOSECONDS.value!r})"
        ) from None

    return BenchmarkRecord(
        name=name,
        iterations=_as_int(_require(entry, "iterations", index), "iterations", index),
        real_time=_as_float(_require(entry, "real_time", index), "real_time", index),
        cpu_time=_as_float(_require(entry, "cpu_time", index), "cpu_time", index),
        time_unit=time_unit,
    )


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def _reject_constant(token: str):
    raise FormatError(f"non-standard JSON constant {token!r}")


def load(raw_text: str | bytes) -> Report:
    """Parse a JSON benchmark report.

    Raises:
        FormatError: if the document is not valid JSON, lacks ``context`` or
            ``benchmarks``, or any record is incomplete, mistyped, or uses a
            unit other than nanoseconds.
    """
    try:
        data = json.loads(raw_text, parse_constant=_reject_constant)
    except ValueError as e:
        raise FormatError(f"Report is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise FormatError(f"Report must be a JSON object, got {type(data).__name__}")

    if "context" not in data:
        raise FormatError("Report is missing the 'context' object")
    context = data["context"]
    if not isinstance(context, dict):
        raise FormatError(f"Report 'context' must be an object, got {type(context).__name__}")

    if "benchmarks" not in data:
        raise FormatError("Report is missing the 'benchmarks' list")
    entries = data["benchmarks"]
    if not isinstance(entries, list):
        raise FormatError(f"Report 'benchmarks' must be a list, got {type(entries).__name__}")

    records = tuple(_parse_record(entry, i) for i, entry in enumerate(entries))
    return Report(context=ReportContext(context), benchmarks=records)


def load_file(path) -> Report:
    """Read and parse the report at *path* (``"-"`` reads standard input)."""
    try:
        if str(path) == "-":
            text = sys.stdin.read()
        else:
            text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FormatError(f"Cannot read report {path}: {e}") from e
    return load(text)
