# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
#
# This file is part of the benchratio tool.
#
# Licensed under the MIT License. See LICENSE file in the project root
# for full license information.

"""Exceptions raised while loading and comparing benchmark reports."""

from __future__ import annotations


class BenchRatioError(Exception):
    """Base class for every error this package raises."""


class FormatError(BenchRatioError, ValueError):
    """The report document is malformed or uses an unsupported unit."""


class NameExtractionError(FormatError):
    """A benchmark name does not follow ``Wrapper<Type>::BM_Operation``."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Cannot parse benchmark name {name!r}: {reason}")


class MissingBaselineOperationError(BenchRatioError, KeyError):
    """An operation has no measurement in the baseline group."""

    def __init__(self, operation: str | None, baseline_prefix: str):
        self.operation = operation
        self.baseline_prefix = baseline_prefix
        if operation is None:
            message = f"No benchmark name starts with baseline prefix {baseline_prefix!r}"
        else:
            message = (f"Operation {operation!r} has no baseline measurement "
                       f"under prefix {baseline_prefix!r}")
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class DuplicateKeyError(BenchRatioError, ValueError):
    """A key was measured twice while duplicates are rejected."""
