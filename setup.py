#!/usr/bin/env python3

# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
# 
# This file is part of the benchratio tool.
# 
# Licensed under the MIT License. See LICENSE file in the project root 
# for full license information.

"""
Setup script for benchratio - baseline comparison of benchmark reports
"""

from pathlib import Path
from setuptools import setup

current_dir = Path(__file__).parent.absolute()


def get_version():
    """Get version from __version__.py file"""
    version_file = current_dir / "benchratio" / "__version__.py"
    if version_file.exists():
        with open(version_file, "r") as f:
            content = f.read()
            for line in content.split('\n'):
                if line.startswith('__version__'):
                    return line.split('=')[1].strip().strip('"').strip("'")
    return "0.1.0"


if __name__ == "__main__":
    # Metadata, dependencies and entry points are declared in pyproject.toml
    # (PEP 621); only the version is read from the package here.
    setup(version=get_version())
