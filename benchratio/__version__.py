# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
# 
# This file is part of the benchratio tool.
# 
# Licensed under the MIT License. See LICENSE file in the project root 
# for full license information.

"""Version information for benchratio."""

__version__ = "0.1.0"
__author__ = "Tobias Weber"
__email__ = "weber.tobias.md@gmail.com"
__license__ = "MIT"
