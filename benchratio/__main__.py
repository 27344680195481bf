# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
#
# This file is part of the benchratio tool.
#
# Licensed under the MIT License. See LICENSE file in the project root
# for full license information.

import sys

from .cli import main

sys.exit(main())
