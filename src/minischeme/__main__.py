# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha

import sys

from .cli import main

sys.exit(main())
