# SPDX-License-Identifier: MIT
"""Allow running cgoflags as ``python -m cgoflags``."""

import sys

from cgoflags.cli import main

sys.exit(main())
