"""Allow running as ``python -m loopbench``."""

from __future__ import annotations

import sys

from loopbench.cli import main

sys.exit(main())
