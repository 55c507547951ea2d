#!/usr/bin/env python3
"""Solve a cube game log without installing the package.

Usage:
    python scripts/solve.py [INPUT]

Exit codes:
    0: Both answers printed
    1: Input missing or malformed
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from cubegame.__main__ import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
