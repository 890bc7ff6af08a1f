"""Allow ``python -m ultima``."""

from __future__ import annotations

import sys

from ultima.cli import main

if __name__ == "__main__":
    sys.exit(main())
