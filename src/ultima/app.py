"""Application entry point for the board viewer."""

from __future__ import annotations

import logging
import sys


def main() -> None:
    """Launch the Ultima board viewer."""
    from ultima.ui.bootstrap import run_application

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
    sys.exit(run_application())


if __name__ == "__main__":
    main()
