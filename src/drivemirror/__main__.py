"""`python -m drivemirror` entry point."""

from __future__ import annotations

import logging
import sys

from drivemirror.errors import DriveMirrorError
from drivemirror.mirror import run_mirror

logger = logging.getLogger("drivemirror")


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        run_mirror()
    except DriveMirrorError as exc:
        logger.error("%s: %s %s", type(exc).__name__, exc, exc.details or "")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
