"""``python -m wikitheme`` and the ``wikitheme`` console script."""

import sys
import traceback
from collections.abc import Sequence

from wikitheme.app import main
from wikitheme.logger import get_logger

logger = get_logger(__name__)


def run(argv: Sequence[str] | None = None) -> None:
    """Run the command line, exiting with status 1 on any unexpected error.

    Args:
        argv: Arguments (defaults to sys.argv[1:]).
    """
    try:
        main(argv)
    except Exception as exc:
        logger.exception(f"wikitheme failed: {exc}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    run()
