"""Command-line entry point for git-reconcile"""

import os
import sys
from typing import List, Optional

from git_reconcile.cli.args import parse_args
from git_reconcile.config import Config
from git_reconcile.constants import EXIT_ERROR, EXIT_FATAL, EXIT_OK
from git_reconcile.core import Reconciler
from git_reconcile.exceptions import BranchResolutionError, NotARepositoryError, UsageError
from git_reconcile.services.display_service import DisplayService
from git_reconcile.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    display = DisplayService()

    try:
        parsed_args = parse_args(argv)
        config = Config(
            branch=parsed_args.branch,
            pretend=parsed_args.pretend,
            debug=parsed_args.debug,
        )
    except (UsageError, ValueError) as e:
        display.error(f"Usage error: {e}")
        return EXIT_FATAL

    setup_logging(debug=config.debug)

    if config.debug:
        logger.debug("Debug mode enabled")
        for key, value in config.to_dict().items():
            logger.debug(f"  {key}: {value}")

    try:
        reconciler = Reconciler(os.getcwd(), config, display=display)
        reconciler.run()
        return EXIT_OK
    except (NotARepositoryError, BranchResolutionError) as e:
        display.error(str(e))
        return EXIT_FATAL
    except KeyboardInterrupt:
        display.error("Operation cancelled by user")
        return EXIT_ERROR
    except Exception as e:
        display.error(f"Error: {e}")
        if config.debug:
            display.console.print_exception()
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
