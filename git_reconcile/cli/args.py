"""Command-line argument parsing for git-reconcile."""

import argparse
from typing import List, Optional

from git_reconcile.__version__ import __version__
from git_reconcile.exceptions import UsageError


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments.

    Raises:
        UsageError: On unknown options or more than one branch name
    """
    parser = ArgumentParser(
        prog="git-reconcile",
        description="Discard local changes that are identical to the branch you are about to merge, "
        "so the merge does not stop on 'would be overwritten' errors",
        epilog="Without a branch name the current branch's upstream is used. "
        "Run with --pretend first to see what would change.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-p",
        "--pretend",
        action="store_true",
        help="Dry run - show what would be reverted or removed without touching any file",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug tracing (also written to ~/.git-reconcile/)"
    )
    parser.add_argument("--version", action="version", version=f"git-reconcile {__version__}")
    parser.add_argument(
        "branch",
        nargs="?",
        default=None,
        help="Branch to reconcile against, local or remote-tracking (default: upstream of the current branch)",
    )

    return parser.parse_args(argv)
