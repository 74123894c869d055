"""Display service for reconciliation reports"""
from typing import Optional

from rich.console import Console
from rich.text import Text

from git_reconcile.constants import TAG_ERROR, TAG_INFO, TAG_STYLES
from git_reconcile.formatters import format_outcome, format_summary
from git_reconcile.models.reconcile import Outcome, RunSummary

console = Console()


class DisplayService:
    """Prints tagged report lines.

    Lines are built as rich Text objects so that file names containing
    brackets are never read as console markup.
    """

    def __init__(self, output: Optional[Console] = None):
        self.console = output if output is not None else console

    def print_tagged(self, tag: str, message: str) -> None:
        line = Text.assemble((tag, TAG_STYLES.get(tag, "")), " ", message)
        self.console.print(line, soft_wrap=True)

    def report(self, outcome: Outcome, target: str) -> None:
        """Print the line for an outcome, if it has one."""
        formatted = format_outcome(outcome, target)
        if formatted:
            self.print_tagged(*formatted)

    def info(self, message: str) -> None:
        self.print_tagged(TAG_INFO, message)

    def error(self, message: str) -> None:
        self.print_tagged(TAG_ERROR, message)

    def summary(self, summary: RunSummary) -> None:
        if summary.pretend and summary.actions:
            self.info("Pretend mode: no files were changed")
        self.info(format_summary(summary))
