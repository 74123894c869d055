"""Report line formatting for git-reconcile."""

from typing import Optional, Tuple

from git_reconcile.constants import TAG_CHECKOUT, TAG_ERROR, TAG_INFO, TAG_REMOVE, TAG_WARNING
from git_reconcile.models.reconcile import ActionKind, Outcome, Problem, RunSummary


def format_path(path: str) -> str:
    """
    Format a path for display.

    Paths with control characters (embedded newlines, tabs) are shown quoted
    so that every report stays on one line.
    """
    return path if path.isprintable() else repr(path)


def format_outcome(outcome: Outcome, target: str) -> Optional[Tuple[str, str]]:
    """
    Format an outcome as a tagged report line.

    Args:
        outcome: Evaluated candidate
        target: Name of the target branch

    Returns:
        (tag, message), or None for outcomes that are not reported
    """
    path = format_path(outcome.path)
    action = outcome.action

    if action is ActionKind.REVERT:
        return TAG_CHECKOUT, f"Reverting {path} (identical to {target})"
    if action is ActionKind.REMOVE:
        return TAG_REMOVE, f"Removing {path} (identical to {target})"
    if action is ActionKind.CHECKOUT_DELETED:
        return TAG_CHECKOUT, f"Restoring deleted {path} from HEAD (also absent from {target})"

    if action is ActionKind.WARN:
        if outcome.problem is Problem.LOCAL_DELETED_REMOTE_EXISTS:
            return TAG_WARNING, (
                f"{path} is deleted locally but was changed on {target} "
                f"(HEAD {outcome.head_hash}, {target} {outcome.target_hash})"
            )
        if outcome.candidate.is_tracked:
            return TAG_WARNING, (
                f"Hash mismatch for {path}: local {outcome.local_hash}, "
                f"{target} {outcome.target_hash}, HEAD {outcome.head_hash}"
            )
        return TAG_WARNING, (
            f"Hash mismatch for untracked {path}: local {outcome.local_hash}, "
            f"{target} {outcome.target_hash}"
        )

    # Skips
    if outcome.problem in (Problem.MISSING_FROM_TARGET, Problem.GIT_ERROR):
        return TAG_ERROR, f"{path}: {outcome.note}"
    if outcome.note:
        return TAG_INFO, f"Skipping {path}: {outcome.note}"
    return None


def format_summary(summary: RunSummary) -> str:
    """
    Format the end-of-run counts.

    Example:
        "Done: 1 reverted, 1 removed, 0 restored, 0 warnings, 0 errors"
    """
    prefix = "Pretend run" if summary.pretend else "Done"
    return (
        f"{prefix}: {summary.count(ActionKind.REVERT)} reverted, "
        f"{summary.count(ActionKind.REMOVE)} removed, "
        f"{summary.count(ActionKind.CHECKOUT_DELETED)} restored, "
        f"{summary.count(ActionKind.WARN)} warnings, "
        f"{summary.errors} errors"
    )
