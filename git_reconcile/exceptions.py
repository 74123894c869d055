"""Custom exceptions for git-reconcile"""

from typing import Optional


class GitReconcileError(Exception):
    """Base exception for all git-reconcile errors."""
    pass


class UsageError(GitReconcileError):
    """Exception raised for invalid command-line usage."""
    pass


class NotARepositoryError(GitReconcileError):
    """Exception raised when the working directory is not inside a Git repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Not a git repository (or any of the parent directories): {path}")


class GitOperationError(GitReconcileError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, path: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.path = path
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if path:
            error_msg += f" for '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class BranchResolutionError(GitReconcileError):
    """Exception raised when the target branch cannot be determined."""
    pass


class NoUpstreamConfiguredError(BranchResolutionError):
    """Exception raised when no branch was given and the current branch has no upstream."""

    def __init__(self, branch: Optional[str] = None):
        self.branch = branch
        if branch:
            error_msg = (
                f"Branch '{branch}' has no upstream configured. "
                f"Pass a branch name or run 'git branch --set-upstream-to <remote>/<branch>'"
            )
        else:
            error_msg = "HEAD is detached and no branch name was given"
        super().__init__(error_msg)


class BranchNotFoundError(BranchResolutionError):
    """Exception raised when the target branch does not exist locally or as a remote-tracking branch."""

    def __init__(self, branch: str):
        self.branch = branch
        hint = f"git fetch {branch.replace('/', ' ', 1)}" if "/" in branch else "git fetch"
        super().__init__(
            f"Branch '{branch}' not found among local or remote-tracking branches. "
            f"You may need to fetch it first ({hint})"
        )
