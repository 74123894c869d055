"""Git-related services for git-reconcile."""

from .repository import RepositoryState, WorkingTree
from .branch_resolver import BranchResolver

__all__ = [
    "RepositoryState",
    "WorkingTree",
    "BranchResolver",
]
