"""Target branch resolution for git-reconcile."""

from typing import Optional

from git_reconcile.exceptions import BranchNotFoundError, NoUpstreamConfiguredError
from git_reconcile.models.reconcile import TargetBranch
from git_reconcile.services.git.repository import RepositoryState
from git_reconcile.utils.logging import get_logger

logger = get_logger(__name__)


class BranchResolver:
    """Turns an optional branch argument into an existing reference."""

    def __init__(self, state: RepositoryState):
        self.state = state

    def resolve(self, branch: Optional[str] = None) -> TargetBranch:
        """Resolve the branch to reconcile against.

        Args:
            branch: Branch given on the command line, used verbatim. If None,
                the current branch's upstream is used.

        Returns:
            The resolved target branch

        Raises:
            NoUpstreamConfiguredError: No branch given and no upstream configured
            BranchNotFoundError: The branch is neither local nor remote-tracking
        """
        if branch:
            target = TargetBranch(branch)
        else:
            upstream = self.state.upstream_ref()
            if not upstream:
                raise NoUpstreamConfiguredError(self.state.current_branch())
            logger.debug(f"Using upstream {upstream}")
            target = TargetBranch(upstream, from_upstream=True)

        if not self.state.branch_exists(target.name):
            raise BranchNotFoundError(target.name)

        logger.info(f"Reconciling against {target.name}")
        return target
