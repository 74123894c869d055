"""Core functionality for git-reconcile"""

from typing import Optional, Union

from git_reconcile.config import Config
from git_reconcile.exceptions import GitOperationError
from git_reconcile.models.reconcile import ActionKind, Outcome, Problem, RunSummary, TargetBranch
from git_reconcile.services.candidates import iter_candidates
from git_reconcile.services.display_service import DisplayService
from git_reconcile.services.evaluator import FileEvaluator
from git_reconcile.services.git import BranchResolver, RepositoryState, WorkingTree
from git_reconcile.utils.logging import get_logger

logger = get_logger(__name__)


class Reconciler:
    """Discards local changes that already match the branch about to be merged."""

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict],
        display: Optional[DisplayService] = None,
    ):
        """Initialize the Reconciler.

        Args:
            repo_path: Path inside the git repository
            config: Config object (or dict of Config fields)
            display: Where report lines go; defaults to stdout

        Raises:
            NotARepositoryError: If repo_path is not inside a work tree
        """
        self.repo_path = repo_path
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        self.state = RepositoryState(repo_path)
        self.working_tree = WorkingTree(self.state.repo)
        self.resolver = BranchResolver(self.state)
        self.display = display or DisplayService()

    def resolve_target(self) -> TargetBranch:
        """Resolve the configured branch, or the upstream if none was given."""
        return self.resolver.resolve(self.config.branch)

    def run(self) -> RunSummary:
        """Evaluate every candidate and apply the resulting actions.

        Branch resolution errors propagate before any file is looked at.
        Per-file problems are reported and never stop the run.

        Returns:
            Ordered outcomes of the run
        """
        target = self.resolve_target()
        evaluator = FileEvaluator(self.state, target)
        summary = RunSummary(target=target, pretend=self.config.pretend)

        if self.config.pretend:
            logger.info("Pretend mode: nothing will be changed")

        for candidate in iter_candidates(self.state):
            outcome = evaluator.evaluate(candidate)
            self.display.report(outcome, target.name)
            outcome = self._apply(outcome, target)
            summary.add(outcome)

        logger.debug(f"Outcome counts: {summary.counts()}")
        self.display.summary(summary)
        return summary

    def _apply(self, outcome: Outcome, target: TargetBranch) -> Outcome:
        """Carry out a mutating outcome.

        This is the only place the working tree is changed, and the only
        place pretend mode is checked.

        Returns:
            The outcome, or a GIT_ERROR skip if the action failed
        """
        if not outcome.mutates:
            return outcome

        if self.config.pretend:
            logger.debug(f"Pretend: not applying {outcome.action.value} to {outcome.path!r}")
            return outcome

        try:
            if outcome.action is ActionKind.REMOVE:
                self.working_tree.remove_file(outcome.path)
            else:
                # REVERT and CHECKOUT_DELETED both restore the path from HEAD
                self.working_tree.checkout_path(outcome.path)
        except GitOperationError as e:
            logger.debug(f"Failed to apply {outcome.action.value} to {outcome.path!r}: {e}")
            failed = Outcome(
                outcome.candidate,
                ActionKind.SKIP,
                problem=Problem.GIT_ERROR,
                local_hash=outcome.local_hash,
                target_hash=outcome.target_hash,
                head_hash=outcome.head_hash,
                note=str(e),
            )
            self.display.report(failed, target.name)
            return failed

        return outcome
