"""Per-file decision procedure for git-reconcile"""

from git_reconcile.exceptions import GitOperationError
from git_reconcile.models.reconcile import ActionKind, FileCandidate, Outcome, Problem, TargetBranch
from git_reconcile.services.git.repository import RepositoryState
from git_reconcile.utils.logging import get_logger

logger = get_logger(__name__)

# Tree entry types that can sit where a file is expected
ENTRY_KINDS = {
    "tree": "a directory",
    "commit": "a submodule",
}


class FileEvaluator:
    """Decides what to do with each candidate by comparing blob hashes.

    The evaluator only reads from the repository. Applying the resulting
    action is up to the caller.
    """

    def __init__(self, state: RepositoryState, target: TargetBranch):
        """Initialize the evaluator.

        Args:
            state: Read-only repository view
            target: Branch the working tree is compared against
        """
        self.state = state
        self.target = target

    def evaluate(self, candidate: FileCandidate) -> Outcome:
        """Classify one candidate.

        Git failures are confined to the candidate: they come back as a
        SKIP outcome carrying Problem.GIT_ERROR instead of being raised.
        """
        logger.debug(f"Evaluating {candidate.kind.value} file {candidate.path!r}")
        try:
            outcome = self._evaluate(candidate)
        except GitOperationError as e:
            logger.debug(f"Git error while evaluating {candidate.path!r}: {e}")
            outcome = Outcome(candidate, ActionKind.SKIP, problem=Problem.GIT_ERROR, note=str(e))
        logger.debug(f"{candidate.path!r}: {outcome.action.value}"
                     + (f" ({outcome.problem.value})" if outcome.problem else ""))
        return outcome

    def _evaluate(self, candidate: FileCandidate) -> Outcome:
        target_hash = self.state.blob_hash(self.target.name, candidate.path)
        if target_hash is None:
            entry_type = self.state.entry_type(self.target.name, candidate.path)
            if entry_type is not None:
                kind = ENTRY_KINDS.get(entry_type, entry_type)
                return Outcome(candidate, ActionKind.SKIP, note=f"is {kind} on {self.target.name}, not a file")
            return self._missing_from_target(candidate)

        local_hash = self.state.hash_file(candidate.path)
        if local_hash is None:
            return self._missing_locally(candidate, target_hash)

        if local_hash == target_hash:
            action = ActionKind.REVERT if candidate.is_tracked else ActionKind.REMOVE
            return Outcome(candidate, action, local_hash=local_hash, target_hash=target_hash)

        if not candidate.is_tracked:
            # Never delete untracked content that differs from the target
            return Outcome(
                candidate,
                ActionKind.WARN,
                problem=Problem.HASH_MISMATCH,
                local_hash=local_hash,
                target_hash=target_hash,
            )

        head_hash = self.state.head_hash(candidate.path)
        if head_hash == target_hash:
            # Target did not touch the file; the local edit survives the merge
            return Outcome(
                candidate,
                ActionKind.SKIP,
                local_hash=local_hash,
                target_hash=target_hash,
                head_hash=head_hash,
            )

        return Outcome(
            candidate,
            ActionKind.WARN,
            problem=Problem.HASH_MISMATCH,
            local_hash=local_hash,
            target_hash=target_hash,
            head_hash=head_hash,
        )

    def _missing_from_target(self, candidate: FileCandidate) -> Outcome:
        """The target branch has no file at the candidate's path."""
        if not candidate.is_tracked:
            return Outcome(candidate, ActionKind.SKIP)

        if not self.state.is_deleted(candidate.path):
            return Outcome(
                candidate,
                ActionKind.SKIP,
                problem=Problem.MISSING_FROM_TARGET,
                note=f"tracked but missing from {self.target.name} and not deleted locally",
            )

        local_hash = self.state.hash_file(candidate.path)
        if local_hash is not None:
            # Removed from the index only (git rm --cached); the file on disk is user content
            return Outcome(
                candidate,
                ActionKind.SKIP,
                local_hash=local_hash,
                note="removed from the index but still on disk",
            )

        # Deleted here and absent there: restore it so the merge can delete it cleanly
        return Outcome(candidate, ActionKind.CHECKOUT_DELETED)

    def _missing_locally(self, candidate: FileCandidate, target_hash: str) -> Outcome:
        """The target branch has the file but the working tree does not."""
        if candidate.is_tracked and self.state.is_deleted(candidate.path):
            head_hash = self.state.head_hash(candidate.path)
            if head_hash != target_hash:
                return Outcome(
                    candidate,
                    ActionKind.WARN,
                    problem=Problem.LOCAL_DELETED_REMOTE_EXISTS,
                    target_hash=target_hash,
                    head_hash=head_hash,
                )
            return Outcome(
                candidate,
                ActionKind.SKIP,
                target_hash=target_hash,
                head_hash=head_hash,
                note=f"deleted locally, unchanged on {self.target.name}",
            )

        return Outcome(
            candidate,
            ActionKind.SKIP,
            target_hash=target_hash,
            note="no longer exists on disk",
        )
