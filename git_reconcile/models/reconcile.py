"""Reconciliation models and related enums"""
from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional


class CandidateKind(Enum):
    """How a candidate file is known to Git."""
    TRACKED = "tracked"
    UNTRACKED = "untracked"


class ActionKind(Enum):
    """Action decided for a candidate."""
    REVERT = "revert"
    REMOVE = "remove"
    CHECKOUT_DELETED = "checkout-deleted"
    SKIP = "skip"
    WARN = "warn"


# Actions that touch the working tree or index when applied
MUTATING_ACTIONS = frozenset({ActionKind.REVERT, ActionKind.REMOVE, ActionKind.CHECKOUT_DELETED})


class Problem(Enum):
    """Per-file problem attached to a skipped or warned candidate."""
    HASH_MISMATCH = "hash-mismatch"
    LOCAL_DELETED_REMOTE_EXISTS = "local-deleted-remote-exists"
    MISSING_FROM_TARGET = "missing-from-target"
    GIT_ERROR = "git-error"


@dataclass(frozen=True)
class TargetBranch:
    """A resolved, existing reference to compare against."""
    name: str
    from_upstream: bool = False  # True if taken from the current branch's upstream

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FileCandidate:
    """A modified tracked file or an untracked file in the working tree."""
    path: str
    kind: CandidateKind

    @property
    def is_tracked(self) -> bool:
        return self.kind is CandidateKind.TRACKED


@dataclass
class Outcome:
    """Evaluation result for one candidate."""
    candidate: FileCandidate
    action: ActionKind
    problem: Optional[Problem] = None
    local_hash: Optional[str] = None
    target_hash: Optional[str] = None
    head_hash: Optional[str] = None  # Only looked up for tracked files
    note: Optional[str] = None

    @property
    def path(self) -> str:
        return self.candidate.path

    @property
    def mutates(self) -> bool:
        """True if applying this outcome changes the working tree."""
        return self.action in MUTATING_ACTIONS


@dataclass
class RunSummary:
    """Ordered outcomes of one run plus per-action counts."""
    target: TargetBranch
    pretend: bool
    outcomes: List[Outcome] = field(default_factory=list)

    def add(self, outcome: Outcome) -> None:
        self.outcomes.append(outcome)

    def count(self, action: ActionKind) -> int:
        return sum(1 for o in self.outcomes if o.action is action)

    @property
    def errors(self) -> int:
        """Skips caused by a problem that the user has to look at."""
        return sum(
            1 for o in self.outcomes
            if o.problem in (Problem.MISSING_FROM_TARGET, Problem.GIT_ERROR)
        )

    @property
    def actions(self) -> List[Outcome]:
        """Outcomes that change (or would change) the working tree, in order."""
        return [o for o in self.outcomes if o.mutates]

    def counts(self) -> Dict[str, int]:
        return {action.value: self.count(action) for action in ActionKind}
