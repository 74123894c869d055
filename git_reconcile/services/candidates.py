"""Candidate enumeration for git-reconcile."""

from typing import Iterator

from git_reconcile.models.reconcile import CandidateKind, FileCandidate
from git_reconcile.services.git.repository import RepositoryState
from git_reconcile.utils.logging import get_logger

logger = get_logger(__name__)


def iter_candidates(state: RepositoryState) -> Iterator[FileCandidate]:
    """Yield modified tracked files, then untracked files.

    Each path is yielded once. A path removed from the index but kept on
    disk ('git rm --cached') shows up in both git listings; it is reported
    as tracked only.
    """
    seen = set()

    for path in state.iter_modified():
        seen.add(path)
        yield FileCandidate(path, CandidateKind.TRACKED)

    for path in state.iter_untracked():
        if path in seen:
            logger.debug(f"{path} already listed as modified, skipping untracked entry")
            continue
        yield FileCandidate(path, CandidateKind.UNTRACKED)
