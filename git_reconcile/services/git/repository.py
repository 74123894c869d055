"""Repository state and working tree access"""

import hashlib
import os
from typing import Dict, Iterator, List, Optional

import git

from git_reconcile.exceptions import GitOperationError, NotARepositoryError
from git_reconcile.utils.logging import get_logger

logger = get_logger(__name__)


def open_repo(repo_path: str) -> git.Repo:
    """Open the repository containing repo_path.

    Raises:
        NotARepositoryError: If repo_path is not inside a non-bare repository
    """
    try:
        repo = git.Repo(repo_path, search_parent_directories=True)
    except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError):
        raise NotARepositoryError(repo_path)
    if repo.bare or not repo.working_tree_dir:
        raise NotARepositoryError(repo_path)

    # Paths we pass are file names, never glob patterns
    repo.git.update_environment(GIT_LITERAL_PATHSPECS="1")
    return repo


def split_nul(raw: bytes) -> List[str]:
    """Split NUL-delimited git output into entries.

    Decoded with the filesystem encoding so that names which are not valid
    UTF-8 survive the round trip back into git arguments unchanged.
    """
    return [entry for entry in os.fsdecode(raw).split("\0") if entry]


def _stderr(error: git.exc.GitCommandError) -> str:
    """Best-effort one-line description of a failed git command."""
    stderr = error.stderr
    if isinstance(stderr, bytes):
        stderr = stderr.decode(errors="replace")
    stderr = (stderr or "").strip()
    # GitPython decorates stderr as "stderr: '...'"
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'").strip()
    return stderr or str(error)


class RepositoryState:
    """Read-only view of the repository used to evaluate candidates.

    Nothing in this class changes the working tree, the index or any ref.
    """

    def __init__(self, repo_path: str):
        """Initialize the view.

        Args:
            repo_path: Path inside the git repository
        """
        self.repo_path = repo_path
        self.repo = open_repo(repo_path)
        self.working_dir = self.repo.working_tree_dir
        self._trees: Dict[str, git.Tree] = {}  # Resolved trees by ref name

        logger.debug(f"Repository opened at {self.working_dir}")

    def _run(self, command: str, *args, path: Optional[str] = None, **kwargs):
        """Run a git command, translating failures into GitOperationError."""
        try:
            return getattr(self.repo.git, command)(*args, **kwargs)
        except git.exc.GitCommandError as e:
            raise GitOperationError(command.replace("_", "-"), path, _stderr(e)) from e

    def current_branch(self) -> Optional[str]:
        """Name of the checked out branch, or None on a detached HEAD."""
        try:
            return self.repo.active_branch.name
        except TypeError:
            return None

    def upstream_ref(self) -> Optional[str]:
        """Short name of the current branch's upstream (e.g. 'origin/main').

        An upstream that is configured but was never fetched is still
        returned, so that the caller can report it as missing.

        Returns:
            The upstream name, or None if none is configured (including detached HEAD)
        """
        try:
            upstream = self.repo.git.rev_parse("--abbrev-ref", "--symbolic-full-name", "@{upstream}")
        except git.exc.GitCommandError as e:
            logger.debug(f"rev-parse @{{upstream}} failed: {_stderr(e)}")
            return self._configured_upstream()
        return upstream.strip() or None

    def _configured_upstream(self) -> Optional[str]:
        """Upstream from branch.<name>.remote/merge, whether or not it exists."""
        branch = self.current_branch()
        if branch is None:
            return None
        remote = self._config_value(f"branch.{branch}.remote")
        merge = self._config_value(f"branch.{branch}.merge")
        if not remote or not merge:
            return None

        if merge.startswith("refs/heads/"):
            merge = merge[len("refs/heads/"):]
        # remote "." tracks a local branch
        upstream = merge if remote == "." else f"{remote}/{merge}"
        logger.debug(f"Upstream {upstream} is configured but does not resolve")
        return upstream

    def _config_value(self, key: str) -> Optional[str]:
        try:
            return self.repo.git.config("--get", key).strip() or None
        except git.exc.GitCommandError:
            # git config exits 1 when the key is unset
            return None

    def branch_exists(self, name: str) -> bool:
        """Check whether name is a local branch or a remote-tracking branch.

        Tags and other references do not count.
        """
        for ref in self.repo.refs:
            # RemoteReference is a Head subclass; tags are not
            if isinstance(ref, git.Head) and name in (ref.name, ref.path):
                return True
        return False

    def _tree(self, ref: str) -> git.Tree:
        """Resolve and cache the root tree of ref."""
        tree = self._trees.get(ref)
        if tree is None:
            try:
                tree = self.repo.commit(ref).tree
            except (git.exc.BadName, git.exc.BadObject, ValueError) as e:
                raise GitOperationError("resolve", ref, str(e)) from e
            self._trees[ref] = tree
        return tree

    def _entry(self, ref: str, path: str) -> Optional[git.objects.base.IndexObject]:
        """Tree entry at path in ref, or None if there is none."""
        try:
            return self._tree(ref)[path]
        except KeyError:
            return None

    def entry_type(self, ref: str, path: str) -> Optional[str]:
        """Object type at path in ref's tree ('blob', 'tree' or 'commit')."""
        obj = self._entry(ref, path)
        return obj.type if obj is not None else None

    def blob_hash(self, ref: str, path: str) -> Optional[str]:
        """Blob hash of path in ref's tree.

        Returns:
            The hash, or None if ref's tree has no file at path

        Raises:
            GitOperationError: If ref itself cannot be resolved
        """
        obj = self._entry(ref, path)
        if obj is None:
            return None
        if obj.type != "blob":
            # A directory or submodule at that path is not a file to compare with
            logger.debug(f"{ref}:{path} is a {obj.type}, not a blob")
            return None
        return obj.hexsha

    def head_hash(self, path: str) -> Optional[str]:
        """Blob hash of path in the current commit."""
        return self.blob_hash("HEAD", path)

    def hash_file(self, path: str) -> Optional[str]:
        """Blob hash git would store for the file at path in the working tree.

        Returns:
            The hash, or None if nothing exists at path
        """
        full_path = os.path.join(self.working_dir, path)
        if not os.path.lexists(full_path):
            return None

        if os.path.islink(full_path):
            # Git stores the link target, hash-object would follow the link
            data = os.fsencode(os.readlink(full_path))
            return hashlib.sha1(b"blob %d\0" % len(data) + data).hexdigest()

        if os.path.isdir(full_path):
            raise GitOperationError("hash-object", path, "is a directory")

        return self._run("hash_object", "--", path, path=path).strip()

    def is_deleted(self, path: str) -> bool:
        """Check whether status reports path as deleted (staged or not)."""
        raw = self._run(
            "status",
            "--porcelain",
            "-z",
            "--no-renames",
            "--untracked-files=no",
            "--",
            path,
            path=path,
            stdout_as_string=False,
        )
        for entry in split_nul(raw):
            # Porcelain v1: "XY <path>"
            if entry[3:] == path and "D" in entry[:2]:
                return True
        return False

    def iter_modified(self) -> Iterator[str]:
        """Tracked paths whose working or staged state differs from HEAD."""
        raw = self._run(
            "diff",
            "--name-only",
            "-z",
            "--no-renames",
            "--diff-filter=MDT",
            "HEAD",
            "--",
            stdout_as_string=False,
        )
        yield from split_nul(raw)

    def iter_untracked(self) -> Iterator[str]:
        """Untracked paths not excluded by the standard ignore rules."""
        raw = self._run(
            "ls_files",
            "--others",
            "--exclude-standard",
            "-z",
            stdout_as_string=False,
        )
        for path in split_nul(raw):
            if path.endswith("/"):
                # Nested repository, listed as a directory
                logger.debug(f"Ignoring nested repository {path}")
                continue
            yield path


class WorkingTree:
    """Mutating operations on the working tree and index."""

    def __init__(self, repo: git.Repo):
        self.repo = repo
        self.working_dir = repo.working_tree_dir

    def checkout_path(self, path: str) -> None:
        """Restore path in the index and working tree from the current commit."""
        try:
            self.repo.git.checkout("HEAD", "--", path)
        except git.exc.GitCommandError as e:
            raise GitOperationError("checkout", path, _stderr(e)) from e
        logger.debug(f"Checked out {path} from HEAD")

    def remove_file(self, path: str) -> None:
        """Delete an untracked file from disk."""
        try:
            os.remove(os.path.join(self.working_dir, path))
        except OSError as e:
            raise GitOperationError("remove", path, e.strerror or str(e)) from e
        logger.debug(f"Removed {path}")
