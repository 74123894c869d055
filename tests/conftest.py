"""Pytest fixtures for git-reconcile tests"""
import io
import logging
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest
from rich.console import Console

from git_reconcile.config import Config
from git_reconcile.services.display_service import DisplayService
from git_reconcile.services.git.repository import RepositoryState
from helpers import commit_files, write_files


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config():
    """Default configuration against the 'dev' branch."""
    return Config(branch="dev")


@pytest.fixture
def pretend_config():
    return Config(branch="dev", pretend=True)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on 'main'."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")

    commit_files(repo, {"README.md": "# Test Repository\n"}, "Initial commit")
    repo.git.branch("-M", "main")

    # Fake remote so that remote-tracking refs can be created locally
    repo.create_remote("origin", "https://example.com/test/test-repo.git")

    yield repo

    repo.close()


@pytest.fixture
def scenario_repo(git_repo):
    """Repository where the working tree already matches branch 'dev'.

    main:  a.txt = "Hello World"
    dev:   a.txt = "Hello, World", b.txt = "I'm alive"
    work:  a.txt = "Hello, World" (modified), b.txt = "I'm alive" (untracked)
    """
    repo = git_repo
    commit_files(repo, {"a.txt": "Hello World"}, "Add a.txt")

    repo.git.checkout("-b", "dev")
    commit_files(repo, {"a.txt": "Hello, World", "b.txt": "I'm alive"}, "Punctuate and add b.txt")
    repo.git.checkout("main")

    write_files(repo, {"a.txt": "Hello, World", "b.txt": "I'm alive"})

    yield repo


@pytest.fixture
def output():
    """Display service writing plain text into a buffer.

    Returns:
        (DisplayService, buffer) - read lines with buffer.getvalue()
    """
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, color_system=None, width=200)
    return DisplayService(console), buffer


@pytest.fixture
def mock_state():
    """Mock RepositoryState with nothing on disk and nothing on the target."""
    state = Mock(spec=RepositoryState)
    state.blob_hash.return_value = None
    state.entry_type.return_value = None
    state.head_hash.return_value = None
    state.hash_file.return_value = None
    state.is_deleted.return_value = False
    state.iter_modified.return_value = iter([])
    state.iter_untracked.return_value = iter([])
    return state


@pytest.fixture
def restore_logging():
    """Undo setup_logging() changes to the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
