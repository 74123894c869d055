"""Helpers for building test repositories"""
from pathlib import Path


def write_files(repo, files):
    """Write {relative path: text} into the working tree."""
    root = Path(repo.working_tree_dir)
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


def commit_files(repo, files, message="Update files"):
    """Write and commit {relative path: text}."""
    write_files(repo, files)
    repo.git.add("--", *files)
    repo.git.commit("-m", message)


def read_file(repo, name):
    return (Path(repo.working_tree_dir) / name).read_text()


def exists(repo, name):
    return (Path(repo.working_tree_dir) / name).exists()


def delete_file(repo, name):
    (Path(repo.working_tree_dir) / name).unlink()
