"""Data models for git-reconcile."""
