"""Version information for git-reconcile."""

__version__ = "0.1.0"
