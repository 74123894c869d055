"""
git-reconcile - Discard local changes that already match the branch you are about to merge
"""

from .__version__ import __version__
from .core import Reconciler
from .cli.main import main

__all__ = ["Reconciler", "main", "__version__"]
