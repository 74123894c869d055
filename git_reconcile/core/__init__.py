"""Core reconciliation logic for git-reconcile."""

from .reconciler import Reconciler

__all__ = ["Reconciler"]
