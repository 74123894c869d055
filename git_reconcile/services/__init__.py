"""Services for git-reconcile."""
