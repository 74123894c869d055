"""Configuration handling for git-reconcile"""

from dataclasses import dataclass, fields
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable run configuration, built once from the command line."""

    # Target branch, used verbatim; None means "use the current branch's upstream"
    branch: Optional[str] = None

    # Execution modes
    pretend: bool = False  # Report intended actions without touching the working tree
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.branch is not None and not self.branch.strip():
            raise ValueError("branch cannot be empty")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "branch": self.branch,
            "pretend": self.pretend,
            "debug": self.debug,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
