"""Value objects for Git domain."""

from dataclasses import dataclass
from pathlib import Path

# ASCII unit separator, never present in a commit subject
FIELD_SEPARATOR = "\x1f"

COMMIT_FIELDS = ("hash", "message", "author_name", "author_email", "date")

SHORT_HASH_LENGTH = 8


class MalformedCommitError(ValueError):
    """Raised when a raw commit record cannot be turned into a Commit."""


@dataclass(frozen=True)
class CommitWindow:
    """Commits of a repository made within the last `since_days` days."""

    repo_path: Path
    since_days: int

    def __post_init__(self) -> None:
        """Validate the window."""
        if self.since_days < 0:
            raise ValueError(f"Number of days cannot be negative: {self.since_days}")
