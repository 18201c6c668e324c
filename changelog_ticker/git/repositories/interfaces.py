"""Repository interfaces for Git operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from changelog_ticker.git.domain.value_objects import CommitWindow


class CommitSourceRepository(ABC):
    """Interface for reading commits and remotes from a repository checkout."""

    @abstractmethod
    def resolve_remote(self, repo_path: Path) -> str:
        """
        Resolve the base URL of the repository's origin remote.

        Args:
            repo_path: Path to the git repository

        Returns:
            Remote URL without trailing whitespace

        Raises:
            RuntimeError: If the remote cannot be resolved
        """
        ...

    @abstractmethod
    def list_commits(self, window: CommitWindow) -> tuple[str, ...]:
        """
        List raw commit records made within a time window.

        Each record holds the fields hash, subject, author name, author email
        and date joined by FIELD_SEPARATOR.

        Args:
            window: Repository and number of days to look back

        Returns:
            Tuple of raw records ordered from newest to oldest

        Raises:
            RuntimeError: If the commits cannot be listed
        """
        ...
