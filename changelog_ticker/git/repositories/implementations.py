"""Concrete implementation of Git repository operations."""

import subprocess
from pathlib import Path

from changelog_ticker.git.domain.value_objects import CommitWindow
from changelog_ticker.git.repositories.interfaces import CommitSourceRepository

# %H hash, %s subject, %an author name, %ae author email, %ad author date
LOG_FORMAT = "%x1f".join(("%H", "%s", "%an", "%ae", "%ad"))


class GitCommitSourceImpl(CommitSourceRepository):
    """Concrete implementation of the commit source using git commands."""

    def __init__(self, git_executable: str = "git") -> None:
        """
        Initialize GitCommitSourceImpl.

        Args:
            git_executable: Name or path of the git binary
        """
        self._git = git_executable

    def resolve_remote(self, repo_path: Path) -> str:
        """
        Resolve the URL of the origin remote.

        Args:
            repo_path: Path to the git repository

        Returns:
            Remote URL

        Raises:
            RuntimeError: If git fails or the repository has no origin remote
        """
        output = self._run(repo_path, ["remote", "get-url", "origin"])
        return output.strip()

    def list_commits(self, window: CommitWindow) -> tuple[str, ...]:
        """
        List raw commit records made within a time window.

        Args:
            window: Repository and number of days to look back

        Returns:
            Tuple of raw records ordered from newest to oldest, empty when the
            repository has no commits yet
        """
        if not self._has_commits(window.repo_path):
            return ()

        output = self._run(
            window.repo_path,
            [
                "log",
                "--since",
                f"{window.since_days} days ago",
                f"--pretty=format:{LOG_FORMAT}",
            ],
        )
        return tuple(line for line in output.split("\n") if line)

    def _run(self, repo_path: Path, args: list[str]) -> str:
        """Run a git command inside the repository and return its stdout."""
        try:
            result = subprocess.run(
                [self._git, *args],
                cwd=repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise RuntimeError(
                f"git {args[0]} failed in {repo_path}: {(e.stderr or str(e)).strip()}"
            ) from e
        except OSError as e:
            raise RuntimeError(f"Failed to run git in {repo_path}: {e}") from e
        return result.stdout

    def _has_commits(self, repo_path: Path) -> bool:
        """Check whether HEAD points to a commit."""
        try:
            result = subprocess.run(
                [self._git, "rev-parse", "--verify", "--quiet", "HEAD"],
                cwd=repo_path,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise RuntimeError(f"Failed to run git in {repo_path}: {e}") from e
        # Exit status 1 means an unborn HEAD; other failures are reported by git log
        return result.returncode != 1
