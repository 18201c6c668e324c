"""Git service for collecting the commits of configured projects."""

import logging
from pathlib import Path

from changelog_ticker.config.domain.value_objects import PathsConfig
from changelog_ticker.git.domain.entities import Commit, Project, ProjectList
from changelog_ticker.git.domain.value_objects import (
    COMMIT_FIELDS,
    FIELD_SEPARATOR,
    SHORT_HASH_LENGTH,
    CommitWindow,
    MalformedCommitError,
)
from changelog_ticker.git.repositories.interfaces import CommitSourceRepository

logger = logging.getLogger("changelog-ticker")


def parse_commit_line(line: str) -> Commit:
    """
    Parse a raw commit record produced by the commit source.

    Args:
        line: Fields joined by FIELD_SEPARATOR

    Returns:
        Parsed commit

    Raises:
        MalformedCommitError: If the field count is wrong or the hash is too short
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != len(COMMIT_FIELDS):
        raise MalformedCommitError(
            f"Expected {len(COMMIT_FIELDS)} fields, got {len(parts)}: {line!r}"
        )

    commit = Commit(**dict(zip(COMMIT_FIELDS, parts)))
    if len(commit.hash) < SHORT_HASH_LENGTH:
        raise MalformedCommitError(f"Commit hash is too short: {commit.hash!r}")
    return commit


class GitService:
    """Service for Git operations."""

    def __init__(self, commit_source: CommitSourceRepository) -> None:
        """
        Initialize GitService.

        Args:
            commit_source: Repository implementation for reading commits
        """
        self._commit_source = commit_source

    def collect_project(
        self, name: str, repo_path: Path, author_name: str, days: int
    ) -> Project:
        """
        Build a project holding the author's commits of the last `days` days.

        A remote that cannot be resolved degrades to an empty remote and
        malformed records are skipped; both are logged as warnings.

        Args:
            name: Project name
            repo_path: Path to the git repository
            author_name: Exact author name to keep
            days: Number of days to look back

        Returns:
            Project with commits in git log order

        Raises:
            RuntimeError: If the commits cannot be listed
        """
        try:
            remote = self._commit_source.resolve_remote(repo_path)
        except RuntimeError as e:
            logger.warning("Could not resolve remote for %s: %s", name, e)
            remote = ""

        lines = self._commit_source.list_commits(
            CommitWindow(repo_path=repo_path, since_days=days)
        )

        commits: list[Commit] = []
        for line in lines:
            try:
                commit = parse_commit_line(line)
            except MalformedCommitError as e:
                logger.warning("Skipping malformed commit in %s: %s", name, e)
                continue
            if commit.author_name == author_name:
                commits.append(commit)

        logger.debug("%s: %d of %d commits by %s", name, len(commits), len(lines), author_name)
        return Project(name=name, remote=remote, commits=tuple(commits))

    def collect_projects(
        self, paths_config: PathsConfig, author_name: str, days: int
    ) -> ProjectList:
        """
        Build one project per configured path, ordered by project name.

        Args:
            paths_config: Mapping of project names to repository paths
            author_name: Exact author name to keep
            days: Number of days to look back

        Returns:
            ProjectList sorted by project name
        """
        projects = [
            self.collect_project(name, path, author_name, days)
            for name, path in sorted(paths_config.paths.items())
        ]
        return ProjectList(projects=tuple(projects))
