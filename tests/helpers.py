"""Test doubles and builders shared by the test suites."""

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from changelog_ticker.changelog.repositories.interfaces import ChangelogWriterRepository
from changelog_ticker.git.domain.value_objects import FIELD_SEPARATOR, CommitWindow
from changelog_ticker.git.repositories.interfaces import CommitSourceRepository

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def record(
    commit_hash,
    message,
    author_name="Alice",
    author_email="alice@example.com",
    commit_date="Mon Oct 12 10:00:00 2026 +0200",
):
    """Build a raw commit record the way the git source emits it."""
    return FIELD_SEPARATOR.join((commit_hash, message, author_name, author_email, commit_date))


class FakeCommitSource(CommitSourceRepository):
    """In-memory commit source keyed by repository path."""

    def __init__(self, remotes=None, logs=None):
        self.remotes = remotes or {}
        self.logs = logs or {}
        self.windows = []

    def resolve_remote(self, repo_path):
        if repo_path not in self.remotes:
            raise RuntimeError(f"No such remote 'origin' in {repo_path}")
        return self.remotes[repo_path]

    def list_commits(self, window: CommitWindow):
        self.windows.append(window)
        if window.repo_path not in self.logs:
            raise RuntimeError(f"not a git repository: {window.repo_path}")
        return tuple(self.logs[window.repo_path])


class InMemoryWriter(ChangelogWriterRepository):
    """Writer that keeps documents in a dict."""

    def __init__(self):
        self.documents = {}

    def write(self, output_path, text):
        self.documents[output_path] = text


class GitRepoBuilder:
    """Helper creating commits in a temporary repository."""

    def __init__(self, path: Path):
        self.path = path
        self._git("init", "--quiet")

    def _git(self, *args, author_name="Alice", author_email="alice@example.com"):
        env = {
            **os.environ,
            "GIT_AUTHOR_NAME": author_name,
            "GIT_AUTHOR_EMAIL": author_email,
            "GIT_COMMITTER_NAME": author_name,
            "GIT_COMMITTER_EMAIL": author_email,
        }
        return subprocess.run(
            ["git", "-c", "commit.gpgsign=false", *args],
            cwd=self.path,
            env=env,
            capture_output=True,
            text=True,
            check=True,
        ).stdout

    def commit(self, message, author_name="Alice", author_email="alice@example.com"):
        self._git(
            "commit",
            "--allow-empty",
            "--quiet",
            "-m",
            message,
            author_name=author_name,
            author_email=author_email,
        )
        return self._git("rev-parse", "HEAD").strip()

    def add_remote(self, url):
        self._git("remote", "add", "origin", url)
