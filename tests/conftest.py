"""Shared fixtures for changelog-ticker tests."""

import pytest

from tests.helpers import FakeCommitSource, GitRepoBuilder, InMemoryWriter


@pytest.fixture
def fake_source():
    """Empty fake commit source."""
    return FakeCommitSource()


@pytest.fixture
def writer():
    """In-memory changelog writer."""
    return InMemoryWriter()


@pytest.fixture
def git_repo(tmp_path):
    """Create a temporary git repository for testing."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    return GitRepoBuilder(repo_path)
