"""Classifier service for sorting commits into changelog categories."""

from changelog_ticker.changelog.domain.value_objects import (
    BUGFIX_PREFIX,
    FEATURE_PREFIX,
    SUBJECT_SEPARATOR,
    Classification,
    ClassifiedProject,
    EntryKind,
    ShortHashError,
)
from changelog_ticker.git.domain.entities import Commit, Project
from changelog_ticker.git.domain.value_objects import SHORT_HASH_LENGTH

EXCLUDED = Classification(kind=EntryKind.EXCLUDED)


def classify(message: str) -> Classification:
    """
    Classify a commit subject by its conventional commit prefix.

    Only the first ": " separates the prefix, so "feat: fix: x" is a feature
    whose display message is "fix: x".

    Args:
        message: Single-line commit subject

    Returns:
        Classification with the display message, or EXCLUDED
    """
    _, separator, display_message = message.partition(SUBJECT_SEPARATOR)
    if not separator:
        return EXCLUDED

    if message.startswith(FEATURE_PREFIX):
        return Classification(kind=EntryKind.FEATURE, display_message=display_message)
    if message.startswith(BUGFIX_PREFIX):
        return Classification(kind=EntryKind.BUGFIX, display_message=display_message)
    return EXCLUDED


def safe_prefix(value: str, length: int) -> str:
    """
    Return the first `length` characters of `value`.

    Raises:
        ShortHashError: If `value` is shorter than `length`
    """
    if len(value) < length:
        raise ShortHashError(
            f"Cannot take a {length}-character prefix of {value!r}"
        )
    return value[:length]


def format_entry(commit: Commit, display_message: str, remote: str) -> str:
    """Format a commit as a linked changelog line."""
    short_hash = safe_prefix(commit.hash, SHORT_HASH_LENGTH)
    return f" - {display_message} [#{short_hash}]({remote}/commits/{commit.hash})\n"


class ClassifierService:
    """Service for splitting a project's commits into features and bugfixes."""

    def classify_project(self, project: Project) -> ClassifiedProject:
        """
        Classify the commits of a project.

        Commits keep their relative order within each category; commits that
        are neither features nor bugfixes are dropped.

        Args:
            project: Project whose commits are already filtered to one author

        Returns:
            ClassifiedProject with formatted feature and bugfix lines

        Raises:
            ShortHashError: If a surviving commit has a hash shorter than 8 characters
        """
        features: list[str] = []
        bugfixes: list[str] = []

        for commit in project.commits:
            classification = classify(commit.message)
            match classification.kind:
                case EntryKind.FEATURE:
                    target = features
                case EntryKind.BUGFIX:
                    target = bugfixes
                case _:
                    continue
            target.append(
                format_entry(commit, classification.display_message, project.remote)
            )

        return ClassifiedProject(
            project=project,
            features=tuple(features),
            bugfixes=tuple(bugfixes),
        )
