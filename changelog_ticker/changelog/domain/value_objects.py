"""Value objects for the changelog domain."""

from dataclasses import dataclass
from enum import Enum

from changelog_ticker.git.domain.entities import Project

SUBJECT_SEPARATOR = ": "
FEATURE_PREFIX = "feat:"
BUGFIX_PREFIX = "fix:"

BUGFIXES_HEADER = "### :bug: Bugfixes\n"
FEATURES_HEADER = "### :rocket: Features\n"


class EntryKind(str, Enum):
    """Changelog category of a commit."""

    FEATURE = "feature"
    BUGFIX = "bugfix"
    EXCLUDED = "excluded"


class ShortHashError(ValueError):
    """Raised when a commit hash is too short to be abbreviated."""


@dataclass(frozen=True)
class Classification:
    """Result of classifying a commit subject.

    Attributes:
        kind: Category of the commit
        display_message: Subject text after the prefix, empty when excluded
    """

    kind: EntryKind
    display_message: str = ""


@dataclass(frozen=True)
class ClassifiedProject:
    """Project paired with its formatted changelog entries."""

    project: Project
    features: tuple[str, ...] = ()
    bugfixes: tuple[str, ...] = ()
