"""Git domain entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Commit:
    """Commit entity."""

    hash: str
    message: str
    author_name: str
    author_email: str
    date: str


@dataclass(frozen=True)
class Project:
    """Project entity with the commits selected for the changelog.

    Attributes:
        name: Unique project name from the configuration
        remote: Base URL used to build commit links, empty if unresolved
        commits: Commits in git log order (newest first)
    """

    name: str
    remote: str
    commits: tuple[Commit, ...] = ()


@dataclass(frozen=True)
class ProjectList:
    """Ordered collection of projects, one per configured path."""

    projects: tuple[Project, ...] = ()
