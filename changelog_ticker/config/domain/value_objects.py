"""Value objects for the configuration domain."""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_CONFIG_PATH = Path("config.toml")
DEFAULT_OUTPUT_PATH = Path("changelog.md")


class ConfigError(ValueError):
    """Raised when the configuration cannot be loaded."""


@dataclass(frozen=True)
class PathsConfig:
    """Value object mapping project names to repository paths.

    Attributes:
        paths: Project name to filesystem path of its checkout
    """

    paths: dict[str, Path] = field(default_factory=dict)


@dataclass(frozen=True)
class RunOptions:
    """Options of a single changelog run."""

    author_name: str
    days: int
    config_path: Path = DEFAULT_CONFIG_PATH
    output_path: Path = DEFAULT_OUTPUT_PATH

    def __post_init__(self) -> None:
        """Validate the options."""
        if not self.author_name:
            raise ValueError("Author name cannot be empty")

        if self.days < 0:
            raise ValueError(f"Number of days cannot be negative: {self.days}")
