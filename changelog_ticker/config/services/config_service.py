"""Configuration service for loading project paths and run options."""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

from changelog_ticker.config.domain.value_objects import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_OUTPUT_PATH,
    ConfigError,
    PathsConfig,
    RunOptions,
)


def _load_env_file() -> None:
    """Load environment variables from .env file."""
    # Try to find .env file in project root (parent of changelog_ticker package)
    project_root = Path(__file__).parent.parent.parent.parent
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Fallback: try current directory
        load_dotenv()


class ConfigService:
    """Service for reading the changelog configuration."""

    def resolve_run_options(
        self,
        author_name: str,
        days: int,
        config_path: Path | None = None,
        output_path: Path | None = None,
    ) -> RunOptions:
        """
        Combine command-line values with the environment.

        Explicit paths win over CHANGELOG_CONFIG / CHANGELOG_OUTPUT, which win
        over the defaults.

        Args:
            author_name: Author whose commits are collected
            days: Number of days to look back
            config_path: Optional config file override
            output_path: Optional output file override

        Returns:
            RunOptions for the run
        """
        _load_env_file()

        if config_path is None:
            config_path = Path(os.getenv("CHANGELOG_CONFIG", str(DEFAULT_CONFIG_PATH)))
        if output_path is None:
            output_path = Path(os.getenv("CHANGELOG_OUTPUT", str(DEFAULT_OUTPUT_PATH)))

        return RunOptions(
            author_name=author_name,
            days=days,
            config_path=config_path,
            output_path=output_path,
        )

    def load_paths_config(self, config_path: Path) -> PathsConfig:
        """
        Load the `[paths]` table of a TOML configuration file.

        Args:
            config_path: Path to the TOML file

        Returns:
            PathsConfig with user directories expanded

        Raises:
            ConfigError: If the file is missing, unparseable or malformed
        """
        try:
            with config_path.open("rb") as config_file:
                data = tomllib.load(config_file)
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {config_path}") from None
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse config file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config file {config_path}: {e}") from e

        paths = data.get("paths")
        if not isinstance(paths, dict):
            raise ConfigError(f"Config file {config_path} must contain a [paths] table")

        resolved: dict[str, Path] = {}
        for name, path in paths.items():
            if not isinstance(path, str):
                raise ConfigError(f"Path of project '{name}' must be a string")
            resolved[name] = Path(path).expanduser()

        return PathsConfig(paths=resolved)
