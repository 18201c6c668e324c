#!/usr/bin/env python3
"""
Script to generate a changelog of an author's recent commits:
- Author name (exact git author name)
- Number of days to look back
- --config: TOML file with a [paths] table (optional, defaults to ./config.toml)
- --output: Changelog file (optional, defaults to ./changelog.md)
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from changelog_ticker.changelog.repositories.implementations import FileChangelogWriterImpl
from changelog_ticker.changelog.services.changelog_service import ChangelogService
from changelog_ticker.config.domain.value_objects import ConfigError
from changelog_ticker.config.services.config_service import ConfigService
from changelog_ticker.git.repositories.implementations import GitCommitSourceImpl
from changelog_ticker.git.services.git_service import GitService

logger = logging.getLogger("changelog-ticker")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description=(
            "Generate a Markdown changelog of an author's features and bugfixes "
            "across the configured repositories"
        )
    )
    parser.add_argument(
        "author_name",
        type=str,
        help="Git author name whose commits are collected",
    )
    parser.add_argument(
        "days",
        type=int,
        help="Number of days to look back",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Config file path (default: $CHANGELOG_CONFIG or ./config.toml)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (default: $CHANGELOG_OUTPUT or ./changelog.md)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main function to parse arguments, collect commits, and write the changelog."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config_service = ConfigService()
    try:
        options = config_service.resolve_run_options(
            author_name=args.author_name,
            days=args.days,
            config_path=args.config,
            output_path=args.output,
        )
        paths_config = config_service.load_paths_config(options.config_path)
    except ConfigError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"✗ Invalid arguments: {e}", file=sys.stderr)
        sys.exit(1)

    logger.debug(
        "Collecting %d project(s) for %s over %d day(s)",
        len(paths_config.paths),
        options.author_name,
        options.days,
    )

    try:
        git_service = GitService(GitCommitSourceImpl())
        project_list = git_service.collect_projects(
            paths_config, options.author_name, options.days
        )

        changelog_service = ChangelogService(FileChangelogWriterImpl())
        changelog_service.publish(date.today(), project_list, options.output_path)
    except (RuntimeError, ValueError) as e:
        print(f"✗ Failed to generate changelog: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"✓ Changelog written to {options.output_path}")
    print(f"  Projects: {len(project_list.projects)}")
    sys.exit(0)


if __name__ == "__main__":
    main()
