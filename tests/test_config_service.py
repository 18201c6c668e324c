"""Tests for ConfigService."""

from pathlib import Path

import pytest

from changelog_ticker.config.domain.value_objects import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_OUTPUT_PATH,
    ConfigError,
    RunOptions,
)
from changelog_ticker.config.services.config_service import ConfigService


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep config variables from the outer environment out of the tests."""
    monkeypatch.delenv("CHANGELOG_CONFIG", raising=False)
    monkeypatch.delenv("CHANGELOG_OUTPUT", raising=False)


def test_load_paths_config(tmp_path):
    """Test the [paths] table is loaded and user paths expanded."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        '[paths]\nalpha = "/srv/alpha"\nbeta = "~/beta"\n', encoding="utf-8"
    )

    paths_config = ConfigService().load_paths_config(config_path)

    assert paths_config.paths == {
        "alpha": Path("/srv/alpha"),
        "beta": Path("~/beta").expanduser(),
    }


def test_load_paths_config_missing_file(tmp_path):
    """Test a missing config file is a configuration error."""
    with pytest.raises(ConfigError, match="not found"):
        ConfigService().load_paths_config(tmp_path / "missing.toml")


@pytest.mark.parametrize(
    "content, match",
    [
        ("[paths\nalpha = 1", "Failed to parse"),
        ('[projects]\nalpha = "/srv/alpha"\n', r"\[paths\] table"),
        ('paths = "/srv"\n', r"\[paths\] table"),
        ("[paths]\nalpha = 1\n", "must be a string"),
    ],
)
def test_load_paths_config_malformed(tmp_path, content, match):
    """Test malformed configurations are rejected."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=match):
        ConfigService().load_paths_config(config_path)


def test_resolve_run_options_defaults():
    """Test defaults apply without flags or environment."""
    options = ConfigService().resolve_run_options("Alice", 7)

    assert options == RunOptions(
        author_name="Alice",
        days=7,
        config_path=DEFAULT_CONFIG_PATH,
        output_path=DEFAULT_OUTPUT_PATH,
    )


def test_resolve_run_options_from_environment(monkeypatch):
    """Test environment variables override the defaults."""
    monkeypatch.setenv("CHANGELOG_CONFIG", "/etc/changelog.toml")
    monkeypatch.setenv("CHANGELOG_OUTPUT", "/tmp/out.md")

    options = ConfigService().resolve_run_options("Alice", 7)

    assert options.config_path == Path("/etc/changelog.toml")
    assert options.output_path == Path("/tmp/out.md")


def test_resolve_run_options_flags_win(monkeypatch):
    """Test explicit paths override the environment."""
    monkeypatch.setenv("CHANGELOG_CONFIG", "/etc/changelog.toml")

    options = ConfigService().resolve_run_options(
        "Alice", 7, config_path=Path("local.toml"), output_path=Path("out.md")
    )

    assert options.config_path == Path("local.toml")
    assert options.output_path == Path("out.md")


@pytest.mark.parametrize("author_name, days", [("", 7), ("Alice", -1)])
def test_run_options_validation(author_name, days):
    """Test empty authors and negative windows are rejected."""
    with pytest.raises(ValueError):
        RunOptions(author_name=author_name, days=days)
