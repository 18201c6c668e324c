"""Concrete implementations of changelog writer repositories."""

from pathlib import Path

from changelog_ticker.changelog.repositories.interfaces import ChangelogWriterRepository


class FileChangelogWriterImpl(ChangelogWriterRepository):
    """Implementation of the changelog writer using the local filesystem."""

    def write(self, output_path: Path, text: str) -> None:
        """Write the document as UTF-8, creating parent directories."""
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise RuntimeError(f"Failed to write changelog to {output_path}: {e}") from e
