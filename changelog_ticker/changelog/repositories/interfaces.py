"""Repository interfaces for publishing changelogs."""

from abc import ABC, abstractmethod
from pathlib import Path


class ChangelogWriterRepository(ABC):
    """Interface for the changelog output sink."""

    @abstractmethod
    def write(self, output_path: Path, text: str) -> None:
        """
        Write the changelog document, replacing any previous content.

        Args:
            output_path: Destination of the document
            text: Full changelog text

        Raises:
            RuntimeError: If the document cannot be written
        """
        ...
