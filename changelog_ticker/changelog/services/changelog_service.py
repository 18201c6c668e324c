"""Changelog service for assembling and publishing the changelog document."""

from collections.abc import Iterable
from datetime import date
from pathlib import Path

from changelog_ticker.changelog.domain.value_objects import (
    BUGFIXES_HEADER,
    FEATURES_HEADER,
    ClassifiedProject,
)
from changelog_ticker.changelog.repositories.interfaces import ChangelogWriterRepository
from changelog_ticker.changelog.services.classifier_service import ClassifierService
from changelog_ticker.git.domain.entities import ProjectList


def render_project(classified: ClassifiedProject) -> str:
    """Render one project block, terminated by a blank line."""
    parts = [f"## {classified.project.name}\n"]

    if classified.bugfixes:
        parts.append(BUGFIXES_HEADER)
        parts.extend(classified.bugfixes)

    if classified.features:
        parts.append(FEATURES_HEADER)
        parts.extend(classified.features)

    parts.append("\n")
    return "".join(parts)


class ChangelogService:
    """Service for turning collected projects into a changelog document."""

    def __init__(
        self,
        writer: ChangelogWriterRepository,
        classifier_service: ClassifierService | None = None,
    ) -> None:
        """
        Initialize ChangelogService.

        Args:
            writer: Repository that stores the finished document
            classifier_service: Classifier for project commits. Defaults to ClassifierService()
        """
        self._writer = writer
        self._classifier_service = classifier_service or ClassifierService()

    def assemble(self, run_date: date, classified_projects: Iterable[ClassifiedProject]) -> str:
        """
        Assemble the changelog document.

        Projects appear in the given order and are never omitted; a project
        without entries renders as its header followed by a blank line.

        Args:
            run_date: Date shown in the document title
            classified_projects: Projects paired with their entries

        Returns:
            Markdown changelog text
        """
        header = f"# Changelog for {run_date.strftime('%Y-%m-%d')}\n\n"
        return header + "".join(render_project(classified) for classified in classified_projects)

    def build(self, run_date: date, project_list: ProjectList) -> str:
        """
        Classify every project and assemble the document.

        Args:
            run_date: Date shown in the document title
            project_list: Projects with commits filtered to one author

        Returns:
            Markdown changelog text
        """
        return self.assemble(
            run_date,
            (
                self._classifier_service.classify_project(project)
                for project in project_list.projects
            ),
        )

    def publish(self, run_date: date, project_list: ProjectList, output_path: Path) -> str:
        """
        Build the document and write it to `output_path`.

        Returns:
            The written changelog text
        """
        changelog = self.build(run_date, project_list)
        self._writer.write(output_path, changelog)
        return changelog
