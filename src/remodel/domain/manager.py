"""Registry of remodel projects supporting status-based lookup."""

import logging
from collections.abc import Iterator

from remodel.domain.project import RemodelProject
from remodel.domain.value_objects import ProjectStatus

logger = logging.getLogger(__name__)


class ProjectManager:
    """Holds references to remodel projects in registration order.

    Projects are shared, not owned: the manager keeps the same objects the
    caller registered, so lifecycle changes made through any reference are
    visible to `find_by_status`. Duplicates are allowed and nothing is ever
    removed.
    """

    def __init__(self) -> None:
        self._projects: list[RemodelProject] = []

    @property
    def projects(self) -> tuple[RemodelProject, ...]:
        """Registered projects, in insertion order."""
        return tuple(self._projects)

    def add_project(self, project: RemodelProject) -> None:
        """Register a project."""
        self._projects.append(project)
        logger.debug(
            "Registered project %r (%d registered)", project.name, len(self._projects)
        )

    def find_by_status(self, status: ProjectStatus | str) -> list[RemodelProject]:
        """Return the registered projects whose current status equals `status`.

        Args:
            status: A `ProjectStatus` or its exact string label
                (e.g. ``"in progress"``). Matching is exact and case-sensitive.

        Returns:
            Matching projects in registration order; empty if none match.
        """
        matches = [project for project in self._projects if project.status == status]
        logger.debug(
            "find_by_status(%r): %d of %d projects match",
            getattr(status, "value", status),
            len(matches),
            len(self._projects),
        )
        return matches

    def __len__(self) -> int:
        return len(self._projects)

    def __iter__(self) -> Iterator[RemodelProject]:
        return iter(self._projects)
