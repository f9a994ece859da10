"""Domain-layer error definitions."""


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ForeignEventError(DomainError):
    """Raised when a project is rebuilt from an event recorded for another project."""

    def __init__(self, project_name: str, event_project_name: str) -> None:
        super().__init__(
            f"Event for project '{event_project_name}' cannot be applied to "
            f"project '{project_name}'."
        )
        self.project_name = project_name
        self.event_project_name = event_project_name
