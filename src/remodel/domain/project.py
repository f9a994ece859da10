"""The remodel project: a name, a fixed sequence of phases and a status."""

from collections.abc import Sequence

from . import events
from .errors import ForeignEventError
from .value_objects import PHASES, ProjectStatus


class RemodelProject:
    """A remodel project moving through `PHASES`.

    A project starts out not started, moves through the phases in order once
    started, and ends up completed. Every change is expressed as an event,
    applied through `_apply`, and kept as pending until the caller dequeues
    it.

    Invariant: `current_phase` is set if and only if the status is
    `ProjectStatus.IN_PROGRESS`.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._phases: tuple[str, ...] = PHASES
        self.status: ProjectStatus = ProjectStatus.NOT_STARTED
        self.current_phase: str | None = None
        self._version: int = 0
        self._pending_events: list[events.ProjectEvent] = []

    # --- Construction Paths ---

    @classmethod
    def rehydrate(
        cls, name: str, event_stream: Sequence[events.ProjectEvent]
    ) -> "RemodelProject":
        """Rebuild a project from the events it recorded.

        Args:
            name: The name of the project to rebuild.
            event_stream: The project's events, oldest first.

        Returns:
            The project in the state the events lead to, with no pending events.

        Raises:
            ForeignEventError: If an event was recorded for another project.
            ValueError: If the events are not a sequence a project could have
                recorded, e.g. an advance before the project was started.
        """
        project = cls(name)
        for event in event_stream:
            project._apply(event)
            project._version += 1
        return project

    # --- Accessors ---

    @property
    def name(self) -> str:
        """The project name given at construction."""
        return self._name

    @property
    def phases(self) -> tuple[str, ...]:
        """The ordered phases of the project."""
        return self._phases

    @property
    def is_completed(self) -> bool:
        """True once the project has been through its last phase."""
        return self.status is ProjectStatus.COMPLETED

    @property
    def version(self) -> int:
        """The number of events the project was rebuilt from."""
        return self._version

    # --- State Transitions ---

    def start(self) -> None:
        """Start the project at its first phase.

        Starting is unconditional: a project that is already in progress or
        completed is reset to the first phase.
        """
        self._record(events.ProjectStarted(project_name=self._name))

    def advance_phase(self) -> None:
        """Move the project to its next phase, completing it after the last one.

        Does nothing unless the project is in progress.
        """
        if self.status is not ProjectStatus.IN_PROGRESS:
            return

        if (next_phase := self._next_phase()) is not None:
            event: events.ProjectEvent = events.PhaseAdvanced(
                project_name=self._name, phase=next_phase
            )
        else:
            event = events.ProjectCompleted(project_name=self._name)
        self._record(event)

    def dequeue_uncommitted(self) -> list[events.ProjectEvent]:
        """Return the events recorded since the last call, and forget them."""
        uncommitted_events = self._pending_events
        self._pending_events = []
        return uncommitted_events

    # --- Event Application ---

    def _record(self, event: events.ProjectEvent) -> None:
        self._apply(event)
        self._pending_events.append(event)

    def _apply(self, event: events.ProjectEvent) -> None:
        if event.project_name != self._name:
            raise ForeignEventError(self._name, event.project_name)

        match event:
            case events.ProjectStarted():
                self.status = ProjectStatus.IN_PROGRESS
                self.current_phase = self._phases[0]
            case events.PhaseAdvanced():
                self._require_in_progress(event)
                if event.phase != (expected := self._next_phase()):
                    raise ValueError(
                        f"Cannot advance from {self.current_phase!r} to "
                        f"{event.phase!r}; next phase is {expected!r}"
                    )
                self.current_phase = event.phase
            case events.ProjectCompleted():
                self._require_in_progress(event)
                if self._next_phase() is not None:
                    raise ValueError(
                        f"Cannot complete project during {self.current_phase!r}; "
                        f"{self._phases[-1]!r} is the last phase"
                    )
                self.status = ProjectStatus.COMPLETED
                self.current_phase = None
            case _:
                raise ValueError(f"Unhandled event type: {type(event).__name__}")

    # --- Internal Helpers ---

    def _next_phase(self) -> str | None:
        """The phase after the current one, or None during the last phase."""
        idx = self._phases.index(self.current_phase)
        return self._phases[idx + 1] if idx < len(self._phases) - 1 else None

    def _require_in_progress(self, event: events.ProjectEvent) -> None:
        if self.status is not ProjectStatus.IN_PROGRESS:
            raise ValueError(
                f"{type(event).__name__} requires a project in progress, "
                f"not {self.status.value!r}"
            )

    def __repr__(self) -> str:
        return (
            f"RemodelProject(name={self.name!r}, status={self.status.value!r}, "
            f"current_phase={self.current_phase!r})"
        )
