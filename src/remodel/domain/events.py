"""Events recorded by a remodel project as it changes state."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProjectEvent:
    """Base class for all project events."""

    project_name: str


@dataclass(frozen=True, slots=True)
class ProjectStarted(ProjectEvent):
    """The project was (re)started at its first phase."""


@dataclass(frozen=True, slots=True)
class PhaseAdvanced(ProjectEvent):
    """The project moved on to `phase`."""

    phase: str


@dataclass(frozen=True, slots=True)
class ProjectCompleted(ProjectEvent):
    """The project finished its last phase."""
