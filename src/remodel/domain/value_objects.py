"""Module including value objects used across the domain layer."""

from enum import Enum

PHASES: tuple[str, ...] = ("planning", "demolition", "construction", "finishing")
"""Ordered phases every remodel project moves through while in progress."""


class ProjectStatus(str, Enum):
    """Enumeration of possible project statuses.

    Members compare equal to their string labels, so callers may query with
    either ``ProjectStatus.IN_PROGRESS`` or ``"in progress"``.
    """

    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    COMPLETED = "completed"
