"""Domain layer for remodel.

Contains the remodel project, the events it records, its value objects and
the project manager. This package is deliberately technology-agnostic.
"""

from .manager import ProjectManager
from .project import RemodelProject
from .value_objects import PHASES, ProjectStatus

__all__ = ["PHASES", "ProjectManager", "ProjectStatus", "RemodelProject"]
