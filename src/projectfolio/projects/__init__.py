"""Public interface for project loading."""

from .repository import ProjectRepository
from .types import Project, ProjectLinks, ProjectRepositoryConfig

__all__ = [
    "Project",
    "ProjectLinks",
    "ProjectRepository",
    "ProjectRepositoryConfig",
]
