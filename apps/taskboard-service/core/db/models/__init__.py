"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and the ORM classes for swimlanes, projects and
tasks from a single import location.
"""

from .base import Base, now_utc  # re-export

from .swimlanes import Swimlane
from .projects import Project, DEFAULT_PROJECT_DESCRIPTION
from .tasks import Task

__all__ = [
    "Base",
    "now_utc",
    "Swimlane",
    "Project",
    "DEFAULT_PROJECT_DESCRIPTION",
    "Task",
]
