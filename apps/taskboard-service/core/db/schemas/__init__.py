"""
Domain-split Pydantic schemas.

Re-exports request and response models for swimlanes, projects, tasks and
the calendar view from one place.
"""

# Import order: nested types first so forward references resolve
from .tasks import TaskBase, TaskCreate, TaskUpdate, TaskExpand, Task, TaskWithSubtasks
from .projects import (
    ProjectBase,
    ProjectCreate,
    ProjectUpdate,
    Project,
    ProjectWithTasks,
    ProjectDetail,
    TaskStats,
)
from .swimlanes import (
    SwimlaneBase,
    SwimlaneCreate,
    SwimlaneUpdate,
    Swimlane,
    SwimlaneWithProjects,
    SwimlaneAction,
)
from .calendar import CalendarTask, CalendarOverview

__all__ = [
    # tasks
    "TaskBase",
    "TaskCreate",
    "TaskUpdate",
    "TaskExpand",
    "Task",
    "TaskWithSubtasks",
    # projects
    "ProjectBase",
    "ProjectCreate",
    "ProjectUpdate",
    "Project",
    "ProjectWithTasks",
    "ProjectDetail",
    "TaskStats",
    # swimlanes
    "SwimlaneBase",
    "SwimlaneCreate",
    "SwimlaneUpdate",
    "Swimlane",
    "SwimlaneWithProjects",
    "SwimlaneAction",
    # calendar
    "CalendarTask",
    "CalendarOverview",
]
