import uuid
from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from .tasks import TaskWithSubtasks


class ProjectBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None


class ProjectCreate(ProjectBase):
    swimlane_id: uuid.UUID


class ProjectUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    swimlane_id: uuid.UUID | None = None


class Project(ProjectBase):
    id: uuid.UUID
    swimlane_id: uuid.UUID
    created_at: datetime | None = None
    updated_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)


class TaskStats(BaseModel):
    total: int = 0
    completed: int = 0
    overdue: int = 0


class ProjectWithTasks(Project):
    tasks: List[TaskWithSubtasks] = []


class ProjectDetail(ProjectWithTasks):
    stats: TaskStats = TaskStats()
