import uuid
from datetime import date, datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class TaskBase(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    due_date: date | None = None


class TaskCreate(TaskBase):
    project_id: uuid.UUID
    parent_task_id: uuid.UUID | None = None
    sort_order: int = 0


class TaskUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=500)
    completed: bool | None = None
    due_date: date | None = None
    parent_task_id: uuid.UUID | None = None
    expanded: bool | None = None
    sort_order: int | None = None


class TaskExpand(BaseModel):
    expanded: bool


class Task(TaskBase):
    id: uuid.UUID
    completed: bool = False
    project_id: uuid.UUID
    parent_task_id: uuid.UUID | None = None
    expanded: bool = False
    sort_order: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)


class TaskWithSubtasks(Task):
    subtasks: List["TaskWithSubtasks"] = []


TaskWithSubtasks.model_rebuild()
