import uuid
from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from .projects import ProjectWithTasks


class SwimlaneBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    color: str = Field(min_length=1, max_length=64)


class SwimlaneCreate(SwimlaneBase):
    pass


class SwimlaneUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    color: str | None = Field(default=None, min_length=1, max_length=64)


class Swimlane(SwimlaneBase):
    id: uuid.UUID
    created_at: datetime | None = None
    updated_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)


class SwimlaneWithProjects(Swimlane):
    projects: List[ProjectWithTasks] = []


class SwimlaneAction(BaseModel):
    """Body of `POST /swimlanes/`: either an action or a new swimlane."""
    action: str | None = None
    title: str | None = None
    color: str | None = None
