import uuid
from datetime import date
from pydantic import BaseModel


class CalendarTask(BaseModel):
    id: uuid.UUID
    title: str
    completed: bool
    due_date: date
    project_id: uuid.UUID
    project_title: str
    swimlane_title: str
    swimlane_color: str
    days_until_due: int
    overdue: bool
    due_soon: bool


class CalendarOverview(BaseModel):
    with_dates: int = 0
    overdue: int = 0
    due_soon: int = 0
