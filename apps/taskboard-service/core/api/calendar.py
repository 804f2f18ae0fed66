"""
Calendar API endpoints: every dated task across the board and summary counts.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.db import schemas
from core.db.database import get_db
from core.services.board import get_full_swimlane_data
from core.services.insights import get_all_tasks_with_dates, get_calendar_overview

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get("/tasks", response_model=List[schemas.CalendarTask])
def list_calendar_tasks(db: Session = Depends(get_db)):
    return get_all_tasks_with_dates(get_full_swimlane_data(db))


@router.get("/overview", response_model=schemas.CalendarOverview)
def calendar_overview(db: Session = Depends(get_db)):
    return get_calendar_overview(get_all_tasks_with_dates(get_full_swimlane_data(db)))
