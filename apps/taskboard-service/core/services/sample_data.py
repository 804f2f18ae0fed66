"""Seed a fresh board with a few swimlanes, projects and tasks."""
from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.db import crud, schemas

logger = logging.getLogger(__name__)

SAMPLE_SWIMLANES = (
    ("Personal", "bg-blue-500", "Health & Fitness", "Personal wellness goals and activities"),
    ("Work", "bg-green-500", "Q1 Project Launch", "Major product release preparation"),
    ("Investing", "bg-purple-500", "Portfolio Review", "Monthly investment analysis and rebalancing"),
)


def initialize_sample_data(db: Session) -> bool:
    """Populate an empty store; return True when sample rows were written.

    Errors are logged and swallowed so a failed seed never breaks the board.
    """
    try:
        if crud.count_swimlanes(db) > 0:
            return False
    except SQLAlchemyError:
        # If we can't check, assume the store is empty
        logger.exception("sample_data_check_failed")
        db.rollback()

    try:
        projects = []
        for lane_title, color, project_title, description in SAMPLE_SWIMLANES:
            lane = crud.create_swimlane(db, schemas.SwimlaneCreate(title=lane_title, color=color))
            projects.append(
                crud.create_project(
                    db,
                    schemas.ProjectCreate(title=project_title, description=description, swimlane_id=lane.id),
                )
            )

        health = projects[0]
        workout = crud.create_task(
            db,
            schemas.TaskCreate(
                title="Morning workout routine",
                due_date=date(2024, 12, 20),
                project_id=health.id,
            ),
        )
        cardio = crud.create_task(
            db,
            schemas.TaskCreate(
                title="30 min cardio",
                project_id=health.id,
                parent_task_id=workout.id,
                sort_order=0,
            ),
        )
        crud.update_task(db, cardio.id, schemas.TaskUpdate(completed=True))
        crud.create_task(
            db,
            schemas.TaskCreate(
                title="Strength training",
                due_date=date(2024, 12, 18),
                project_id=health.id,
                parent_task_id=workout.id,
                sort_order=1,
            ),
        )
    except (SQLAlchemyError, ValueError):
        logger.exception("sample_data_create_failed")
        db.rollback()
        return False

    logger.info("sample_data_initialized", extra={"swimlanes": len(SAMPLE_SWIMLANES)})
    return True
