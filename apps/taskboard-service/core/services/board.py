"""
Board assembly: swimlanes → projects → task trees.

A failure while loading one level is logged and replaced with an empty list
so the rest of the board still renders.
"""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.db import crud, models, schemas
from core.services.hierarchy import build_task_hierarchy
from core.utils.config import get_settings

logger = logging.getLogger(__name__)


def build_project_tasks(db: Session, project: models.Project) -> List[schemas.TaskWithSubtasks]:
    """Return the task tree of ``project``; empty on store failure."""
    try:
        rows = crud.get_tasks_by_project(db, project.id)
        return build_task_hierarchy(rows)
    except SQLAlchemyError:
        logger.exception("task_hierarchy_failed", extra={"project_id": str(project.id)})
        db.rollback()
        return []


def get_project_with_tasks(db: Session, project: models.Project) -> schemas.ProjectWithTasks:
    data = schemas.Project.model_validate(project).model_dump()
    return schemas.ProjectWithTasks(**data, tasks=build_project_tasks(db, project))


def _swimlane_with_projects(db: Session, swimlane: models.Swimlane) -> schemas.SwimlaneWithProjects:
    data = schemas.Swimlane.model_validate(swimlane).model_dump()
    try:
        projects = crud.get_projects_by_swimlane(db, swimlane.id)
    except SQLAlchemyError:
        logger.exception("swimlane_projects_failed", extra={"swimlane_id": str(swimlane.id)})
        db.rollback()
        return schemas.SwimlaneWithProjects(**data, projects=[])
    return schemas.SwimlaneWithProjects(
        **data,
        projects=[get_project_with_tasks(db, project) for project in projects],
    )


def get_full_swimlane_data(db: Session) -> List[schemas.SwimlaneWithProjects]:
    """Return every swimlane with nested projects and task trees."""
    if get_settings().skip_database_operations:
        logger.info("full_hierarchy_skipped: SKIP_DATABASE_OPERATIONS set")
        return []
    try:
        swimlanes = crud.get_swimlanes(db)
    except SQLAlchemyError:
        logger.exception("swimlanes_listing_failed")
        db.rollback()
        return []
    return [_swimlane_with_projects(db, swimlane) for swimlane in swimlanes]
