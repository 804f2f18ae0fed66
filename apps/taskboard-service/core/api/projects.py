"""
Project API endpoints.

Projects live inside a swimlane; the detail read returns the project's task
tree plus completion and overdue counts for the notepad view.
"""
import logging
import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.db import schemas, crud
from core.db.database import get_db
from core.api.errors import store_failure, not_found
from core.services.board import get_project_with_tasks
from core.services.insights import get_task_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("/", response_model=schemas.Project, status_code=status.HTTP_201_CREATED)
def create_project_endpoint(project: schemas.ProjectCreate, db: Session = Depends(get_db)):
    if not crud.get_swimlane(db, project.swimlane_id):
        raise not_found("Swimlane")
    try:
        created = crud.create_project(db, project)
    except SQLAlchemyError:
        raise store_failure(db, "create project", swimlane_id=str(project.swimlane_id))
    logger.info("project_created", extra={"project_id": str(created.id)})
    return created


@router.get("/{project_id}", response_model=schemas.ProjectDetail)
def get_project_endpoint(project_id: uuid.UUID, db: Session = Depends(get_db)):
    project = crud.get_project(db, project_id)
    if not project:
        raise not_found("Project")
    with_tasks = get_project_with_tasks(db, project)
    return schemas.ProjectDetail(
        **with_tasks.model_dump(exclude={"tasks"}),
        tasks=with_tasks.tasks,
        stats=get_task_stats(with_tasks.tasks),
    )


@router.put("/{project_id}", response_model=schemas.Project)
def update_project_endpoint(
    project_id: uuid.UUID,
    project: schemas.ProjectUpdate,
    db: Session = Depends(get_db),
):
    if project.swimlane_id is not None and not crud.get_swimlane(db, project.swimlane_id):
        raise not_found("Swimlane")
    try:
        updated = crud.update_project(db, project_id, project)
    except SQLAlchemyError:
        raise store_failure(db, "update project", project_id=str(project_id))
    if not updated:
        raise not_found("Project")
    return updated


@router.delete("/{project_id}")
def delete_project_endpoint(project_id: uuid.UUID, db: Session = Depends(get_db)):
    try:
        deleted = crud.delete_project(db, project_id)
    except SQLAlchemyError:
        raise store_failure(db, "delete project", project_id=str(project_id))
    if not deleted:
        raise not_found("Project")
    logger.info("project_deleted", extra={"project_id": str(project_id)})
    return {"success": True}
