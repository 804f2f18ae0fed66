"""
Task API endpoints.

Create, edit, complete/reopen, expand/collapse and delete tasks. Deleting a
task removes its subtasks as well.
"""
import logging
import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.db import schemas, crud
from core.db.database import get_db
from core.api.errors import store_failure, not_found, invalid_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post("/", response_model=schemas.Task, status_code=status.HTTP_201_CREATED)
def create_task_endpoint(task: schemas.TaskCreate, db: Session = Depends(get_db)):
    if not crud.get_project(db, task.project_id):
        raise not_found("Project")
    try:
        created = crud.create_task(db, task)
    except ValueError as exc:
        raise invalid_request(exc)
    except SQLAlchemyError:
        raise store_failure(db, "create task", project_id=str(task.project_id))
    logger.info(
        "task_created",
        extra={"task_id": str(created.id), "parent_task_id": str(created.parent_task_id) if created.parent_task_id else None},
    )
    return created


@router.get("/{task_id}", response_model=schemas.Task)
def get_task_endpoint(task_id: uuid.UUID, db: Session = Depends(get_db)):
    task = crud.get_task(db, task_id)
    if not task:
        raise not_found("Task")
    return task


@router.put("/{task_id}", response_model=schemas.Task)
def update_task_endpoint(
    task_id: uuid.UUID,
    task: schemas.TaskUpdate,
    db: Session = Depends(get_db),
):
    try:
        updated = crud.update_task(db, task_id, task)
    except ValueError as exc:
        raise invalid_request(exc)
    except SQLAlchemyError:
        raise store_failure(db, "update task", task_id=str(task_id))
    if not updated:
        raise not_found("Task")
    return updated


@router.post("/{task_id}/toggle", response_model=schemas.Task)
def toggle_task_endpoint(task_id: uuid.UUID, db: Session = Depends(get_db)):
    try:
        toggled = crud.toggle_task_completion(db, task_id)
    except SQLAlchemyError:
        raise store_failure(db, "update task", task_id=str(task_id))
    if not toggled:
        raise not_found("Task")
    return toggled


@router.post("/{task_id}/expand", response_model=schemas.Task)
def expand_task_endpoint(
    task_id: uuid.UUID,
    payload: schemas.TaskExpand,
    db: Session = Depends(get_db),
):
    try:
        task = crud.set_task_expanded(db, task_id, payload.expanded)
    except SQLAlchemyError:
        raise store_failure(db, "update task", task_id=str(task_id))
    if not task:
        raise not_found("Task")
    return task


@router.delete("/{task_id}")
def delete_task_endpoint(task_id: uuid.UUID, db: Session = Depends(get_db)):
    try:
        deleted = crud.delete_task(db, task_id)
    except SQLAlchemyError:
        raise store_failure(db, "delete task", task_id=str(task_id))
    if not deleted:
        raise not_found("Task")
    return {"success": True}
