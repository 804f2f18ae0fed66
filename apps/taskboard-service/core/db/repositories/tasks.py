"""
Task repository functions.

Tasks are stored flat with an optional `parent_task_id`; hierarchy checks
here keep a parent inside the same project and keep parent chains acyclic.
"""
from __future__ import annotations

import uuid
from typing import Dict, List, Optional, Set
from sqlalchemy.orm import Session

from core.db import models, schemas

# Columns that must never be written as NULL through a partial update
_NON_NULLABLE_FIELDS = ("title", "completed", "expanded", "sort_order")


def get_task(db: Session, task_id: uuid.UUID) -> Optional[models.Task]:
    return db.query(models.Task).filter(models.Task.id == task_id).first()


def get_tasks_by_project(db: Session, project_id: uuid.UUID) -> List[models.Task]:
    return (
        db.query(models.Task)
        .filter(models.Task.project_id == project_id)
        .order_by(models.Task.sort_order.asc(), models.Task.created_at.asc())
        .all()
    )


def get_subtasks(db: Session, parent_task_id: uuid.UUID) -> List[models.Task]:
    return (
        db.query(models.Task)
        .filter(models.Task.parent_task_id == parent_task_id)
        .order_by(models.Task.sort_order.asc(), models.Task.created_at.asc())
        .all()
    )


def _validate_parent(db: Session, project_id: uuid.UUID, parent_task_id: Optional[uuid.UUID]) -> None:
    if parent_task_id is None:
        return
    parent = get_task(db, parent_task_id)
    if parent is None:
        raise ValueError("Parent task not found")
    if parent.project_id != project_id:
        raise ValueError("Parent task must belong to the same project")


def _descendant_ids(db: Session, task: models.Task) -> Set[uuid.UUID]:
    """Ids of every task below `task` in its project (cycle-safe)."""
    children: Dict[uuid.UUID, List[uuid.UUID]] = {}
    rows = (
        db.query(models.Task.id, models.Task.parent_task_id)
        .filter(models.Task.project_id == task.project_id)
        .all()
    )
    for task_id, parent_id in rows:
        if parent_id is not None:
            children.setdefault(parent_id, []).append(task_id)

    found: Set[uuid.UUID] = set()
    stack = list(children.get(task.id, []))
    while stack:
        current = stack.pop()
        if current in found or current == task.id:
            continue
        found.add(current)
        stack.extend(children.get(current, []))
    return found


def create_task(db: Session, task: schemas.TaskCreate) -> models.Task:
    _validate_parent(db, task.project_id, task.parent_task_id)
    db_task = models.Task(
        title=task.title,
        completed=False,
        due_date=task.due_date,
        project_id=task.project_id,
        parent_task_id=task.parent_task_id,
        expanded=False,
        sort_order=task.sort_order,
    )
    db.add(db_task)
    db.commit()
    db.refresh(db_task)
    return db_task


def update_task(db: Session, task_id: uuid.UUID, task: schemas.TaskUpdate):
    db_task = get_task(db, task_id)
    if not db_task:
        return None
    data = task.model_dump(exclude_unset=True)
    for key in _NON_NULLABLE_FIELDS:
        if key in data and data[key] is None:
            data.pop(key)
    if "parent_task_id" in data and data["parent_task_id"] is not None:
        new_parent = data["parent_task_id"]
        if new_parent == db_task.id or new_parent in _descendant_ids(db, db_task):
            raise ValueError("A task cannot be nested under itself or its subtasks")
        _validate_parent(db, db_task.project_id, new_parent)
    for key, value in data.items():
        setattr(db_task, key, value)
    db_task.updated_at = models.now_utc()
    db.commit()
    db.refresh(db_task)
    return db_task


def toggle_task_completion(db: Session, task_id: uuid.UUID):
    db_task = get_task(db, task_id)
    if not db_task:
        return None
    db_task.completed = not db_task.completed
    db_task.updated_at = models.now_utc()
    db.commit()
    db.refresh(db_task)
    return db_task


def set_task_expanded(db: Session, task_id: uuid.UUID, expanded: bool):
    db_task = get_task(db, task_id)
    if not db_task:
        return None
    db_task.expanded = expanded
    db_task.updated_at = models.now_utc()
    db.commit()
    db.refresh(db_task)
    return db_task


def delete_task(db: Session, task_id: uuid.UUID) -> bool:
    """Delete a task and every task nested below it."""
    db_task = get_task(db, task_id)
    if not db_task:
        return False
    doomed = _descendant_ids(db, db_task) | {db_task.id}
    try:
        db.query(models.Task).filter(models.Task.id.in_(doomed)).delete(synchronize_session=False)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return True
