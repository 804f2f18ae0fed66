"""
CRUD operations for ORM models.

Thin facade over the per-domain repositories so callers import a single
module for swimlane, project and task persistence.
"""
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from . import models, schemas
from .repositories import swimlanes as repo_swimlanes
from .repositories import projects as repo_projects
from .repositories import tasks as repo_tasks


# CRUD for Swimlane
def create_swimlane(db: Session, swimlane: schemas.SwimlaneCreate) -> models.Swimlane:
    return repo_swimlanes.create_swimlane(db, swimlane)


def get_swimlane(db: Session, swimlane_id: uuid.UUID) -> Optional[models.Swimlane]:
    return repo_swimlanes.get_swimlane(db, swimlane_id)


def get_swimlanes(db: Session) -> List[models.Swimlane]:
    return repo_swimlanes.get_swimlanes(db)


def count_swimlanes(db: Session) -> int:
    return repo_swimlanes.count_swimlanes(db)


def update_swimlane(db: Session, swimlane_id: uuid.UUID, swimlane: schemas.SwimlaneUpdate):
    return repo_swimlanes.update_swimlane(db, swimlane_id, swimlane)


def delete_swimlane(db: Session, swimlane_id: uuid.UUID) -> bool:
    return repo_swimlanes.delete_swimlane(db, swimlane_id)


# CRUD for Project
def create_project(db: Session, project: schemas.ProjectCreate) -> models.Project:
    return repo_projects.create_project(db, project)


def get_project(db: Session, project_id: uuid.UUID) -> Optional[models.Project]:
    return repo_projects.get_project(db, project_id)


def get_projects_by_swimlane(db: Session, swimlane_id: uuid.UUID) -> List[models.Project]:
    return repo_projects.get_projects_by_swimlane(db, swimlane_id)


def update_project(db: Session, project_id: uuid.UUID, project: schemas.ProjectUpdate):
    return repo_projects.update_project(db, project_id, project)


def delete_project(db: Session, project_id: uuid.UUID) -> bool:
    return repo_projects.delete_project(db, project_id)


# CRUD for Task
def create_task(db: Session, task: schemas.TaskCreate) -> models.Task:
    return repo_tasks.create_task(db, task)


def get_task(db: Session, task_id: uuid.UUID) -> Optional[models.Task]:
    return repo_tasks.get_task(db, task_id)


def get_tasks_by_project(db: Session, project_id: uuid.UUID) -> List[models.Task]:
    return repo_tasks.get_tasks_by_project(db, project_id)


def get_subtasks(db: Session, parent_task_id: uuid.UUID) -> List[models.Task]:
    return repo_tasks.get_subtasks(db, parent_task_id)


def update_task(db: Session, task_id: uuid.UUID, task: schemas.TaskUpdate):
    return repo_tasks.update_task(db, task_id, task)


def toggle_task_completion(db: Session, task_id: uuid.UUID):
    return repo_tasks.toggle_task_completion(db, task_id)


def set_task_expanded(db: Session, task_id: uuid.UUID, expanded: bool):
    return repo_tasks.set_task_expanded(db, task_id, expanded)


def delete_task(db: Session, task_id: uuid.UUID) -> bool:
    return repo_tasks.delete_task(db, task_id)
