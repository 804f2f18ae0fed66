"""
Project repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional
from sqlalchemy.orm import Session

from core.db import models, schemas


def create_project(db: Session, project: schemas.ProjectCreate) -> models.Project:
    description = project.description or models.DEFAULT_PROJECT_DESCRIPTION
    db_project = models.Project(
        title=project.title,
        description=description,
        swimlane_id=project.swimlane_id,
    )
    db.add(db_project)
    db.commit()
    db.refresh(db_project)
    return db_project


def get_project(db: Session, project_id: uuid.UUID) -> Optional[models.Project]:
    return db.query(models.Project).filter(models.Project.id == project_id).first()


def get_projects_by_swimlane(db: Session, swimlane_id: uuid.UUID) -> List[models.Project]:
    return (
        db.query(models.Project)
        .filter(models.Project.swimlane_id == swimlane_id)
        .order_by(models.Project.created_at.asc())
        .all()
    )


def update_project(db: Session, project_id: uuid.UUID, project: schemas.ProjectUpdate):
    db_project = get_project(db, project_id)
    if db_project:
        data = project.model_dump(exclude_unset=True)
        for key in ("title", "swimlane_id"):
            if key in data and data[key] is None:
                data.pop(key)
        for key, value in data.items():
            setattr(db_project, key, value)
        db_project.updated_at = models.now_utc()
        db.commit()
        db.refresh(db_project)
    return db_project


def delete_project(db: Session, project_id: uuid.UUID) -> bool:
    """Delete a project together with all of its tasks."""
    db_project = get_project(db, project_id)
    if not db_project:
        return False
    try:
        db.delete(db_project)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return True
