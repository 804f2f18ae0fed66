"""
Swimlane repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional
from sqlalchemy.orm import Session

from core.db import models, schemas


def create_swimlane(db: Session, swimlane: schemas.SwimlaneCreate) -> models.Swimlane:
    db_swimlane = models.Swimlane(title=swimlane.title, color=swimlane.color)
    db.add(db_swimlane)
    db.commit()
    db.refresh(db_swimlane)
    return db_swimlane


def get_swimlane(db: Session, swimlane_id: uuid.UUID) -> Optional[models.Swimlane]:
    return db.query(models.Swimlane).filter(models.Swimlane.id == swimlane_id).first()


def get_swimlanes(db: Session) -> List[models.Swimlane]:
    return db.query(models.Swimlane).order_by(models.Swimlane.created_at.asc()).all()


def count_swimlanes(db: Session) -> int:
    return db.query(models.Swimlane).count()


def update_swimlane(db: Session, swimlane_id: uuid.UUID, swimlane: schemas.SwimlaneUpdate):
    db_swimlane = get_swimlane(db, swimlane_id)
    if db_swimlane:
        for key, value in swimlane.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            setattr(db_swimlane, key, value)
        db_swimlane.updated_at = models.now_utc()
        db.commit()
        db.refresh(db_swimlane)
    return db_swimlane


def delete_swimlane(db: Session, swimlane_id: uuid.UUID) -> bool:
    """Delete a swimlane; its projects and their tasks go with it."""
    db_swimlane = get_swimlane(db, swimlane_id)
    if not db_swimlane:
        return False
    try:
        db.delete(db_swimlane)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return True
