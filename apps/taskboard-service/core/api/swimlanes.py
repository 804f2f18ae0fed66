"""
Swimlane API endpoints.

Create, rename/recolour and delete swimlanes, read the full board hierarchy,
and seed sample data through the `initialize` action.
"""
import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, Response, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.db import schemas, crud
from core.db.database import get_db
from core.api.errors import store_failure, not_found, invalid_request
from core.services.board import get_full_swimlane_data
from core.services.sample_data import initialize_sample_data
from core.utils.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/swimlanes", tags=["swimlanes"])

ACTION_INITIALIZE = "initialize"


@router.get("/", response_model=List[schemas.SwimlaneWithProjects])
def list_swimlanes_endpoint(db: Session = Depends(get_db)):
    """Full board: swimlanes with their projects and task trees."""
    return get_full_swimlane_data(db)


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_swimlane_endpoint(
    payload: schemas.SwimlaneAction,
    response: Response,
    db: Session = Depends(get_db),
):
    if payload.action == ACTION_INITIALIZE:
        if get_settings().sample_data_enabled:
            initialize_sample_data(db)
        else:
            logger.info("sample_data_disabled: initialize action ignored")
        response.status_code = status.HTTP_200_OK
        return get_full_swimlane_data(db)
    if payload.action:
        raise invalid_request(ValueError(f"Unknown action: {payload.action}"))

    try:
        swimlane_in = schemas.SwimlaneCreate(title=payload.title or "", color=payload.color or "")
    except ValidationError:
        raise invalid_request(ValueError("Title and color are required"))
    try:
        created = crud.create_swimlane(db, swimlane_in)
    except SQLAlchemyError:
        raise store_failure(db, "create swimlane")
    logger.info("swimlane_created", extra={"swimlane_id": str(created.id)})
    return schemas.Swimlane.model_validate(created)


@router.get("/{swimlane_id}", response_model=schemas.Swimlane)
def get_swimlane_endpoint(swimlane_id: uuid.UUID, db: Session = Depends(get_db)):
    swimlane = crud.get_swimlane(db, swimlane_id)
    if not swimlane:
        raise not_found("Swimlane")
    return swimlane


@router.put("/{swimlane_id}", response_model=schemas.Swimlane)
def update_swimlane_endpoint(
    swimlane_id: uuid.UUID,
    swimlane: schemas.SwimlaneUpdate,
    db: Session = Depends(get_db),
):
    try:
        updated = crud.update_swimlane(db, swimlane_id, swimlane)
    except SQLAlchemyError:
        raise store_failure(db, "update swimlane", swimlane_id=str(swimlane_id))
    if not updated:
        raise not_found("Swimlane")
    return updated


@router.delete("/{swimlane_id}")
def delete_swimlane_endpoint(swimlane_id: uuid.UUID, db: Session = Depends(get_db)):
    try:
        deleted = crud.delete_swimlane(db, swimlane_id)
    except SQLAlchemyError:
        raise store_failure(db, "delete swimlane", swimlane_id=str(swimlane_id))
    if not deleted:
        raise not_found("Swimlane")
    logger.info("swimlane_deleted", extra={"swimlane_id": str(swimlane_id)})
    return {"success": True}
