"""
Shared error translation for API endpoints.

Store failures are rolled back, logged, and surfaced as a generic 500 with a
short "Failed to ..." message; repository invariant violations become 422.
"""
import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def store_failure(db: Session, action: str, **context) -> HTTPException:
    """Roll back, log the active exception, and build the 500 response."""
    try:
        db.rollback()
    except Exception:
        logger.warning("rollback_failed", extra={"action": action})
    logger.exception("store_failure: failed to %s", action, extra=context)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )


def invalid_request(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))


def not_found(entity: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")
