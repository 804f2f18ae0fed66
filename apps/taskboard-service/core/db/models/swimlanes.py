import uuid
from sqlalchemy import Column, String, DateTime, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Swimlane(Base):
    __tablename__ = 'swimlanes'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    color = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    # Rows are removed by ON DELETE CASCADE; the ORM does not load children
    projects = relationship(
        "Project",
        back_populates="swimlane",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Project.created_at",
    )

    __table_args__ = (
        Index('idx_swimlanes_created_at', 'created_at'),
    )
