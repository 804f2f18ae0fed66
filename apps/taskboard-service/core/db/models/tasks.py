import uuid
from sqlalchemy import Column, String, Boolean, Integer, Date, DateTime, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Task(Base):
    __tablename__ = 'tasks'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(500), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    due_date = Column(Date, nullable=True)
    project_id = Column(UUID(as_uuid=True), ForeignKey('projects.id', ondelete='CASCADE'), nullable=False)
    # Hierarchy is rebuilt from flat rows at read time, so no ORM relationship here
    parent_task_id = Column(UUID(as_uuid=True), ForeignKey('tasks.id', ondelete='CASCADE'), nullable=True)
    expanded = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    project = relationship("Project", back_populates="tasks")

    __table_args__ = (
        Index('idx_tasks_project_id_sort', 'project_id', 'sort_order', 'created_at'),
        Index('idx_tasks_parent_task_id', 'parent_task_id'),
    )
