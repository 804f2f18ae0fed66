import pytest
from sqlalchemy.orm import Session

from core.db import crud, schemas

# Board fixtures


@pytest.fixture
def swimlane_factory(db_session: Session):
    def _create(title: str = "Personal", color: str = "bg-blue-500"):
        return crud.create_swimlane(db_session, schemas.SwimlaneCreate(title=title, color=color))
    return _create


@pytest.fixture
def project_factory(db_session: Session, swimlane_factory):
    def _create(title: str = "Health & Fitness", swimlane=None, description: str = None):
        swimlane = swimlane or swimlane_factory()
        return crud.create_project(
            db_session,
            schemas.ProjectCreate(title=title, description=description, swimlane_id=swimlane.id),
        )
    return _create


@pytest.fixture
def task_factory(db_session: Session):
    def _create(project, title: str = "Task", parent=None, **kwargs):
        return crud.create_task(
            db_session,
            schemas.TaskCreate(
                title=title,
                project_id=project.id,
                parent_task_id=parent.id if parent is not None else None,
                **kwargs,
            ),
        )
    return _create
