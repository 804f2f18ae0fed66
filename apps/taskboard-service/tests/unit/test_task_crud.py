import uuid
from datetime import date, datetime, timedelta, timezone

import pytest

from core.db import crud, models, schemas


@pytest.fixture
def project(db):
    lane = crud.create_swimlane(db, schemas.SwimlaneCreate(title="Personal", color="bg-blue-500"))
    return crud.create_project(db, schemas.ProjectCreate(title="Health & Fitness", swimlane_id=lane.id))


def _task(db, project, title, **kwargs):
    return crud.create_task(db, schemas.TaskCreate(title=title, project_id=project.id, **kwargs))


def test_create_task_defaults(db, project):
    task = _task(db, project, "Morning workout routine", due_date=date(2024, 12, 20))
    assert task.completed is False
    assert task.expanded is False
    assert task.sort_order == 0
    assert task.parent_task_id is None
    assert task.due_date == date(2024, 12, 20)


def test_tasks_ordered_by_sort_order_then_creation(db, project):
    _task(db, project, "late", sort_order=2)
    _task(db, project, "first-zero")
    _task(db, project, "second-zero")
    _task(db, project, "one", sort_order=1)

    titles = [t.title for t in crud.get_tasks_by_project(db, project.id)]

    assert titles == ["first-zero", "second-zero", "one", "late"]


def test_subtasks_listed_under_parent(db, project):
    parent = _task(db, project, "Parent")
    _task(db, project, "B", parent_task_id=parent.id, sort_order=1)
    _task(db, project, "A", parent_task_id=parent.id, sort_order=0)

    assert [t.title for t in crud.get_subtasks(db, parent.id)] == ["A", "B"]


def test_parent_must_exist(db, project):
    with pytest.raises(ValueError, match="Parent task not found"):
        _task(db, project, "Orphan", parent_task_id=uuid.uuid4())


def test_parent_must_belong_to_same_project(db, project):
    lane = crud.create_swimlane(db, schemas.SwimlaneCreate(title="Work", color="bg-green-500"))
    other = crud.create_project(db, schemas.ProjectCreate(title="Other", swimlane_id=lane.id))
    foreign_parent = _task(db, other, "Elsewhere")

    with pytest.raises(ValueError, match="same project"):
        _task(db, project, "Child", parent_task_id=foreign_parent.id)


def test_toggle_flips_completion_both_ways(db, project):
    task = _task(db, project, "Toggle me")
    assert crud.toggle_task_completion(db, task.id).completed is True
    assert crud.toggle_task_completion(db, task.id).completed is False
    assert crud.toggle_task_completion(db, uuid.uuid4()) is None


def test_update_task_partial_fields(db, project):
    task = _task(db, project, "Draft", due_date=date(2024, 12, 1))

    updated = crud.update_task(db, task.id, schemas.TaskUpdate(title="Final", completed=True))
    assert updated.title == "Final"
    assert updated.completed is True
    assert updated.due_date == date(2024, 12, 1)

    cleared = crud.update_task(db, task.id, schemas.TaskUpdate(due_date=None, title=None))
    assert cleared.due_date is None
    assert cleared.title == "Final"


def test_reparent_and_unparent(db, project):
    a = _task(db, project, "A")
    b = _task(db, project, "B")

    moved = crud.update_task(db, b.id, schemas.TaskUpdate(parent_task_id=a.id))
    assert moved.parent_task_id == a.id

    root_again = crud.update_task(db, b.id, schemas.TaskUpdate(parent_task_id=None))
    assert root_again.parent_task_id is None


def test_reparent_under_own_descendant_is_rejected(db, project):
    a = _task(db, project, "A")
    b = _task(db, project, "B", parent_task_id=a.id)
    c = _task(db, project, "C", parent_task_id=b.id)

    with pytest.raises(ValueError):
        crud.update_task(db, a.id, schemas.TaskUpdate(parent_task_id=c.id))
    with pytest.raises(ValueError):
        crud.update_task(db, a.id, schemas.TaskUpdate(parent_task_id=a.id))


def test_set_expanded(db, project):
    task = _task(db, project, "Fold")
    assert crud.set_task_expanded(db, task.id, True).expanded is True
    assert crud.set_task_expanded(db, task.id, False).expanded is False


def test_delete_task_removes_descendants_only(db, project):
    parent = _task(db, project, "Parent")
    child = _task(db, project, "Child", parent_task_id=parent.id)
    _task(db, project, "Grandchild", parent_task_id=child.id)
    sibling = _task(db, project, "Sibling")
    parent_id, sibling_id, project_id = parent.id, sibling.id, project.id

    assert crud.delete_task(db, parent_id) is True

    remaining = crud.get_tasks_by_project(db, project_id)
    assert [t.id for t in remaining] == [sibling_id]
    assert crud.get_task(db, parent_id) is None
    assert crud.delete_task(db, parent_id) is False


def test_delete_subtask_keeps_parent(db, project):
    parent = _task(db, project, "Parent")
    child = _task(db, project, "Child", parent_task_id=parent.id)
    parent_id, child_id = parent.id, child.id

    assert crud.delete_task(db, child_id) is True

    assert crud.get_task(db, parent_id) is not None
    assert crud.get_subtasks(db, parent_id) == []


LATER = datetime(2030, 1, 1, tzinfo=timezone.utc)


def _stamp(value):
    return value.replace(tzinfo=None)


def test_every_task_write_refreshes_updated_at(db, project, monkeypatch):
    task = _task(db, project, "Task")
    task_id = task.id
    monkeypatch.setattr(models, "now_utc", lambda: LATER)

    # Empty and unchanged payloads still count as an update
    assert _stamp(crud.update_task(db, task_id, schemas.TaskUpdate()).updated_at) == _stamp(LATER)

    later = LATER + timedelta(days=1)
    monkeypatch.setattr(models, "now_utc", lambda: later)
    assert _stamp(crud.update_task(db, task_id, schemas.TaskUpdate(title="Task")).updated_at) == _stamp(later)

    later = LATER + timedelta(days=2)
    monkeypatch.setattr(models, "now_utc", lambda: later)
    assert _stamp(crud.toggle_task_completion(db, task_id).updated_at) == _stamp(later)

    later = LATER + timedelta(days=3)
    monkeypatch.setattr(models, "now_utc", lambda: later)
    assert _stamp(crud.set_task_expanded(db, task_id, False).updated_at) == _stamp(later)
