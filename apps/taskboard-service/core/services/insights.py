"""
Due-date classification, per-project statistics and the calendar listing.

All functions are pure over already-built task trees. ``today`` defaults to
the local calendar date and can be pinned by callers and tests.
"""
from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from core.db import schemas
from core.services.hierarchy import iter_tasks
from core.utils.config import get_settings


def _today(today: Optional[date]) -> date:
    return today or date.today()


def is_task_overdue(due_date: Optional[date], completed: bool, today: Optional[date] = None) -> bool:
    """A task is overdue when it is open and its due day has started."""
    if due_date is None or completed:
        return False
    return due_date <= _today(today)


def days_until_due(due_date: date, today: Optional[date] = None) -> int:
    return (due_date - _today(today)).days


def is_task_due_soon(
    due_date: Optional[date],
    completed: bool,
    today: Optional[date] = None,
    horizon_days: Optional[int] = None,
) -> bool:
    if due_date is None or completed:
        return False
    horizon = get_settings().due_soon_days if horizon_days is None else horizon_days
    remaining = days_until_due(due_date, today)
    return 0 <= remaining <= horizon


def get_task_stats(tasks: Iterable[schemas.TaskWithSubtasks], today: Optional[date] = None) -> schemas.TaskStats:
    """Count total, completed and overdue tasks, subtasks included."""
    stats = schemas.TaskStats()
    for task in iter_tasks(tasks):
        stats.total += 1
        if task.completed:
            stats.completed += 1
        if is_task_overdue(task.due_date, task.completed, today):
            stats.overdue += 1
    return stats


def get_all_tasks_with_dates(
    swimlanes: Iterable[schemas.SwimlaneWithProjects],
    today: Optional[date] = None,
    horizon_days: Optional[int] = None,
) -> List[schemas.CalendarTask]:
    """Every dated task on the board with its project and swimlane, soonest first."""
    entries: List[schemas.CalendarTask] = []
    for swimlane in swimlanes:
        for project in swimlane.projects:
            for task in iter_tasks(project.tasks):
                if task.due_date is None:
                    continue
                entries.append(
                    schemas.CalendarTask(
                        id=task.id,
                        title=task.title,
                        completed=task.completed,
                        due_date=task.due_date,
                        project_id=project.id,
                        project_title=project.title,
                        swimlane_title=swimlane.title,
                        swimlane_color=swimlane.color,
                        days_until_due=days_until_due(task.due_date, today),
                        overdue=is_task_overdue(task.due_date, task.completed, today),
                        due_soon=is_task_due_soon(task.due_date, task.completed, today, horizon_days),
                    )
                )
    # sorted() is stable, so same-day tasks keep board order
    return sorted(entries, key=lambda entry: entry.due_date)


def get_calendar_overview(entries: Iterable[schemas.CalendarTask]) -> schemas.CalendarOverview:
    overview = schemas.CalendarOverview()
    for entry in entries:
        overview.with_dates += 1
        if entry.overdue:
            overview.overdue += 1
        if entry.due_soon:
            overview.due_soon += 1
    return overview
