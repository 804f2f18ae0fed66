"""Business logic services: task trees, board assembly, insights and seeding."""

from .hierarchy import (
    build_task_hierarchy,
    iter_tasks,
    find_task,
    update_tasks_recursively,
    set_expanded,
    toggle_expanded,
    preserve_expansion_state,
)
from .insights import (
    is_task_overdue,
    is_task_due_soon,
    days_until_due,
    get_task_stats,
    get_all_tasks_with_dates,
    get_calendar_overview,
)

__all__ = [
    "build_task_hierarchy",
    "iter_tasks",
    "find_task",
    "update_tasks_recursively",
    "set_expanded",
    "toggle_expanded",
    "preserve_expansion_state",
    "is_task_overdue",
    "is_task_due_soon",
    "days_until_due",
    "get_task_stats",
    "get_all_tasks_with_dates",
    "get_calendar_overview",
]
