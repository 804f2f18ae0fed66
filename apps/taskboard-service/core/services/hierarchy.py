"""
Task tree assembly and tree-walk helpers.

Tasks are persisted as flat rows keyed by ``id`` and ``parent_task_id``.
``build_task_hierarchy`` turns those rows into nested ``TaskWithSubtasks``
nodes; the remaining helpers walk or rewrite such trees without mutating
their input.
"""
from __future__ import annotations

import uuid
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from core.db import schemas

TaskNode = schemas.TaskWithSubtasks


def _closes_cycle(links: Dict[uuid.UUID, uuid.UUID], child_id: uuid.UUID, parent_id: uuid.UUID) -> bool:
    """Return True if linking child -> parent would loop back to child."""
    current: Optional[uuid.UUID] = parent_id
    steps = 0
    while current is not None and steps <= len(links):
        if current == child_id:
            return True
        current = links.get(current)
        steps += 1
    return False


def build_task_hierarchy(rows: Iterable) -> List[TaskNode]:
    """Assemble flat task rows into a forest of root tasks.

    Rows are expected in display order (sort order, then creation time); that
    order is kept for roots and within every ``subtasks`` list. A row whose
    parent id does not resolve among ``rows`` becomes a root, as does a row
    whose link would close a parent cycle.
    """
    ordered: List[TaskNode] = []
    nodes: Dict[uuid.UUID, TaskNode] = {}
    for row in rows:
        node = TaskNode.model_validate(row, from_attributes=True)
        node.subtasks = []
        ordered.append(node)
        nodes[node.id] = node

    roots: List[TaskNode] = []
    links: Dict[uuid.UUID, uuid.UUID] = {}
    for node in ordered:
        parent_id = node.parent_task_id
        if (
            parent_id is not None
            and parent_id in nodes
            and not _closes_cycle(links, node.id, parent_id)
        ):
            nodes[parent_id].subtasks.append(node)
            links[node.id] = parent_id
        else:
            roots.append(node)
    return roots


def iter_tasks(tasks: Iterable[TaskNode]) -> Iterator[TaskNode]:
    """Yield every task in the tree, depth first, parents before children."""
    for task in tasks:
        yield task
        if task.subtasks:
            yield from iter_tasks(task.subtasks)


def find_task(tasks: Iterable[TaskNode], task_id: uuid.UUID) -> Optional[TaskNode]:
    for task in iter_tasks(tasks):
        if task.id == task_id:
            return task
    return None


def update_tasks_recursively(
    tasks: List[TaskNode],
    target_id: uuid.UUID,
    update_fn: Callable[[TaskNode], TaskNode],
) -> List[TaskNode]:
    """Return a copy of ``tasks`` with ``update_fn`` applied to ``target_id``."""
    updated: List[TaskNode] = []
    for task in tasks:
        if task.id == target_id:
            updated.append(update_fn(task))
        elif task.subtasks:
            updated.append(
                task.model_copy(update={
                    "subtasks": update_tasks_recursively(task.subtasks, target_id, update_fn)
                })
            )
        else:
            updated.append(task)
    return updated


def set_expanded(tasks: List[TaskNode], target_id: uuid.UUID, expanded: bool) -> List[TaskNode]:
    return update_tasks_recursively(
        tasks, target_id, lambda task: task.model_copy(update={"expanded": expanded})
    )


def toggle_expanded(tasks: List[TaskNode], target_id: uuid.UUID) -> List[TaskNode]:
    return update_tasks_recursively(
        tasks, target_id, lambda task: task.model_copy(update={"expanded": not task.expanded})
    )


def preserve_expansion_state(new_tasks: List[TaskNode], old_tasks: List[TaskNode]) -> List[TaskNode]:
    """Carry expand/collapse flags from a previous tree onto a refreshed one.

    Tasks unknown to ``old_tasks`` come back collapsed.
    """
    previous: Dict[uuid.UUID, bool] = {task.id: task.expanded for task in iter_tasks(old_tasks)}

    def _apply(tasks: List[TaskNode]) -> List[TaskNode]:
        return [
            task.model_copy(update={
                "expanded": previous.get(task.id, False),
                "subtasks": _apply(task.subtasks) if task.subtasks else task.subtasks,
            })
            for task in tasks
        ]

    return _apply(new_tasks)
