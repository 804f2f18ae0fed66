"""
Client-side board state.

Keeps the last fetched board and the project open in the notepad. Every
mutation goes through the API and is followed by a full re-fetch; the open
project's expand/collapse flags survive those refreshes.
"""
from __future__ import annotations

import logging
import random
import uuid
from datetime import date
from typing import List, Optional

from core.client.api_client import TaskboardClient, TaskboardClientError
from core.db import schemas
from core.db.models.projects import DEFAULT_PROJECT_DESCRIPTION
from core.services.hierarchy import (
    preserve_expansion_state,
    set_expanded,
    toggle_expanded,
    find_task,
)
from core.services.insights import get_task_stats, get_all_tasks_with_dates

logger = logging.getLogger(__name__)

NEW_SWIMLANE_COLORS = ("bg-red-500", "bg-yellow-500", "bg-indigo-500", "bg-pink-500", "bg-teal-500")
NEW_PROJECT_TITLE = "New Project"


class BoardView:
    def __init__(self, client: TaskboardClient) -> None:
        self.client = client
        self.swimlanes: List[schemas.SwimlaneWithProjects] = []
        self.selected_project: Optional[schemas.ProjectWithTasks] = None
        self.last_error: Optional[str] = None

    def _fail(self, action: str, exc: TaskboardClientError) -> None:
        logger.error("board_action_failed: %s (%s)", action, exc)
        self.last_error = f"Failed to {action}"

    def _find_project(self, project_id: uuid.UUID) -> Optional[schemas.ProjectWithTasks]:
        for swimlane in self.swimlanes:
            for project in swimlane.projects:
                if project.id == project_id:
                    return project
        return None

    def load(self, initialize: bool = False) -> bool:
        """Fetch the board; seed sample data first when asked and empty."""
        try:
            self.swimlanes = self.client.get_board()
            if initialize and not self.swimlanes:
                self.swimlanes = self.client.initialize()
        except TaskboardClientError as exc:
            self._fail("load board", exc)
            return False
        self.last_error = None
        return True

    def refresh(self, expand_task_id: Optional[uuid.UUID] = None) -> bool:
        """Re-fetch the board and rebind the open project, keeping expansion state."""
        previous = self.selected_project
        if not self.load():
            return False
        if previous is None:
            return True
        updated = self._find_project(previous.id)
        if updated is None:
            self.selected_project = None
            return True
        tasks = preserve_expansion_state(updated.tasks, previous.tasks)
        if expand_task_id is not None:
            tasks = set_expanded(tasks, expand_task_id, True)
        self.selected_project = updated.model_copy(update={"tasks": tasks})
        self._replace_project(self.selected_project)
        return True

    def _replace_project(self, project: schemas.ProjectWithTasks) -> None:
        self.swimlanes = [
            swimlane.model_copy(update={
                "projects": [project if p.id == project.id else p for p in swimlane.projects]
            })
            for swimlane in self.swimlanes
        ]

    def open_project(self, project_id: uuid.UUID) -> Optional[schemas.ProjectWithTasks]:
        self.selected_project = self._find_project(project_id)
        return self.selected_project

    def close_project(self) -> None:
        self.selected_project = None

    @property
    def stats(self) -> schemas.TaskStats:
        if self.selected_project is None:
            return schemas.TaskStats()
        return get_task_stats(self.selected_project.tasks)

    def calendar(self, today: Optional[date] = None) -> List[schemas.CalendarTask]:
        return get_all_tasks_with_dates(self.swimlanes, today=today)

    # Mutations
    def toggle_task_expanded(self, task_id: uuid.UUID) -> None:
        """Flip a task's expand/collapse flag locally, on the board and in the open project."""
        self.swimlanes = [
            swimlane.model_copy(update={
                "projects": [
                    project.model_copy(update={"tasks": toggle_expanded(project.tasks, task_id)})
                    for project in swimlane.projects
                ]
            })
            for swimlane in self.swimlanes
        ]
        if self.selected_project is None:
            return
        tasks = toggle_expanded(self.selected_project.tasks, task_id)
        self.selected_project = self.selected_project.model_copy(update={"tasks": tasks})

    def add_swimlane(self, title: str, color: Optional[str] = None) -> Optional[schemas.Swimlane]:
        title = title.strip()
        if not title:
            return None
        try:
            created = self.client.create_swimlane(title, color or random.choice(NEW_SWIMLANE_COLORS))
        except TaskboardClientError as exc:
            self._fail("create swimlane", exc)
            return None
        self.refresh()
        return created

    def delete_swimlane(self, swimlane_id: uuid.UUID) -> bool:
        try:
            self.client.delete_swimlane(swimlane_id)
        except TaskboardClientError as exc:
            self._fail("delete swimlane", exc)
            return False
        # An open project inside the lane is gone after the refresh
        self.refresh()
        return True

    def add_project(
        self,
        swimlane_id: uuid.UUID,
        title: str = NEW_PROJECT_TITLE,
        description: str = DEFAULT_PROJECT_DESCRIPTION,
    ) -> Optional[schemas.Project]:
        try:
            created = self.client.create_project(title, swimlane_id, description=description)
        except TaskboardClientError as exc:
            self._fail("create project", exc)
            return None
        self.refresh()
        return created

    def delete_project(self, project_id: uuid.UUID) -> bool:
        try:
            self.client.delete_project(project_id)
        except TaskboardClientError as exc:
            self._fail("delete project", exc)
            return False
        if self.selected_project is not None and self.selected_project.id == project_id:
            self.close_project()
        self.refresh()
        return True

    def set_task_due_date(self, task_id: uuid.UUID, due_date: Optional[date]) -> Optional[schemas.Task]:
        """Set or, with ``None``, clear a task's due date."""
        try:
            task = self.client.update_task(task_id, due_date=due_date)
        except TaskboardClientError as exc:
            self._fail("update due date", exc)
            return None
        self.refresh()
        return task

    def add_task(
        self,
        title: str,
        due_date: Optional[date] = None,
        parent_task_id: Optional[uuid.UUID] = None,
    ) -> Optional[schemas.Task]:
        if self.selected_project is None:
            return None
        try:
            created = self.client.create_task(
                title,
                self.selected_project.id,
                parent_task_id=parent_task_id,
                due_date=due_date,
            )
        except TaskboardClientError as exc:
            self._fail("create task", exc)
            return None
        # Show the new subtask under an expanded parent
        self.refresh(expand_task_id=parent_task_id)
        return created

    def toggle_task_completion(self, task_id: uuid.UUID) -> Optional[schemas.Task]:
        try:
            task = self.client.toggle_task(task_id)
        except TaskboardClientError as exc:
            self._fail("update task", exc)
            return None
        self.refresh()
        return task

    def update_task(self, task_id: uuid.UUID, **fields) -> Optional[schemas.Task]:
        try:
            task = self.client.update_task(task_id, **fields)
        except TaskboardClientError as exc:
            self._fail("update task", exc)
            return None
        self.refresh()
        return task

    def delete_task(self, task_id: uuid.UUID) -> bool:
        try:
            self.client.delete_task(task_id)
        except TaskboardClientError as exc:
            self._fail("delete task", exc)
            return False
        self.refresh()
        return True

    def save_project(self, title: Optional[str] = None, description: Optional[str] = None) -> bool:
        if self.selected_project is None:
            return False
        fields = {}
        if title is not None:
            fields["title"] = title
        if description is not None:
            fields["description"] = description
        try:
            self.client.update_project(self.selected_project.id, **fields)
        except TaskboardClientError as exc:
            self._fail("update project", exc)
            return False
        self.refresh()
        return True

    def is_expanded(self, task_id: uuid.UUID) -> bool:
        if self.selected_project is None:
            return False
        task = find_task(self.selected_project.tasks, task_id)
        return bool(task and task.expanded)
