"""HTTP client for the taskboard REST API."""
from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Any, Dict, List, Optional

import requests
from fastapi.encoders import jsonable_encoder
from pydantic import TypeAdapter

from core.db import schemas
from core.utils.config import get_settings

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = (3, 30)

_BOARD_ADAPTER = TypeAdapter(List[schemas.SwimlaneWithProjects])
_CALENDAR_ADAPTER = TypeAdapter(List[schemas.CalendarTask])


class TaskboardClientError(RuntimeError):
    """Raised when the API is unreachable or answers with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class TaskboardClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout=_DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = (base_url or get_settings().api_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method,
                url,
                json=jsonable_encoder(json) if json is not None else None,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("taskboard_request_failed: %s %s (%s)", method, url, exc)
            raise TaskboardClientError(f"{method} {path} failed: {exc}") from exc

        if not response.ok:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            logger.warning(
                "taskboard_request_rejected: %s %s -> %s", method, url, response.status_code
            )
            raise TaskboardClientError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )
        return response.json()

    # Board
    def get_board(self) -> List[schemas.SwimlaneWithProjects]:
        return _BOARD_ADAPTER.validate_python(self._request("GET", "/swimlanes/"))

    def initialize(self) -> List[schemas.SwimlaneWithProjects]:
        return _BOARD_ADAPTER.validate_python(
            self._request("POST", "/swimlanes/", json={"action": "initialize"})
        )

    # Swimlanes
    def create_swimlane(self, title: str, color: str) -> schemas.Swimlane:
        data = self._request("POST", "/swimlanes/", json={"title": title, "color": color})
        return schemas.Swimlane.model_validate(data)

    def update_swimlane(self, swimlane_id: uuid.UUID, **fields: Any) -> schemas.Swimlane:
        data = self._request("PUT", f"/swimlanes/{swimlane_id}", json=fields)
        return schemas.Swimlane.model_validate(data)

    def delete_swimlane(self, swimlane_id: uuid.UUID) -> bool:
        return bool(self._request("DELETE", f"/swimlanes/{swimlane_id}").get("success"))

    # Projects
    def get_project(self, project_id: uuid.UUID) -> schemas.ProjectDetail:
        return schemas.ProjectDetail.model_validate(self._request("GET", f"/projects/{project_id}"))

    def create_project(
        self, title: str, swimlane_id: uuid.UUID, description: Optional[str] = None
    ) -> schemas.Project:
        payload: Dict[str, Any] = {"title": title, "swimlane_id": swimlane_id}
        if description is not None:
            payload["description"] = description
        return schemas.Project.model_validate(self._request("POST", "/projects/", json=payload))

    def update_project(self, project_id: uuid.UUID, **fields: Any) -> schemas.Project:
        data = self._request("PUT", f"/projects/{project_id}", json=fields)
        return schemas.Project.model_validate(data)

    def delete_project(self, project_id: uuid.UUID) -> bool:
        return bool(self._request("DELETE", f"/projects/{project_id}").get("success"))

    # Tasks
    def create_task(
        self,
        title: str,
        project_id: uuid.UUID,
        parent_task_id: Optional[uuid.UUID] = None,
        due_date: Optional[date] = None,
    ) -> schemas.Task:
        payload: Dict[str, Any] = {"title": title, "project_id": project_id}
        if parent_task_id is not None:
            payload["parent_task_id"] = parent_task_id
        if due_date is not None:
            payload["due_date"] = due_date
        return schemas.Task.model_validate(self._request("POST", "/tasks/", json=payload))

    def update_task(self, task_id: uuid.UUID, **fields: Any) -> schemas.Task:
        return schemas.Task.model_validate(self._request("PUT", f"/tasks/{task_id}", json=fields))

    def toggle_task(self, task_id: uuid.UUID) -> schemas.Task:
        return schemas.Task.model_validate(self._request("POST", f"/tasks/{task_id}/toggle"))

    def set_task_expanded(self, task_id: uuid.UUID, expanded: bool) -> schemas.Task:
        data = self._request("POST", f"/tasks/{task_id}/expand", json={"expanded": expanded})
        return schemas.Task.model_validate(data)

    def delete_task(self, task_id: uuid.UUID) -> bool:
        return bool(self._request("DELETE", f"/tasks/{task_id}").get("success"))

    # Calendar
    def calendar_tasks(self) -> List[schemas.CalendarTask]:
        return _CALENDAR_ADAPTER.validate_python(self._request("GET", "/calendar/tasks"))

    def calendar_overview(self) -> schemas.CalendarOverview:
        return schemas.CalendarOverview.model_validate(self._request("GET", "/calendar/overview"))
