#!/usr/bin/env python3
"""
Taskboard command line client.

Talks to a running taskboard service (TASKBOARD_API_URL, default
http://localhost:8000) and prints the board, a project notepad or the
calendar.

Usage:
  python scripts/taskboard_cli.py board [--init]
  python scripts/taskboard_cli.py project <project_id>
  python scripts/taskboard_cli.py calendar
  python scripts/taskboard_cli.py add-task <project_id> <title> [--parent ID] [--due YYYY-MM-DD]
  python scripts/taskboard_cli.py toggle <task_id>
  python scripts/taskboard_cli.py due <task_id> <YYYY-MM-DD|none>
  python scripts/taskboard_cli.py add-swimlane <title>
  python scripts/taskboard_cli.py add-project <swimlane_id> [--title TITLE]
  python scripts/taskboard_cli.py delete-project <project_id>
"""
from __future__ import annotations

import argparse
import logging
import sys
import uuid
from datetime import date
from typing import List, Optional

from core.client import BoardView, TaskboardClient, TaskboardClientError
from core.db import schemas
from core.services.insights import get_calendar_overview, get_task_stats, is_task_overdue

logger = logging.getLogger("core.scripts.taskboard_cli")


def _optional_date(value: str) -> Optional[date]:
    if value.strip().lower() == "none":
        return None
    return date.fromisoformat(value)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Taskboard command line client")
    parser.add_argument("--api-url", default=None, help="Service base URL (default: TASKBOARD_API_URL)")
    sub = parser.add_subparsers(dest="command", required=True)

    board = sub.add_parser("board", help="Show every swimlane with its projects")
    board.add_argument("--init", action="store_true", help="Seed sample data when the board is empty")

    project = sub.add_parser("project", help="Show one project's task tree")
    project.add_argument("project_id", type=uuid.UUID)

    sub.add_parser("calendar", help="List dated tasks, soonest first")

    add = sub.add_parser("add-task", help="Create a task or subtask")
    add.add_argument("project_id", type=uuid.UUID)
    add.add_argument("title")
    add.add_argument("--parent", type=uuid.UUID, default=None)
    add.add_argument("--due", type=date.fromisoformat, default=None)

    toggle = sub.add_parser("toggle", help="Complete or reopen a task")
    toggle.add_argument("task_id", type=uuid.UUID)

    due = sub.add_parser("due", help="Set or clear a task due date")
    due.add_argument("task_id", type=uuid.UUID)
    due.add_argument("due_date", type=_optional_date, help="YYYY-MM-DD, or \"none\" to clear")

    lane = sub.add_parser("add-swimlane", help="Create a swimlane with a random colour")
    lane.add_argument("title")

    add_project = sub.add_parser("add-project", help="Create a project in a swimlane")
    add_project.add_argument("swimlane_id", type=uuid.UUID)
    add_project.add_argument("--title", default="New Project")

    delete_project = sub.add_parser("delete-project", help="Delete a project and its tasks")
    delete_project.add_argument("project_id", type=uuid.UUID)
    return parser.parse_args(argv)


def render_tasks(tasks: List[schemas.TaskWithSubtasks], depth: int = 0, today: Optional[date] = None) -> List[str]:
    lines: List[str] = []
    for task in tasks:
        mark = "x" if task.completed else " "
        line = f"{'  ' * depth}[{mark}] {task.title}"
        if task.due_date:
            line += f" (due {task.due_date.isoformat()})"
            if is_task_overdue(task.due_date, task.completed, today):
                line += " OVERDUE"
        if task.subtasks:
            done = sum(1 for st in task.subtasks if st.completed)
            line += f" {done}/{len(task.subtasks)} subtasks completed"
        lines.append(line)
        lines.extend(render_tasks(task.subtasks, depth + 1, today))
    return lines


def render_board(swimlanes: List[schemas.SwimlaneWithProjects], today: Optional[date] = None) -> List[str]:
    lines: List[str] = []
    for swimlane in swimlanes:
        lines.append(f"== {swimlane.title} [{swimlane.color}]")
        if not swimlane.projects:
            lines.append("   (no projects)")
        for project in swimlane.projects:
            stats = get_task_stats(project.tasks, today)
            summary = f"{stats.total} tasks, {stats.completed} done"
            if stats.overdue:
                summary += f", {stats.overdue} overdue"
            lines.append(f"   - {project.title}: {summary}  <{project.id}>")
    return lines


def render_calendar(entries: List[schemas.CalendarTask]) -> List[str]:
    if not entries:
        return ["No tasks with due dates yet. Set due dates to see them here."]
    lines: List[str] = []
    for entry in entries:
        flag = "Overdue" if entry.overdue else ("Due soon" if entry.due_soon else "")
        lines.append(
            f"{entry.due_date.strftime('%b %d')}  {entry.title}  "
            f"({entry.swimlane_title} / {entry.project_title}) {flag}".rstrip()
        )
    overview = get_calendar_overview(entries)
    lines.append(
        f"-- {overview.with_dates} with dates, {overview.overdue} overdue, {overview.due_soon} due soon"
    )
    return lines


def run(args: argparse.Namespace, client: Optional[TaskboardClient] = None) -> int:
    client = client or TaskboardClient(base_url=args.api_url)
    view = BoardView(client)
    try:
        if args.command == "board":
            if not view.load(initialize=args.init):
                print(view.last_error, file=sys.stderr)
                return 1
            print("\n".join(render_board(view.swimlanes)))
        elif args.command == "project":
            detail = client.get_project(args.project_id)
            print(f"# {detail.title}")
            if detail.description:
                print(detail.description)
            print("\n".join(render_tasks(detail.tasks)) or "(no tasks)")
            print(
                f"-- {detail.stats.total} total, {detail.stats.completed} completed, {detail.stats.overdue} overdue"
            )
        elif args.command == "calendar":
            print("\n".join(render_calendar(client.calendar_tasks())))
        elif args.command == "add-task":
            task = client.create_task(args.title, args.project_id, parent_task_id=args.parent, due_date=args.due)
            print(f"Created task {task.id}")
        elif args.command == "toggle":
            task = client.toggle_task(args.task_id)
            print(f"{task.title}: {'completed' if task.completed else 'open'}")
        elif args.command == "due":
            task = view.set_task_due_date(args.task_id, args.due_date)
            if task is None:
                print(view.last_error, file=sys.stderr)
                return 1
            print(f"{task.title}: due {task.due_date.isoformat() if task.due_date else 'date removed'}")
        elif args.command == "add-swimlane":
            swimlane = view.add_swimlane(args.title)
            if swimlane is None:
                print(view.last_error or "Swimlane title is required", file=sys.stderr)
                return 1
            print(f"Created swimlane {swimlane.id} [{swimlane.color}]")
        elif args.command == "add-project":
            project = view.add_project(args.swimlane_id, title=args.title)
            if project is None:
                print(view.last_error, file=sys.stderr)
                return 1
            print(f"Created project {project.id}")
        elif args.command == "delete-project":
            if not view.delete_project(args.project_id):
                print(view.last_error, file=sys.stderr)
                return 1
            print(f"Deleted project {args.project_id}")
    except TaskboardClientError as exc:
        logger.error("cli_command_failed", extra={"command": args.command})
        print(f"Error: {exc} {exc.detail or ''}".rstrip(), file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.WARNING)
    return run(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
