import uuid
from datetime import date

from core.client import BoardView, TaskboardClientError
from core.client.board_view import NEW_SWIMLANE_COLORS
from core.db import schemas

LANE_ID = uuid.uuid4()
PROJECT_ID = uuid.uuid4()
PARENT_ID = uuid.uuid4()
CHILD_ID = uuid.uuid4()


class FakeClient:
    """In-memory stand-in that always serves collapsed tasks, like a fresh fetch."""

    def __init__(self, seeded=True):
        self.seeded = seeded
        self.swimlanes = {LANE_ID: {"title": "Personal", "color": "bg-blue-500"}}
        self.projects = {PROJECT_ID: {"title": "Health", "description": None, "swimlane_id": LANE_ID}}
        self.tasks = {
            PARENT_ID: {
                "title": "Workout", "parent": None, "completed": False,
                "due_date": date(2024, 12, 20), "project_id": PROJECT_ID,
            },
            CHILD_ID: {
                "title": "Cardio", "parent": PARENT_ID, "completed": False,
                "due_date": None, "project_id": PROJECT_ID,
            },
        }
        self.fail_on = set()
        self.calls = []

    def _check(self, name):
        self.calls.append(name)
        if name in self.fail_on:
            raise TaskboardClientError(f"{name} failed", status_code=500)

    def _task(self, task_id):
        row = self.tasks[task_id]
        return schemas.TaskWithSubtasks(
            id=task_id,
            title=row["title"],
            project_id=row["project_id"],
            parent_task_id=row["parent"],
            completed=row["completed"],
            due_date=row["due_date"],
        )

    def _tree(self, project_id):
        nodes = {tid: self._task(tid) for tid, row in self.tasks.items() if row["project_id"] == project_id}
        roots = []
        for node in nodes.values():
            if node.parent_task_id in nodes:
                nodes[node.parent_task_id].subtasks.append(node)
            else:
                roots.append(node)
        return roots

    def get_board(self):
        self._check("get_board")
        if not self.seeded:
            return []
        board = []
        for lane_id, lane in self.swimlanes.items():
            projects = [
                schemas.ProjectWithTasks(
                    id=project_id,
                    title=row["title"],
                    description=row["description"],
                    swimlane_id=lane_id,
                    tasks=self._tree(project_id),
                )
                for project_id, row in self.projects.items()
                if row["swimlane_id"] == lane_id
            ]
            board.append(schemas.SwimlaneWithProjects(id=lane_id, projects=projects, **lane))
        return board

    def initialize(self):
        self.seeded = True
        return self.get_board()

    def create_swimlane(self, title, color):
        self._check("create_swimlane")
        lane_id = uuid.uuid4()
        self.swimlanes[lane_id] = {"title": title, "color": color}
        return schemas.Swimlane(id=lane_id, title=title, color=color)

    def delete_swimlane(self, swimlane_id):
        self._check("delete_swimlane")
        self.swimlanes.pop(swimlane_id)
        for project_id in [pid for pid, row in self.projects.items() if row["swimlane_id"] == swimlane_id]:
            self._drop_project(project_id)
        return True

    def create_project(self, title, swimlane_id, description=None):
        self._check("create_project")
        project_id = uuid.uuid4()
        self.projects[project_id] = {"title": title, "description": description, "swimlane_id": swimlane_id}
        return schemas.Project(id=project_id, title=title, description=description, swimlane_id=swimlane_id)

    def _drop_project(self, project_id):
        self.projects.pop(project_id)
        for task_id in [tid for tid, row in self.tasks.items() if row["project_id"] == project_id]:
            self.tasks.pop(task_id)

    def delete_project(self, project_id):
        self._check("delete_project")
        self._drop_project(project_id)
        return True

    def update_project(self, project_id, **fields):
        self._check("update_project")
        self.projects[project_id].update(fields)
        return fields

    def create_task(self, title, project_id, parent_task_id=None, due_date=None):
        self._check("create_task")
        task_id = uuid.uuid4()
        self.tasks[task_id] = {
            "title": title, "parent": parent_task_id, "completed": False,
            "due_date": due_date, "project_id": project_id,
        }
        return self._task(task_id)

    def toggle_task(self, task_id):
        self._check("toggle_task")
        self.tasks[task_id]["completed"] = not self.tasks[task_id]["completed"]
        return self._task(task_id)

    def update_task(self, task_id, **fields):
        self._check("update_task")
        self.tasks[task_id].update(fields)
        return self._task(task_id)

    def delete_task(self, task_id):
        self._check("delete_task")
        doomed = {task_id} | {tid for tid, row in self.tasks.items() if row["parent"] == task_id}
        for tid in doomed:
            self.tasks.pop(tid)
        return True


def _opened_view(client=None):
    view = BoardView(client or FakeClient())
    assert view.load() is True
    view.open_project(PROJECT_ID)
    return view


def _board_project(view, project_id=PROJECT_ID):
    for swimlane in view.swimlanes:
        for project in swimlane.projects:
            if project.id == project_id:
                return project
    return None


def test_load_and_open_project():
    view = _opened_view()

    assert view.selected_project.title == "Health"
    assert (view.stats.total, view.stats.completed) == (2, 0)
    assert view.last_error is None


def test_load_initializes_empty_board_on_request():
    client = FakeClient(seeded=False)
    view = BoardView(client)

    view.load(initialize=True)

    assert client.seeded is True
    assert [s.title for s in view.swimlanes] == ["Personal"]


def test_expansion_survives_refresh_after_mutation():
    view = _opened_view()
    view.toggle_task_expanded(PARENT_ID)
    assert view.is_expanded(PARENT_ID) is True

    view.toggle_task_completion(CHILD_ID)

    assert view.is_expanded(PARENT_ID) is True
    child = view.selected_project.tasks[0].subtasks[0]
    assert child.completed is True
    assert _board_project(view).tasks[0].expanded is True


def test_toggle_expansion_updates_board_and_open_project():
    view = _opened_view()

    view.toggle_task_expanded(PARENT_ID)

    assert view.selected_project.tasks[0].expanded is True
    assert _board_project(view).tasks[0].expanded is True

    view.close_project()
    view.toggle_task_expanded(PARENT_ID)

    assert _board_project(view).tasks[0].expanded is False


def test_adding_subtask_expands_parent():
    view = _opened_view()
    assert view.is_expanded(PARENT_ID) is False

    created = view.add_task("Stretch", parent_task_id=PARENT_ID)

    assert created is not None
    assert view.is_expanded(PARENT_ID) is True
    assert [t.title for t in view.selected_project.tasks[0].subtasks] == ["Cardio", "Stretch"]
    assert view.is_expanded(created.id) is False


def test_delete_task_refreshes_tree():
    view = _opened_view()

    assert view.delete_task(PARENT_ID) is True

    assert view.selected_project is not None
    assert view.selected_project.tasks == []
    assert _board_project(view).tasks == []


def test_set_and_clear_due_date():
    view = _opened_view()

    assert view.set_task_due_date(CHILD_ID, date(2024, 12, 24)) is not None
    assert view.selected_project.tasks[0].subtasks[0].due_date == date(2024, 12, 24)

    assert view.set_task_due_date(CHILD_ID, None) is not None
    assert view.selected_project.tasks[0].subtasks[0].due_date is None


def test_set_due_date_failure():
    client = FakeClient()
    client.fail_on.add("update_task")
    view = _opened_view(client)

    assert view.set_task_due_date(CHILD_ID, date(2024, 12, 24)) is None
    assert view.last_error == "Failed to update due date"


def test_add_swimlane_picks_a_colour_and_refreshes():
    view = _opened_view()

    created = view.add_swimlane("  Side projects ")

    assert created.title == "Side projects"
    assert created.color in NEW_SWIMLANE_COLORS
    assert [s.title for s in view.swimlanes] == ["Personal", "Side projects"]


def test_add_swimlane_ignores_blank_title():
    client = FakeClient()
    view = _opened_view(client)

    assert view.add_swimlane("   ") is None
    assert "create_swimlane" not in client.calls


def test_delete_swimlane_closes_project_inside_it():
    view = _opened_view()

    assert view.delete_swimlane(LANE_ID) is True

    assert view.swimlanes == []
    assert view.selected_project is None


def test_add_project_uses_default_title_and_description():
    view = _opened_view()

    created = view.add_project(LANE_ID)

    assert created.title == "New Project"
    assert created.description == "Click to edit description"
    assert [p.title for p in view.swimlanes[0].projects] == ["Health", "New Project"]


def test_delete_open_project_closes_notepad():
    view = _opened_view()

    assert view.delete_project(PROJECT_ID) is True

    assert view.selected_project is None
    assert view.swimlanes[0].projects == []


def test_delete_other_project_keeps_notepad_open():
    view = _opened_view()
    other = view.add_project(LANE_ID, title="Reading")

    assert view.delete_project(other.id) is True

    assert view.selected_project.id == PROJECT_ID


def test_failed_board_mutations_set_error():
    client = FakeClient()
    client.fail_on.update({"create_swimlane", "delete_swimlane", "create_project", "delete_project"})
    view = _opened_view(client)

    assert view.add_swimlane("Work") is None
    assert view.last_error == "Failed to create swimlane"
    assert view.delete_swimlane(LANE_ID) is False
    assert view.last_error == "Failed to delete swimlane"
    assert view.add_project(LANE_ID) is None
    assert view.last_error == "Failed to create project"
    assert view.delete_project(PROJECT_ID) is False
    assert view.last_error == "Failed to delete project"
    assert view.selected_project.id == PROJECT_ID


def test_failed_mutation_sets_error_and_keeps_state():
    client = FakeClient()
    client.fail_on.add("create_task")
    view = _opened_view(client)

    assert view.add_task("Nope") is None

    assert view.last_error == "Failed to create task"
    assert len(view.selected_project.tasks) == 1


def test_failed_load_reports_error():
    client = FakeClient()
    client.fail_on.add("get_board")
    view = BoardView(client)

    assert view.load() is False
    assert view.last_error == "Failed to load board"


def test_save_project_failure():
    client = FakeClient()
    client.fail_on.add("update_project")
    view = _opened_view(client)

    assert view.save_project(title="Renamed") is False
    assert view.last_error == "Failed to update project"


def test_calendar_lists_dated_tasks():
    view = _opened_view()

    entries = view.calendar(today=date(2024, 12, 19))

    assert [(e.title, e.swimlane_title, e.due_soon) for e in entries] == [("Workout", "Personal", True)]


def test_close_project_clears_stats():
    view = _opened_view()
    view.close_project()

    assert view.selected_project is None
    assert view.stats == schemas.TaskStats()
