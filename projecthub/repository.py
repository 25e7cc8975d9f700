"""In-memory project/task repository persisted through the store adapter."""

import copy
import logging
from typing import Dict, List, Optional, Tuple

from projecthub.demo_data import demo_projects
from projecthub.errors import NotFoundError
from projecthub.models import Project, Task
from projecthub.utils.ids import new_id, now

logger = logging.getLogger(__name__)

PROJECTS_KEY = "projects"
FALLBACK_USER_ID = "1"

PROJECT_FIELDS = ("title", "description")
TASK_FIELDS = ("title", "description", "status", "priority", "due_date")


class Repository:
    """Ordered projects, each embedding its tasks.

    Tasks are stored inside their project so the whole collection persists as
    one record. ``_task_owner`` maps task id to project id and is kept in step
    with every task mutation, so lookups by task id do not scan every project.
    Records handed out are copies; the repository's own list is the only
    thing mutated.
    """

    def __init__(self, store, session=None, seed: bool = True):
        self.store = store
        self.session = session
        self._projects: List[Project] = []
        self._task_owner: Dict[str, str] = {}
        self._load(seed)

    def _load(self, seed: bool):
        raw = self.store.load(PROJECTS_KEY, None)
        if raw is None:
            self._projects = demo_projects() if seed else []
        else:
            try:
                self._projects = [Project.from_dict(p) for p in raw]
            except (AttributeError, KeyError, TypeError):
                logger.warning("Stored projects are malformed, starting from the demo data")
                self._projects = demo_projects() if seed else []
        self._reindex()
        logger.debug("Loaded %d projects", len(self._projects))

    def _reindex(self):
        self._task_owner = {t.id: p.id for p in self._projects for t in p.tasks}

    def _persist(self):
        self.store.save(PROJECTS_KEY, [p.to_dict() for p in self._projects])

    def _find_project(self, project_id: str) -> Project:
        for p in self._projects:
            if p.id == project_id:
                return p
        raise NotFoundError("Project not found")

    def _find_task(self, task_id: str) -> Tuple[Project, int]:
        owner_id = self._task_owner.get(task_id)
        if owner_id is not None:
            project = self._find_project(owner_id)
            for index, task in enumerate(project.tasks):
                if task.id == task_id:
                    return project, index
        raise NotFoundError("Task not found")

    def _fresh_id(self, prefix: str, taken) -> str:
        candidate = new_id(prefix)
        while candidate in taken:
            candidate = new_id(prefix)
        return candidate

    def _current_user_id(self) -> str:
        user = self.session.current_user if self.session is not None else None
        return user.id if user is not None else FALLBACK_USER_ID

    # Projects

    def list_projects(self) -> List[Project]:
        return copy.deepcopy(self._projects)

    def get_project(self, project_id: str) -> Project:
        return copy.deepcopy(self._find_project(project_id))

    def create_project(self, title: str, description: str) -> Project:
        timestamp = now()
        project = Project(
            id=self._fresh_id("project", {p.id for p in self._projects}),
            title=title,
            description=description,
            created_at=timestamp,
            updated_at=timestamp,
            user_id=self._current_user_id(),
        )
        self._projects.append(project)
        self._persist()
        return copy.deepcopy(project)

    def update_project(self, project_id: str, **fields) -> Project:
        project = self._find_project(project_id)
        for key in PROJECT_FIELDS:
            if key in fields:
                setattr(project, key, fields[key])
        project.updated_at = now()
        self._persist()
        return copy.deepcopy(project)

    def delete_project(self, project_id: str) -> None:
        project = self._find_project(project_id)
        self._projects.remove(project)
        for task in project.tasks:
            self._task_owner.pop(task.id, None)
        self._persist()

    # Tasks

    def list_tasks(self, project_id: Optional[str] = None) -> List[Task]:
        if project_id is not None:
            return copy.deepcopy(self._find_project(project_id).tasks)
        return copy.deepcopy([t for p in self._projects for t in p.tasks])

    def get_task(self, task_id: str) -> Task:
        project, index = self._find_task(task_id)
        return copy.deepcopy(project.tasks[index])

    def create_task(self, project_id: str, **fields) -> Task:
        project = self._find_project(project_id)
        timestamp = now()
        task = Task(
            id=self._fresh_id("task", self._task_owner),
            title=fields.get("title", ""),
            description=fields.get("description") or "",
            status=fields.get("status") or "pending",
            priority=fields.get("priority") or "medium",
            due_date=fields.get("due_date") or "",
            project_id=project.id,
            created_at=timestamp,
            updated_at=timestamp,
        )
        project.tasks.append(task)
        project.updated_at = timestamp
        self._task_owner[task.id] = project.id
        self._persist()
        return copy.deepcopy(task)

    def update_task(self, task_id: str, **fields) -> Task:
        project, index = self._find_task(task_id)
        task = project.tasks[index]
        for key in TASK_FIELDS:
            if key in fields:
                setattr(task, key, fields[key])
        task.updated_at = now()
        project.updated_at = task.updated_at
        self._persist()
        return copy.deepcopy(task)

    def delete_task(self, task_id: str) -> None:
        project, index = self._find_task(task_id)
        del project.tasks[index]
        del self._task_owner[task_id]
        project.updated_at = now()
        self._persist()

    def toggle_task_status(self, task_id: str) -> Task:
        project, index = self._find_task(task_id)
        task = project.tasks[index]
        task.status = "pending" if task.status == "completed" else "completed"
        task.updated_at = now()
        project.updated_at = task.updated_at
        self._persist()
        return copy.deepcopy(task)
