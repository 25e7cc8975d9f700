"""Async stand-in for a remote API.

Each call runs the repository operation, then sleeps for a per-operation
latency before resolving with an ``ApiResponse``. Errors from the repository
are raised straight away, without the delay.
"""

import asyncio
import logging
from typing import Dict, List, Optional

from projecthub.models import ApiResponse, Project, Task, User

logger = logging.getLogger(__name__)

# Seconds; reads resolve faster than writes.
DEFAULT_LATENCY = {
    "auth.login": 0.8,
    "auth.logout": 0.3,
    "projects.get_all": 0.5,
    "projects.get_by_id": 0.3,
    "projects.create": 0.6,
    "projects.update": 0.5,
    "projects.delete": 0.4,
    "tasks.create": 0.5,
    "tasks.update": 0.4,
    "tasks.delete": 0.3,
    "tasks.toggle_status": 0.3,
}


class NetworkSimulator:
    def __init__(self, latency: Optional[Dict[str, float]] = None, scale: float = 1.0):
        self.latency = dict(DEFAULT_LATENCY)
        if latency:
            self.latency.update(latency)
        self.scale = scale

    def delay_for(self, operation: str) -> float:
        return max(self.latency.get(operation, 0.0) * self.scale, 0.0)

    async def respond(self, operation: str, data, message: Optional[str] = None) -> ApiResponse:
        await asyncio.sleep(self.delay_for(operation))
        logger.debug("%s resolved", operation)
        return ApiResponse(data=data, success=True, message=message)


class AuthAPI:
    def __init__(self, session, simulator: NetworkSimulator):
        self.session = session
        self.simulator = simulator

    async def login(self, email: str, password: str, token: Optional[str] = None) -> ApiResponse[User]:
        user = self.session.login(email, password, token=token)
        return await self.simulator.respond("auth.login", user, "Login successful")

    async def logout(self) -> ApiResponse[None]:
        self.session.logout()
        return await self.simulator.respond("auth.logout", None)

    def current_user(self) -> Optional[User]:
        return self.session.current_user

    def is_authenticated(self) -> bool:
        return self.session.is_authenticated()


class ProjectsAPI:
    def __init__(self, repository, simulator: NetworkSimulator):
        self.repository = repository
        self.simulator = simulator

    async def get_all(self) -> ApiResponse[List[Project]]:
        return await self.simulator.respond("projects.get_all", self.repository.list_projects())

    async def get_by_id(self, project_id: str) -> ApiResponse[Project]:
        project = self.repository.get_project(project_id)
        return await self.simulator.respond("projects.get_by_id", project)

    async def create(self, title: str, description: str) -> ApiResponse[Project]:
        project = self.repository.create_project(title, description)
        return await self.simulator.respond(
            "projects.create", project, "Project created successfully"
        )

    async def update(self, project_id: str, **fields) -> ApiResponse[Project]:
        project = self.repository.update_project(project_id, **fields)
        return await self.simulator.respond(
            "projects.update", project, "Project updated successfully"
        )

    async def delete(self, project_id: str) -> ApiResponse[None]:
        self.repository.delete_project(project_id)
        return await self.simulator.respond(
            "projects.delete", None, "Project deleted successfully"
        )


class TasksAPI:
    def __init__(self, repository, simulator: NetworkSimulator):
        self.repository = repository
        self.simulator = simulator

    async def create(self, project_id: str, **fields) -> ApiResponse[Task]:
        task = self.repository.create_task(project_id, **fields)
        return await self.simulator.respond("tasks.create", task, "Task created successfully")

    async def update(self, task_id: str, **fields) -> ApiResponse[Task]:
        task = self.repository.update_task(task_id, **fields)
        return await self.simulator.respond("tasks.update", task, "Task updated successfully")

    async def delete(self, task_id: str) -> ApiResponse[None]:
        self.repository.delete_task(task_id)
        return await self.simulator.respond("tasks.delete", None, "Task deleted successfully")

    async def toggle_status(self, task_id: str) -> ApiResponse[Task]:
        task = self.repository.toggle_task_status(task_id)
        return await self.simulator.respond(
            "tasks.toggle_status", task, f"Task marked as {task.status}"
        )


class MockApi:
    """Bundles the auth, projects and tasks APIs over one repository."""

    def __init__(self, repository, session, simulator: Optional[NetworkSimulator] = None):
        self.simulator = simulator or NetworkSimulator()
        self.auth = AuthAPI(session, self.simulator)
        self.projects = ProjectsAPI(repository, self.simulator)
        self.tasks = TasksAPI(repository, self.simulator)
