"""Pure selection helpers for projects and tasks.

None of these mutate their input and all of them preserve input order.
"""

from typing import Iterable, List, Tuple

from projecthub.models import Project, Task


def filter_projects_by_text(projects: Iterable[Project], term: str) -> List[Project]:
    """Case-insensitive substring match on title or description.

    A blank term matches every project.
    """
    needle = (term or "").strip().lower()
    if not needle:
        return list(projects)
    return [
        p
        for p in projects
        if needle in (p.title or "").lower() or needle in (p.description or "").lower()
    ]


def filter_tasks_by_status(tasks: Iterable[Task], status: str) -> List[Task]:
    if not status or status == "all":
        return list(tasks)
    return [t for t in tasks if t.status == status]


def all_tasks(projects: Iterable[Project]) -> List[Task]:
    return [t for p in projects for t in p.tasks]


def project_progress(project: Project) -> Tuple[int, int, float]:
    """Return ``(completed, total, percentage)`` for a project's tasks."""
    total = len(project.tasks)
    completed = sum(1 for t in project.tasks if t.status == "completed")
    percentage = (completed / total) * 100 if total else 0.0
    return completed, total, percentage
