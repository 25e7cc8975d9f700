from dataclasses import dataclass, field, fields
from typing import Any, Dict, List

from projecthub.models.task_model import Task


@dataclass
class Project:
    id: str
    title: str
    description: str
    created_at: str
    updated_at: str
    user_id: str
    # Owned tasks, insertion order is display order.
    tasks: List[Task] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "user_id": self.user_id,
            "tasks": [t.to_dict() for t in self.tasks],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        known = {f.name for f in fields(cls)} - {"tasks"}
        values = {k: v for k, v in data.items() if k in known}
        values["tasks"] = [Task.from_dict(t) for t in data.get("tasks") or []]
        return cls(**values)
