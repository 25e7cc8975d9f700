from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

STATUSES = ("pending", "completed")
PRIORITIES = ("low", "medium", "high")


@dataclass
class Task:
    id: str
    title: str
    project_id: str
    created_at: str
    updated_at: str
    description: str = ""
    status: str = "pending"  # pending | completed
    priority: str = "medium"  # low | medium | high
    # ISO date or timestamp, e.g. "2024-01-25T23:59:59Z"
    due_date: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
