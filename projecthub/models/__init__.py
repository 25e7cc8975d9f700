from projecthub.models.project_model import Project
from projecthub.models.response_model import ApiResponse
from projecthub.models.task_model import PRIORITIES, STATUSES, Task
from projecthub.models.user_model import User

__all__ = ["ApiResponse", "PRIORITIES", "Project", "STATUSES", "Task", "User"]
