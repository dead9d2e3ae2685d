"""
Error taxonomy shared by the service layer and the API.
"""

from typing import Iterable, List


class TaskboardError(Exception):
    """Base exception for taskboard errors"""

    pass


class ValidationError(TaskboardError):
    """Client supplied data failed declared constraints"""

    def __init__(self, messages: Iterable[str]):
        self.messages: List[str] = list(messages)
        super().__init__(",".join(self.messages))


class NotFoundError(TaskboardError):
    """Target task does not exist"""

    def __init__(self, task_id: str, message: str = "Task not found"):
        self.task_id = task_id
        super().__init__(message)


class StorageError(TaskboardError):
    """Backend unreachable or operation rejected"""

    pass
