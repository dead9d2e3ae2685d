"""
Storage adapters implementing TaskRepositoryPort.
"""

from typing import Optional

from taskboard.core.config import Settings, get_settings
from taskboard.ports.repository import TaskRepositoryPort

from .memory import InMemoryTaskRepository
from .mongo import MongoTaskRepository


def build_task_repository(settings: Optional[Settings] = None) -> TaskRepositoryPort:
    """Pick the repository implementation named by STORAGE_BACKEND."""
    settings = settings or get_settings()
    backend = settings.storage_backend.lower()

    if backend == "memory":
        return InMemoryTaskRepository()
    if backend == "mongodb":
        return MongoTaskRepository(settings=settings)

    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


__all__ = [
    "InMemoryTaskRepository",
    "MongoTaskRepository",
    "build_task_repository",
]
