import os

# Configure before any taskboard import: no file logging, no MongoDB
os.environ.setdefault("LOG_DIR", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("STORAGE_BACKEND", "memory")

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from taskboard.adapters.memory import InMemoryTaskRepository
from taskboard.core.config import Settings
from taskboard.internal.api.app import create_app
from taskboard.services.interfaces import ITaskService


@pytest.fixture
def settings():
    return Settings(log_dir="", storage_backend="memory")


@pytest.fixture
def repository():
    return InMemoryTaskRepository()


@pytest.fixture
def app(settings, repository):
    return create_app(settings, repository=repository)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def task_service():
    service = MagicMock(spec=ITaskService)
    service.list_tasks = AsyncMock()
    service.create_task = AsyncMock()
    service.update_task = AsyncMock()
    service.delete_task = AsyncMock()
    return service


@pytest.fixture
def mocked_client(app, task_service):
    """Client whose routes talk to a mocked task service."""
    app.state.task_service = task_service
    with TestClient(app) as test_client:
        yield test_client
