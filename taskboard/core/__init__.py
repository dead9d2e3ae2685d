"""
Core module containing configuration, logging, errors and database access.
"""

from .config import Settings, get_settings
from .errors import NotFoundError, StorageError, TaskboardError, ValidationError
from .logger import logger, setup_logger

__all__ = [
    "Settings",
    "get_settings",
    "logger",
    "setup_logger",
    "TaskboardError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
]
