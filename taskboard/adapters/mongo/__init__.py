from .task_repository import MongoTaskRepository

__all__ = ["MongoTaskRepository"]
