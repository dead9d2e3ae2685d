"""
Ports (abstract interfaces) implemented by adapters.
"""

from .repository import TaskRepositoryPort

__all__ = ["TaskRepositoryPort"]
