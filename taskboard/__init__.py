"""
Taskboard: a paginated task-tracking API backed by MongoDB, with a terminal client.
"""

__version__ = "1.0.0"
