"""
Taskboard API entry point.

Run with either:
    python cmd/api/main.py
    uvicorn --factory taskboard.internal.api.app:create_app --port 5000
"""

import os
import sys

# Make the project root importable when run as a script
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from taskboard.core.logger import logger  # noqa: E402
from taskboard.internal.api.app import run  # noqa: E402


if __name__ == "__main__":
    try:
        run()
    except Exception as e:
        logger.error(f"Failed to start Uvicorn server: {e}")
        logger.exception("Uvicorn startup error details:")
        raise
