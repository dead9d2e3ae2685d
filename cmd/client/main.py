"""
Taskboard terminal client entry point.

Run with:
    python cmd/client/main.py --base-url http://localhost:5000
"""

import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from taskboard.client.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
