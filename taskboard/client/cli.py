"""
Terminal front end for the Taskboard API.

Usage:
    taskboard [--base-url http://localhost:5000] [--page-size 10]

Commands:
    list | next | prev
    add                        prompt for a new task
    edit <n|id>                start editing row n (1-based) or a task id
    set title|description|due <value>
    update | cancel
    delete <n|id>
    help | quit
"""

import argparse
import asyncio
import shlex
import sys
from datetime import datetime
from typing import List, Optional

from taskboard.client.api_client import TaskApiClient
from taskboard.client.board import TaskBoard
from taskboard.core.config import get_settings
from taskboard.domain.entities import Task, ensure_utc


class Colors:
    """ANSI color codes for terminal output."""

    HEADER = "\033[95m"
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"


HELP_TEXT = __doc__.split("Commands:", 1)[1].rstrip()


def print_error(message: str):
    """Print an error message."""
    print(f"{Colors.RED}{message}{Colors.ENDC}", file=sys.stderr)


def parse_due_date(text: str) -> Optional[datetime]:
    """Parse `YYYY-MM-DD` or a full ISO-8601 timestamp; None if unparseable."""
    text = text.strip()
    if not text:
        return None
    try:
        return ensure_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        return None


def format_due_date(value: Optional[datetime]) -> str:
    if value is None:
        return "-"
    return ensure_utc(value).strftime("%Y-%m-%d %Z")


def format_task(task: Task) -> str:
    return f"[{task.title}] - {task.description} - Due On {format_due_date(task.due_date)}"


def render_board(board: TaskBoard) -> str:
    """Text rendering of the board: tasks, the row being edited, pagination."""
    lines = [f"{Colors.HEADER}{Colors.BOLD}Task Manager{Colors.ENDC}"]

    for index, task in enumerate(board.task_list, start=1):
        if board.is_editing(task.id):
            edit = board.editing
            lines.append(
                f"{index:>3}. {Colors.YELLOW}editing: [{edit.title}] - {edit.description}"
                f" - Due On {format_due_date(edit.due_date)}{Colors.ENDC}"
            )
        else:
            lines.append(f"{index:>3}. {format_task(task)}")

    if board.show_pagination:
        # Disabled controls are dimmed
        prev_label = "prev" if board.can_go_previous else f"{Colors.DIM}prev{Colors.ENDC}"
        next_label = "next" if board.can_go_next else f"{Colors.DIM}next{Colors.ENDC}"
        lines.append(
            f"< {prev_label}  Page {board.current_page} of {board.total_pages}  {next_label} >"
        )

    return "\n".join(lines)


def resolve_task_id(board: TaskBoard, ref: str) -> Optional[str]:
    """Accept a 1-based row number on the current page or a task id."""
    if ref in board.tasks:
        return ref
    if ref.isdigit():
        tasks = board.task_list
        index = int(ref) - 1
        if 0 <= index < len(tasks):
            return tasks[index].id
    return None


async def prompt(text: str) -> str:
    return await asyncio.to_thread(input, text)


async def handle_command(board: TaskBoard, args: List[str]) -> bool:
    """Run one REPL command. Returns False when the user asked to quit."""
    command, rest = args[0].lower(), args[1:]

    if command in ("quit", "exit", "q"):
        return False
    if command == "help":
        print(HELP_TEXT)
    elif command == "list":
        await board.fetch_tasks()
    elif command == "next":
        await board.next_page()
    elif command == "prev":
        await board.previous_page()
    elif command == "add":
        title = await prompt("Title: ")
        description = await prompt("Description: ")
        due_date = parse_due_date(await prompt("Due date (YYYY-MM-DD): "))
        if await board.add_task(title, description, due_date):
            print(f"{Colors.GREEN}Task added{Colors.ENDC}")
    elif command in ("edit", "delete"):
        task_id = resolve_task_id(board, rest[0]) if rest else None
        if task_id is None:
            print_error(f"Usage: {command} <row number|task id> (from the current page)")
        elif command == "edit":
            board.start_edit(task_id)
        elif await board.delete_task(task_id):
            print(f"{Colors.GREEN}Task deleted{Colors.ENDC}")
    elif command == "set":
        if board.editing is None:
            print_error("Not editing a task; use: edit <n>")
        elif len(rest) < 2 or rest[0] not in ("title", "description", "due"):
            print_error("Usage: set title|description|due <value>")
        else:
            value = " ".join(rest[1:])
            if rest[0] == "title":
                board.editing.title = value
            elif rest[0] == "description":
                board.editing.description = value
            else:
                board.editing.due_date = parse_due_date(value)
    elif command == "update":
        if await board.update_task():
            print(f"{Colors.GREEN}Task updated{Colors.ENDC}")
    elif command == "cancel":
        board.cancel_edit()
    else:
        print_error(f"Unknown command: {command} (try 'help')")

    return True


async def run_repl(base_url: str, page_size: int, timeout: float) -> None:
    async with TaskApiClient(base_url, timeout=timeout) as api:
        board = TaskBoard(api, page_size=page_size, alert=print_error)
        await board.load()

        running = True
        while running:
            print(render_board(board))
            try:
                line = await prompt("> ")
            except EOFError:
                break
            if not line.strip():
                continue
            try:
                args = shlex.split(line)
            except ValueError as e:
                print_error(f"Could not parse command: {e}")
                continue
            running = await handle_command(board, args)


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Terminal client for the Taskboard API")
    parser.add_argument(
        "--base-url",
        default=settings.client_base_url,
        help=f"API base URL (default: {settings.client_base_url})",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=settings.default_page_limit,
        help="Tasks per page",
    )
    args = parser.parse_args(argv)

    try:
        asyncio.run(run_repl(args.base_url, args.page_size, settings.client_timeout))
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
