"""Interactive console front end for the task list."""

import logging
from collections.abc import Callable

from tasktracker.config import Config
from tasktracker.telemetry import setup_telemetry, telemetry_enabled
from tasktracker.ui.client import TaskClient
from tasktracker.ui.render import render_board
from tasktracker.ui.state import (
    Board,
    add_task,
    cancel_edit,
    delete_task,
    load_tasks,
    save_edit,
    start_edit,
    toggle_task,
)


logger = logging.getLogger(__name__)

HELP = """Commands:
  add <text>         create a task
  done <id>          toggle a task between open and completed
  edit <id> [text]   start editing a task, optionally with new text
  save [text]        save the task being edited
  cancel             discard the current edit
  rm <id>            delete a task
  reload             fetch the list from the server again
  help               show this help
  quit               leave"""


def _parse_id(board: Board, raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        board.error = f"'{raw}' is not a task id."
        return None


def handle_command(board: Board, client: TaskClient, line: str) -> bool:
    """Apply one console command to the board.

    Returns:
        False when the user asked to quit, True otherwise.
    """
    command, _, arg = line.strip().partition(" ")
    command = command.lower()
    arg = arg.strip()

    if command in ("quit", "exit"):
        return False

    if command == "add":
        board.draft = arg
        add_task(board, client)
    elif command in ("done", "toggle"):
        task_id = _parse_id(board, arg)
        if task_id is not None:
            toggle_task(board, client, task_id)
    elif command == "edit":
        raw_id, _, text = arg.partition(" ")
        task_id = _parse_id(board, raw_id)
        if task_id is not None and start_edit(board, task_id) and text.strip():
            board.edit_text = text.strip()
    elif command == "save":
        if board.editing_id is None:
            board.error = "Nothing is being edited."
        else:
            if arg:
                board.edit_text = arg
            save_edit(board, client)
    elif command == "cancel":
        cancel_edit(board)
    elif command in ("rm", "delete"):
        task_id = _parse_id(board, arg)
        if task_id is not None:
            delete_task(board, client, task_id)
    elif command in ("reload", "ls"):
        load_tasks(board, client)
    elif command in ("help", "?", ""):
        board.error = None
    else:
        board.error = f"Unknown command '{command}'. Type 'help' for the list."

    return True


def run_console(
    board: Board,
    client: TaskClient,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Read commands until quit or end of input, re-rendering after each one."""
    write(HELP)
    load_tasks(board, client)
    write(render_board(board))

    while True:
        try:
            line = read("> ")
        except (EOFError, KeyboardInterrupt):
            break

        if not handle_command(board, client, line):
            break
        if line.strip().lower() in ("help", "?"):
            write(HELP)
        write(render_board(board))


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if telemetry_enabled():
        setup_telemetry(service_name="tasktracker-ui")

    with TaskClient(Config.TASKS_API_URL, timeout=Config.TASKS_API_TIMEOUT) as client:
        run_console(Board(), client)
