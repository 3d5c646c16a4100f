"""Client-side state for the task list view.

All view state lives in one ``Board`` instance that the caller owns and
passes to every action. Actions talk to the API through a ``TaskClient``
and only touch the board once the server has answered successfully; on
failure they record a readable message in ``board.error`` and leave the
rest of the board as it was.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from tasktracker.ui.client import ApiError, TaskClient


logger = logging.getLogger(__name__)


@dataclass
class Board:
    """Everything the task list view renders."""

    tasks: list[dict[str, Any]] = field(default_factory=list)
    draft: str = ""
    editing_id: int | None = None
    edit_text: str = ""
    error: str | None = None
    busy: bool = False

    def find(self, task_id: int) -> dict[str, Any] | None:
        return next((task for task in self.tasks if task["id"] == task_id), None)


def _call(board: Board, operation: Callable[..., Any], *args: Any, **kwargs: Any) -> tuple[bool, Any]:
    """Run one API call with the board marked busy.

    Returns:
        ``(True, result)`` on success, ``(False, None)`` after recording the error.
    """
    board.busy = True
    board.error = None
    try:
        return True, operation(*args, **kwargs)
    except ApiError as exc:
        logger.warning(f"Task API call failed: {exc}")
        board.error = str(exc)
        return False, None
    finally:
        board.busy = False


def _replace(board: Board, updated: dict[str, Any]) -> None:
    board.tasks = [updated if task["id"] == updated["id"] else task for task in board.tasks]


def load_tasks(board: Board, client: TaskClient) -> bool:
    """Replace the list with the server's current tasks."""
    if board.busy:
        return False
    ok, tasks = _call(board, client.list_tasks)
    if ok:
        board.tasks = tasks
    return ok


def add_task(board: Board, client: TaskClient) -> bool:
    """Create a task from ``board.draft`` and put it at the top of the list."""
    if board.busy:
        return False

    description = board.draft.strip()
    if not description:
        board.error = "Task description cannot be empty."
        return False

    ok, created = _call(board, client.create_task, description)
    if ok:
        board.tasks.insert(0, created)
        board.draft = ""
    return ok


def toggle_task(board: Board, client: TaskClient, task_id: int) -> bool:
    """Flip the completed flag of one task."""
    if board.busy:
        return False

    task = board.find(task_id)
    if task is None:
        board.error = f"Task {task_id} is not in the list."
        return False

    ok, updated = _call(board, client.update_task, task_id, completed=not task["completed"])
    if ok:
        _replace(board, updated)
    return ok


def start_edit(board: Board, task_id: int) -> bool:
    """Open an edit session, discarding any unsaved one."""
    task = board.find(task_id)
    if task is None:
        board.error = f"Task {task_id} is not in the list."
        return False

    board.editing_id = task_id
    board.edit_text = task["description"]
    board.error = None
    return True


def cancel_edit(board: Board) -> None:
    board.editing_id = None
    board.edit_text = ""


def save_edit(board: Board, client: TaskClient) -> bool:
    """Send ``board.edit_text`` as the new description of the task being edited."""
    if board.busy or board.editing_id is None:
        return False

    description = board.edit_text.strip()
    if not description:
        board.error = "Task description cannot be empty."
        return False

    ok, updated = _call(board, client.update_task, board.editing_id, description=description)
    if ok:
        _replace(board, updated)
        cancel_edit(board)
    return ok


def delete_task(board: Board, client: TaskClient, task_id: int) -> bool:
    """Delete one task and drop it from the list."""
    if board.busy:
        return False

    ok, _ = _call(board, client.delete_task, task_id)
    if ok:
        board.tasks = [task for task in board.tasks if task["id"] != task_id]
        if board.editing_id == task_id:
            cancel_edit(board)
    return ok
