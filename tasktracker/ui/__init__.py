"""Console client for the task API."""

from tasktracker.ui.client import ApiError, TaskClient
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


__all__ = [
    "ApiError",
    "TaskClient",
    "Board",
    "render_board",
    "load_tasks",
    "add_task",
    "toggle_task",
    "start_edit",
    "save_edit",
    "cancel_edit",
    "delete_task",
]
