"""Plain-text rendering of a ``Board``."""

from tasktracker.ui.state import Board


def render_board(board: Board) -> str:
    pending = sum(1 for task in board.tasks if not task["completed"])
    lines = [f"Tasks ({pending} open, {len(board.tasks)} total)"]

    if not board.tasks:
        lines.append("  No tasks yet.")

    for task in board.tasks:
        mark = "x" if task["completed"] else " "
        line = f"  [{mark}] {task['id']:>4}  {task['description']}"
        if task["id"] == board.editing_id:
            line += f"    (editing: {board.edit_text})"
        lines.append(line)

    if board.draft:
        lines.append(f"New task: {board.draft}")
    if board.busy:
        lines.append("Working...")
    if board.error:
        lines.append(f"Error: {board.error}")

    return "\n".join(lines)
