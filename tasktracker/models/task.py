"""Task model."""

from datetime import datetime

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from tasktracker.extensions import db


class Task(db.Model):
    """A single to-do item."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    def apply_changes(self, changes: dict) -> None:
        """Merge a partial update onto this task.

        Args:
            changes: Validated fields; absent keys keep their stored value.
        """
        if "description" in changes:
            self.description = changes["description"]
        if "completed" in changes:
            self.completed = bool(changes["completed"])

    def __repr__(self) -> str:
        return f"<Task {self.id} completed={self.completed}>"
