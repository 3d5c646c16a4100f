"""Database models."""

from tasktracker.models.task import Task


__all__ = ["Task"]
