"""API route blueprints."""

from tasktracker.routes.health import health_bp
from tasktracker.routes.tasks import tasks_bp


__all__ = ["health_bp", "tasks_bp"]
