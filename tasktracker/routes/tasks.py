"""Task CRUD endpoints."""

import logging

from flask import Blueprint, request
from marshmallow import ValidationError

from tasktracker.errors import error_response
from tasktracker.extensions import db
from tasktracker.models import Task
from tasktracker.schemas import TaskCreateSchema, TaskSchema, TaskUpdateSchema
from tasktracker.telemetry import get_meter, get_tracer


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)
meter = get_meter(__name__)

tasks_created = meter.create_counter(
    name="tasks.created",
    description="Tasks created",
    unit="1",
)
tasks_completed = meter.create_counter(
    name="tasks.completed",
    description="Tasks marked as completed",
    unit="1",
)
tasks_deleted = meter.create_counter(
    name="tasks.deleted",
    description="Tasks deleted",
    unit="1",
)

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")


def _validation_error(err: ValidationError):
    messages = err.messages if isinstance(err.messages, dict) else {"_schema": err.messages}
    summary = next(iter(_flatten(messages)), "Invalid request body")
    return error_response(summary, 400, details=messages)


def _flatten(messages):
    for value in messages.values():
        if isinstance(value, dict):
            yield from _flatten(value)
        elif isinstance(value, list):
            yield from (str(item) for item in value)
        else:
            yield str(value)


@tasks_bp.route("", methods=["GET"])
def list_tasks():
    """List every task, newest first.

    Returns:
        JSON array of tasks.
    """
    tasks = db.session.query(Task).order_by(Task.created_at.desc(), Task.id.desc()).all()
    return TaskSchema(many=True).jsonify(tasks)


@tasks_bp.route("", methods=["POST"])
def create_task():
    """Create a new task.

    Returns:
        JSON response with the created task and 201 status.
    """
    with tracer.start_as_current_span("task.create") as span:
        try:
            data = TaskCreateSchema().load(request.get_json(silent=True) or {})
        except ValidationError as err:
            return _validation_error(err)

        task = Task(description=data["description"], completed=False)
        db.session.add(task)
        db.session.commit()

        span.set_attribute("task.id", task.id)
        tasks_created.add(1)
        logger.info(f"Task created: {task.id}")

        return TaskSchema().jsonify(task), 201


@tasks_bp.route("/<int:task_id>", methods=["PUT"])
def update_task(task_id: int):
    """Merge a partial update onto a task.

    Args:
        task_id: Task id.

    Returns:
        JSON response with the merged task.
    """
    with tracer.start_as_current_span("task.update") as span:
        span.set_attribute("task.id", task_id)

        try:
            changes = TaskUpdateSchema().load(request.get_json(silent=True) or {})
        except ValidationError as err:
            return _validation_error(err)

        task = db.session.query(Task).filter(Task.id == task_id).first()
        if not task:
            return error_response("Task not found", 404)

        was_completed = task.completed
        task.apply_changes(changes)
        db.session.commit()

        if task.completed and not was_completed:
            tasks_completed.add(1)
        logger.info(f"Task updated: {task_id}", extra={"fields": sorted(changes)})

        return TaskSchema().jsonify(task)


@tasks_bp.route("/<int:task_id>", methods=["DELETE"])
def delete_task(task_id: int):
    """Delete a task.

    Args:
        task_id: Task id.

    Returns:
        Empty response with 204 status.
    """
    with tracer.start_as_current_span("task.delete") as span:
        span.set_attribute("task.id", task_id)

        deleted = db.session.query(Task).filter(Task.id == task_id).delete()
        db.session.commit()

        if not deleted:
            return error_response("Task not found", 404)

        tasks_deleted.add(1)
        logger.info(f"Task deleted: {task_id}")

        return "", 204
