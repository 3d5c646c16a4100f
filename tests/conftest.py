"""Pytest fixtures for the task tracker."""

import os

import httpx
import pytest


# Disable OpenTelemetry for tests
os.environ["OTEL_SDK_DISABLED"] = "true"


@pytest.fixture
def app():
    """Create test application."""
    from tasktracker import create_app
    from tasktracker.config import TestConfig

    app = create_app(TestConfig)
    app.config["TESTING"] = True

    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def db(app):
    """Create test database."""
    from tasktracker.extensions import db as _db

    with app.app_context():
        _db.create_all()
        yield _db
        _db.drop_all()


@pytest.fixture
def task(client, db):
    """Create one task through the API and return its JSON."""
    response = client.post("/api/tasks", json={"description": "buy milk"})
    return response.get_json()


@pytest.fixture
def api_client(app, db):
    """TaskClient wired straight into the Flask app."""
    from tasktracker.ui.client import TaskClient

    client = TaskClient("http://testserver", transport=httpx.WSGITransport(app=app))
    yield client
    client.close()
