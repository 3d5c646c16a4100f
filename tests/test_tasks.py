"""Tests for task endpoints."""

from unittest.mock import patch

from sqlalchemy.exc import OperationalError


def _create_task(client, description="Test task"):
    return client.post("/api/tasks", json={"description": description})


class TestListTasks:
    def test_list_tasks_empty(self, client, db):
        response = client.get("/api/tasks")
        assert response.status_code == 200
        assert response.get_json() == []

    def test_list_includes_created_task(self, client, db):
        created = _create_task(client, "water plants").get_json()

        response = client.get("/api/tasks")
        data = response.get_json()
        assert len(data) == 1
        assert data[0]["id"] == created["id"]
        assert data[0]["description"] == "water plants"
        assert data[0]["completed"] is False

    def test_list_newest_first(self, client, db):
        for description in ("first", "second", "third"):
            _create_task(client, description)

        response = client.get("/api/tasks")
        assert [t["description"] for t in response.get_json()] == ["third", "second", "first"]

    def test_list_orders_by_created_at(self, client, db):
        from datetime import datetime

        from tasktracker.models import Task

        db.session.add_all(
            [
                Task(description="old", created_at=datetime(2024, 1, 1)),
                Task(description="new", created_at=datetime(2024, 6, 1)),
                Task(description="middle", created_at=datetime(2024, 3, 1)),
            ]
        )
        db.session.commit()

        response = client.get("/api/tasks")
        assert [t["description"] for t in response.get_json()] == ["new", "middle", "old"]

    @patch("tasktracker.routes.tasks.db")
    def test_list_store_failure(self, mock_db, client, db):
        mock_db.session.query.side_effect = OperationalError("SELECT", {}, Exception("down"))

        response = client.get("/api/tasks")

        assert response.status_code == 500
        assert response.get_json()["error"] == "Internal server error"


class TestCreateTask:
    def test_create_task(self, client, db):
        response = _create_task(client, "buy milk")
        assert response.status_code == 201
        data = response.get_json()
        assert data["description"] == "buy milk"
        assert data["completed"] is False
        assert isinstance(data["id"], int)
        assert data["created_at"]
        assert data["updated_at"]

    def test_create_ignores_completed_flag(self, client, db):
        response = client.post("/api/tasks", json={"description": "x", "completed": True})
        assert response.status_code == 201
        assert response.get_json()["completed"] is False

    def test_create_missing_description(self, client, db):
        response = client.post("/api/tasks", json={})
        assert response.status_code == 400
        data = response.get_json()
        assert data["error"] == "Description is required."
        assert "description" in data["details"]

    def test_create_empty_description(self, client, db):
        response = _create_task(client, "")
        assert response.status_code == 400

    def test_create_blank_description(self, client, db):
        response = _create_task(client, "   ")
        assert response.status_code == 400

    def test_create_null_description(self, client, db):
        response = client.post("/api/tasks", json={"description": None})
        assert response.status_code == 400

    def test_create_non_json_body(self, client, db):
        response = client.post("/api/tasks", data="buy milk", content_type="text/plain")
        assert response.status_code == 400

    def test_rejected_create_stores_nothing(self, client, db):
        client.post("/api/tasks", json={"description": ""})
        assert client.get("/api/tasks").get_json() == []


class TestUpdateTask:
    def test_update_completed_keeps_description(self, client, task):
        response = client.put(f"/api/tasks/{task['id']}", json={"completed": True})
        assert response.status_code == 200
        data = response.get_json()
        assert data["id"] == task["id"]
        assert data["description"] == "buy milk"
        assert data["completed"] is True

    def test_update_description_keeps_completed(self, client, task):
        client.put(f"/api/tasks/{task['id']}", json={"completed": True})

        response = client.put(f"/api/tasks/{task['id']}", json={"description": "buy oat milk"})
        assert response.status_code == 200
        data = response.get_json()
        assert data["description"] == "buy oat milk"
        assert data["completed"] is True

    def test_update_both_fields(self, client, task):
        response = client.put(
            f"/api/tasks/{task['id']}",
            json={"description": "buy bread", "completed": True},
        )
        data = response.get_json()
        assert data["description"] == "buy bread"
        assert data["completed"] is True

    def test_update_persists(self, client, task):
        client.put(f"/api/tasks/{task['id']}", json={"completed": True})

        listed = client.get("/api/tasks").get_json()
        assert listed[0]["completed"] is True

    def test_update_normalizes_completed(self, client, task):
        response = client.put(f"/api/tasks/{task['id']}", json={"completed": 1})
        assert response.status_code == 200
        assert response.get_json()["completed"] is True

    def test_update_no_fields(self, client, task):
        response = client.put(f"/api/tasks/{task['id']}", json={})
        assert response.status_code == 400
        assert "At least one" in response.get_json()["error"]

    def test_update_only_unknown_fields(self, client, task):
        response = client.put(f"/api/tasks/{task['id']}", json={"title": "nope"})
        assert response.status_code == 400

    def test_update_blank_description(self, client, task):
        response = client.put(f"/api/tasks/{task['id']}", json={"description": " "})
        assert response.status_code == 400

    def test_update_invalid_completed(self, client, task):
        response = client.put(f"/api/tasks/{task['id']}", json={"completed": "maybe"})
        assert response.status_code == 400

    def test_update_not_found(self, client, db):
        response = client.put("/api/tasks/999", json={"completed": True})
        assert response.status_code == 404
        assert response.get_json()["error"] == "Task not found"

    def test_update_refreshes_updated_at(self, client, db, task):
        from datetime import datetime

        from tasktracker.models import Task

        stored = db.session.get(Task, task["id"])
        stored.updated_at = datetime(2020, 1, 1)
        db.session.commit()

        response = client.put(f"/api/tasks/{task['id']}", json={"completed": True})
        assert not response.get_json()["updated_at"].startswith("2020-01-01")


class TestDeleteTask:
    def test_delete_task(self, client, task):
        response = client.delete(f"/api/tasks/{task['id']}")
        assert response.status_code == 204
        assert response.data == b""

    def test_delete_removes_from_list(self, client, task):
        _create_task(client, "keep me")

        client.delete(f"/api/tasks/{task['id']}")

        listed = client.get("/api/tasks").get_json()
        assert [t["description"] for t in listed] == ["keep me"]

    def test_delete_not_found(self, client, db):
        response = client.delete("/api/tasks/999")
        assert response.status_code == 404

    def test_delete_twice(self, client, task):
        client.delete(f"/api/tasks/{task['id']}")
        response = client.delete(f"/api/tasks/{task['id']}")
        assert response.status_code == 404

    def test_delete_non_numeric_id(self, client, db):
        response = client.delete("/api/tasks/abc")
        assert response.status_code == 404


class TestWalkthrough:
    def test_create_complete_delete(self, client, db):
        created = client.post("/api/tasks", json={"description": "buy milk"})
        assert created.status_code == 201
        task_id = created.get_json()["id"]
        assert created.get_json()["completed"] is False

        updated = client.put(f"/api/tasks/{task_id}", json={"completed": True})
        assert updated.status_code == 200
        assert updated.get_json()["description"] == "buy milk"
        assert updated.get_json()["completed"] is True

        deleted = client.delete(f"/api/tasks/{task_id}")
        assert deleted.status_code == 204

        assert client.get("/api/tasks").get_json() == []
