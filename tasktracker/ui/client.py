"""HTTP client for the task API."""

import logging
from typing import Any

import httpx


logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A task API call failed.

    ``str(error)`` is a message suitable for showing to the user.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TaskClient:
    """Thin wrapper over ``httpx.Client`` for the ``/api/tasks`` endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def list_tasks(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/tasks").json()

    def create_task(self, description: str) -> dict[str, Any]:
        return self._request("POST", "/api/tasks", json={"description": description}).json()

    def update_task(self, task_id: int, **changes: Any) -> dict[str, Any]:
        """Send a partial update; only ``description`` and ``completed`` are meaningful."""
        return self._request("PUT", f"/api/tasks/{task_id}", json=changes).json()

    def delete_task(self, task_id: int) -> None:
        self._request("DELETE", f"/api/tasks/{task_id}")

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "TaskClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning(f"{method} {path} failed: {exc}")
            raise ApiError(f"Could not reach the task service ({exc.__class__.__name__}).") from exc

        if not response.is_success:
            logger.info(f"{method} {path} returned {response.status_code}")
            raise ApiError(_error_message(response), response.status_code)

        return response


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Request failed with status {response.status_code}."
