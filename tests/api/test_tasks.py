import pytest
from httpx import AsyncClient
from fastapi import status

pytestmark = pytest.mark.asyncio

class TestTaskStatus:
    async def test_start_pending_task(self, client: AsyncClient, auth_headers: dict):
        response = await client.patch(
            "/api/tasks/case-1-task-3",
            json={"status": "IN_PROGRESS"},
            headers=auth_headers
        )
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "IN_PROGRESS"
        assert data["completedAt"] is None
        assert data["assignee"] == {"name": "John Doe", "email": "john@example.com"}

    async def test_complete_stamps_completion(self, client: AsyncClient, auth_headers: dict):
        response = await client.patch(
            "/api/tasks/case-1-task-2",
            json={"status": "COMPLETED"},
            headers=auth_headers
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["completedAt"] is not None

        detail = await client.get("/api/cases/case-1", headers=auth_headers)
        statuses = [task["status"] for task in detail.json()["tasks"]]
        assert statuses == ["COMPLETED", "COMPLETED", "PENDING"]

    async def test_reopen_clears_completion(self, client: AsyncClient, auth_headers: dict):
        response = await client.patch(
            "/api/tasks/case-1-task-1",
            json={"status": "IN_PROGRESS"},
            headers=auth_headers
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["completedAt"] is None

    async def test_rejected_transition(self, client: AsyncClient, auth_headers: dict):
        response = await client.patch(
            "/api/tasks/case-1-task-1",
            json={"status": "CANCELLED"},
            headers=auth_headers
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Cannot move task from COMPLETED to CANCELLED"}

    async def test_unknown_status_value(self, client: AsyncClient, auth_headers: dict):
        response = await client.patch(
            "/api/tasks/case-1-task-3",
            json={"status": "DONE"},
            headers=auth_headers
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_other_lawyers_task_looks_missing(
        self, client: AsyncClient, other_lawyer_headers: dict
    ):
        response = await client.patch(
            "/api/tasks/case-1-task-3",
            json={"status": "IN_PROGRESS"},
            headers=other_lawyer_headers
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Task not found"}

    async def test_requires_session(self, client: AsyncClient):
        response = await client.patch("/api/tasks/case-1-task-3", json={"status": "IN_PROGRESS"})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
