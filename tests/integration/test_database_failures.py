import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from fastapi import status
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from department_api.core.database import get_async_session
from department_api.core.exceptions import DatabaseError
from department_api.main import app
from department_api.models.organization.department import Department
from department_api.repositories.organization.department_repository import DepartmentRepository


class UnavailableSession(AsyncSession):
    """Session whose database has gone away"""

    rolled_back = False

    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", None, Exception("database is unavailable"))

    async def flush(self, *args, **kwargs):
        raise OperationalError("INSERT", None, Exception("database is unavailable"))

    async def rollback(self):
        self.rolled_back = True
        await super().rollback()


@pytest.fixture
async def broken_session(test_engine) -> AsyncGenerator[UnavailableSession, None]:
    async with UnavailableSession(bind=test_engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def broken_client(test_engine) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with UnavailableSession(bind=test_engine, expire_on_commit=False) as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def test_save_failure_rolls_back(broken_session):
    repo = DepartmentRepository(broken_session)

    with pytest.raises(DatabaseError) as exc_info:
        await repo.save(Department(name="IT"))

    assert exc_info.value.status_code == 500
    assert broken_session.rolled_back


async def test_delete_failure_rolls_back(broken_session):
    repo = DepartmentRepository(broken_session)

    with pytest.raises(DatabaseError):
        await repo.delete_by_id(1)

    assert broken_session.rolled_back


async def test_list_departments_when_database_fails(broken_client: AsyncClient):
    response = await broken_client.get("/departments")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {
        "status": "INTERNAL_SERVER_ERROR",
        "message": "Error getting departments",
    }


async def test_create_department_when_database_fails(broken_client: AsyncClient):
    response = await broken_client.post("/departments", json={"departmentName": "IT"})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {
        "status": "INTERNAL_SERVER_ERROR",
        "message": "Error saving department",
    }


async def test_health_check_when_database_fails(broken_client: AsyncClient):
    response = await broken_client.get("/health")

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    data = response.json()
    assert data["status"] == "unhealthy"
    assert data["components"]["database"] == "disconnected"
