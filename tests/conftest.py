import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from typing import AsyncGenerator, Dict, List, Optional
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from department_api.main import app
from department_api.core.database import get_async_session
from department_api.models import Base, Department
from department_api.repositories.organization.department_repository import DepartmentRepositoryInterface

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_maker(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Create test client"""
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        """Override database dependency for testing"""
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


class InMemoryDepartmentRepository(DepartmentRepositoryInterface):
    """Dict-backed repository for exercising the service without a database"""

    def __init__(self):
        self.rows: Dict[int, Department] = {}
        self.next_id = 1
        self.saved: List[Department] = []

    async def save(self, department: Department) -> Department:
        if department.id is None:
            department.id = self.next_id
            self.next_id += 1
        self.rows[department.id] = department
        self.saved.append(department)
        return department

    async def find_by_id(self, department_id: int) -> Optional[Department]:
        return self.rows.get(department_id)

    async def find_all(self) -> List[Department]:
        return [self.rows[key] for key in sorted(self.rows)]

    async def delete_by_id(self, department_id: int) -> None:
        self.rows.pop(department_id, None)

    async def find_by_name_ignore_case(self, name: str) -> Optional[Department]:
        for key in sorted(self.rows):
            if self.rows[key].name.lower() == name.lower():
                return self.rows[key]
        return None


@pytest.fixture
def memory_repository() -> InMemoryDepartmentRepository:
    return InMemoryDepartmentRepository()
