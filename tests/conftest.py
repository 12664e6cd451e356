"""Global test configuration and fixtures for the Messages API."""

import os
from collections.abc import AsyncGenerator
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.database.models import Base
from src.modules.messages.repository import SQLAlchemyMessageRepository
from src.modules.messages.service import MessageService
from tests.factories import MessageFactory

# In-memory SQLite by default; point at Postgres with
# TEST_DATABASE_URL=postgresql+asyncpg://... to run against the real dialect.
# SQLite lower() folds ASCII only, so non-ASCII titles differing by case are
# only treated as duplicates on Postgres.
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")


@pytest.fixture
def message_factory():
    return MessageFactory


@pytest.fixture
def organization_id() -> UUID:
    return uuid4()


@pytest_asyncio.fixture
async def async_engine():
    """Create an engine with a fresh schema for every test."""
    engine_kwargs = {}
    if TEST_DATABASE_URL.startswith("sqlite"):
        # Every connection must see the same in-memory database
        engine_kwargs["poolclass"] = StaticPool

    engine = create_async_engine(TEST_DATABASE_URL, echo=False, **engine_kwargs)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session bound to the test engine."""
    async_session_factory = async_sessionmaker(
        bind=async_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session_factory() as session:
        yield session


@pytest.fixture
def message_repository(db_session: AsyncSession) -> SQLAlchemyMessageRepository:
    return SQLAlchemyMessageRepository(db_session)


@pytest.fixture
def message_service(message_repository: SQLAlchemyMessageRepository) -> MessageService:
    return MessageService(message_repository)


@pytest_asyncio.fixture
async def app(db_session: AsyncSession):
    """Create FastAPI application with lifespan manager for testing."""
    from src.api.core.dependencies import get_db_session
    from src.main import app

    async def _get_test_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db_session] = _get_test_db_session
    async with LifespanManager(app):
        yield app
    app.dependency_overrides.clear()


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client for testing endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test-messages-api",
    ) as ac:
        yield ac
