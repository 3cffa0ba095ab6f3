"""Shared fixtures: in-memory SQLite per test, service instances, HTTP client."""

import os

# settings exige DATABASE_URL al importar app.*
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.storage.database.db_connector import get_db
from app.v1_0.models import Base, Customer, Order
from app.v1_0.repositories import CustomerRepository, OrderRepository
from app.v1_0.services import CustomerService, StatsService


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def customer_repository():
    return CustomerRepository()


@pytest.fixture
def customer_service(customer_repository):
    return CustomerService(customer_repository=customer_repository)


@pytest.fixture
def stats_service(customer_repository):
    return StatsService(
        customer_repository=customer_repository,
        order_repository=OrderRepository(),
    )


@pytest.fixture
def seed_customer(test_db):
    """Insert a customer row directly, bypassing the service."""

    async def _seed(first_name="Ada", last_name="Lovelace", **extra) -> Customer:
        c = Customer(first_name=first_name, last_name=last_name, **extra)
        test_db.add(c)
        await test_db.commit()
        return c

    return _seed


@pytest.fixture
def seed_order(test_db):
    """Insert an order row; orders are written outside this service."""

    async def _seed(customer_id: int, total_amount: float, **extra) -> Order:
        o = Order(customer_id=customer_id, total_amount=total_amount, **extra)
        test_db.add(o)
        await test_db.commit()
        return o

    return _seed


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with get_db overridden to the test database."""
    from app.main import create_app

    app = create_app()

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
