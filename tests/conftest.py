"""Fixtures de test / Test fixtures.

Chaque test dispose d'une base SQLite neuve sous tmp_path.
Each test gets a fresh SQLite database under tmp_path.
"""

from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import fuel_tracker.models  # noqa: F401  enregistrer les modeles / register models
from fuel_tracker.database import Base, get_db
from fuel_tracker.main import app
from fuel_tracker.models.fuel_entry import FuelEntry
from fuel_tracker.rate_limit import limiter


@pytest.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def _get_test_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_test_db
    limiter.reset()
    limiter.enabled = False
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_entry():
    """Plein transitoire pour les tests purs / Transient fill-up for pure tests."""

    def _make(entry_id, odometer, liters=10.0, price=15.0, day=1, vehicle_id=1):
        return FuelEntry(
            id=entry_id,
            vehicle_id=vehicle_id,
            liters=liters,
            price=price,
            odometer=odometer,
            timestamp=datetime(2024, 1, day, 12, 0, 0),
        )

    return _make
