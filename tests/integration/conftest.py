from datetime import UTC, datetime

import pytest
import pytest_asyncio
from httpx import AsyncClient

from src.adapter.services.in_memory_housing_api import InMemoryHousingApi
from src.app.services.countdown_board import CountdownBoard
from src.app.services.invitation_engine import InvitationEngine
from src.app.services.timer_registry import TimerRegistry
from src.depends import (
    get_clock,
    get_countdown_board,
    get_housing_api,
    get_invitation_engine,
    get_timer_registry,
)
from tests.fixtures.clock import FakeClock

T0 = datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def fake_clock():
    return FakeClock(T0)


@pytest.fixture
def housing_api(fake_clock):
    return InMemoryHousingApi.from_seed_file(fake_clock)


@pytest_asyncio.fixture
async def timer_registry(fake_clock):
    registry = TimerRegistry(fake_clock, interval_seconds=1.0)
    yield registry
    registry.cancel_all()


@pytest_asyncio.fixture
async def client(housing_api, fake_clock, timer_registry):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    engine = InvitationEngine()
    board = CountdownBoard()

    app.dependency_overrides[get_housing_api] = lambda: housing_api
    app.dependency_overrides[get_clock] = lambda: fake_clock
    app.dependency_overrides[get_timer_registry] = lambda: timer_registry
    app.dependency_overrides[get_invitation_engine] = lambda: engine
    app.dependency_overrides[get_countdown_board] = lambda: board

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
