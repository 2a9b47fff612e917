from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.housing_api import IHousingApi
from src.domain.entities import Invite, WorkOrder
from tests.fixtures.clock import FakeClock

T0 = datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def t0():
    return T0


@pytest.fixture
def fake_clock():
    return FakeClock(T0)


@pytest.fixture
def mock_api():
    """Mock housing API collaborator with every call async"""
    api = MagicMock(spec=IHousingApi)
    api.fetch_rooms = AsyncMock(return_value=[])
    api.fetch_invites = AsyncMock(return_value=[])
    api.fetch_work_orders = AsyncMock(return_value=[])
    api.fetch_activity_log = AsyncMock(return_value=[])
    api.submit_invite_response = AsyncMock(return_value=True)
    api.submit_work_order_status = AsyncMock(return_value=True)
    api.book_room = AsyncMock()
    api.send_invite = AsyncMock(return_value=True)
    return api


@pytest.fixture
def make_invite():
    def _make(invite_id="1", created_at=T0, **kwargs):
        return Invite(
            id=invite_id,
            sender=kwargs.pop("sender", "Aarav"),
            group=kwargs.pop("group", "Block A Squad"),
            created_at=created_at,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_work_order():
    counter = {"next": 0}

    def _make(room_id="101", status="pending", **kwargs):
        counter["next"] += 1
        return WorkOrder(
            id=kwargs.pop("id", str(counter["next"])),
            room_id=room_id,
            task=kwargs.pop("task", f"Task {counter['next']}"),
            priority=kwargs.pop("priority", "medium"),
            status=status,
        )

    return _make
