from datetime import timedelta

import pytest

from src.app.services.countdown_board import CountdownBoard
from src.app.services.invitation_engine import InvitationEngine
from src.app.services.timer_registry import TimerRegistry
from src.app.use_cases.invites.refresh_invites_use_case import RefreshInvitesUseCase
from src.domain.entities import InviteStatus
from src.domain.exceptions import TransportError


@pytest.fixture
def engine():
    return InvitationEngine()


@pytest.fixture
def board():
    return CountdownBoard()


@pytest.fixture
def registry(fake_clock):
    return TimerRegistry(fake_clock, interval_seconds=1.0)


@pytest.fixture
def use_case(mock_api, engine, registry, board, fake_clock):
    return RefreshInvitesUseCase(mock_api, engine, registry, board, fake_clock)


@pytest.mark.asyncio
async def test_refresh_renders_invites_and_starts_countdowns(
    use_case, mock_api, registry, make_invite, t0
):
    mock_api.fetch_invites.return_value = [
        make_invite("1", created_at=t0 - timedelta(minutes=2)),
        make_invite("2", created_at=t0 - timedelta(minutes=7), sender="Meera"),
    ]

    result = await use_case.execute()

    assert result.is_ok()
    response = result.value
    assert response.error is None
    assert [view.id for view in response.invites] == ["1", "2"]
    assert response.invites[0].countdown.remaining_seconds == 8 * 60
    assert response.invites[1].sender == "Meera"
    assert response.invites[1].countdown.label == "Expires in: 03m 00s"
    assert sorted(registry.active_ids()) == ["1", "2"]
    registry.cancel_all()


@pytest.mark.asyncio
async def test_refresh_twice_never_duplicates_timers(
    use_case, mock_api, registry, fake_clock, board, make_invite
):
    mock_api.fetch_invites.return_value = [make_invite("1"), make_invite("2")]

    await use_case.execute()
    first_handles = {registry._handles[i] for i in registry.active_ids()}
    await use_case.execute()
    await fake_clock.advance(1)

    assert len(registry) == 2
    assert all(handle.cancelled for handle in first_handles)
    assert fake_clock.sleepers == 2
    assert board.get("1").remaining == timedelta(minutes=9, seconds=59)
    registry.cancel_all()


@pytest.mark.asyncio
async def test_answered_invites_get_no_countdown(use_case, mock_api, registry, make_invite):
    mock_api.fetch_invites.return_value = [
        make_invite("1", status=InviteStatus.accepted),
        make_invite("2"),
    ]

    result = await use_case.execute()

    invites = result.value.invites
    assert invites[0].status == "accepted"
    assert invites[0].countdown is None
    assert registry.active_ids() == ["2"]
    registry.cancel_all()


@pytest.mark.asyncio
async def test_countdown_expiry_marks_invite_expired(
    use_case, mock_api, engine, board, fake_clock, make_invite, t0
):
    mock_api.fetch_invites.return_value = [
        make_invite("1", created_at=t0 - timedelta(minutes=9, seconds=58))
    ]
    await use_case.execute()

    await fake_clock.advance(1)
    assert board.get("1").label == "Expires in: 00m 01s"

    await fake_clock.advance(1)
    assert engine.get("1").status == InviteStatus.expired
    assert board.get("1").expired is True


@pytest.mark.asyncio
async def test_fetch_failure_renders_empty_list_with_error(
    use_case, mock_api, registry, engine, make_invite
):
    mock_api.fetch_invites.return_value = [make_invite("1")]
    await use_case.execute()
    assert len(registry) == 1

    mock_api.fetch_invites.side_effect = TransportError("fetch_invites", "connection refused")
    result = await use_case.execute()

    assert result.is_ok()
    assert result.value.invites == []
    assert result.value.error.code == "TRANSPORT_ERROR"
    assert "connection refused" in result.value.error.message
    assert len(registry) == 0
    assert engine.all() == []


@pytest.mark.asyncio
async def test_refresh_after_local_answer_keeps_answer(
    use_case, mock_api, engine, registry, make_invite
):
    mock_api.fetch_invites.return_value = [make_invite("1")]
    await use_case.execute()
    engine.respond("1", "declined")

    mock_api.fetch_invites.return_value = [make_invite("1")]
    result = await use_case.execute()

    assert result.value.invites[0].status == "declined"
    assert len(registry) == 0


@pytest.mark.asyncio
async def test_answer_survives_failed_fetch_and_pending_server_record(
    use_case, mock_api, engine, registry, make_invite
):
    """Answered locally, submit lost, fetch fails, then the server still says pending"""
    mock_api.fetch_invites.return_value = [make_invite("1"), make_invite("2")]
    await use_case.execute()
    engine.respond("1", "accepted")

    mock_api.fetch_invites.side_effect = TransportError("fetch_invites", "timeout")
    await use_case.execute()
    assert engine.get("1").status == InviteStatus.accepted
    assert engine.get("2") is None

    mock_api.fetch_invites.side_effect = None
    mock_api.fetch_invites.return_value = [make_invite("1"), make_invite("2")]
    result = await use_case.execute()

    statuses = {view.id: view.status for view in result.value.invites}
    assert statuses == {"1": "accepted", "2": "pending"}
    assert registry.active_ids() == ["2"]
    assert engine.respond("1", "declined").error.code == "INVALID_TRANSITION"
    registry.cancel_all()
