from datetime import timedelta

import pytest

from src.app.services.invitation_engine import InvitationEngine, compute_remaining
from src.domain.entities import InviteStatus


@pytest.fixture
def engine():
    return InvitationEngine()


# ============================================================================
# compute_remaining
# ============================================================================


def test_remaining_at_creation_is_full_window(make_invite, t0):
    state = compute_remaining(make_invite(created_at=t0), t0)

    assert state.remaining == timedelta(minutes=10)
    assert state.expired is False
    assert state.label == "Expires in: 10m 00s"


def test_remaining_one_second_before_expiry(make_invite, t0):
    state = compute_remaining(make_invite(created_at=t0), t0 + timedelta(minutes=9, seconds=59))

    assert state.remaining == timedelta(seconds=1)
    assert state.expired is False
    assert state.label == "Expires in: 00m 01s"


@pytest.mark.parametrize("elapsed", [timedelta(minutes=10), timedelta(hours=3)])
def test_remaining_clamps_to_zero_once_expired(make_invite, t0, elapsed):
    state = compute_remaining(make_invite(created_at=t0), t0 + elapsed)

    assert state.remaining == timedelta(0)
    assert state.expired is True
    assert state.label == "Expired"


def test_remaining_never_increases_as_time_advances(make_invite, t0):
    invite = make_invite(created_at=t0)
    samples = [
        compute_remaining(invite, t0 + timedelta(seconds=s)).remaining
        for s in range(-30, 700, 7)
    ]

    assert samples == sorted(samples, reverse=True)


def test_compute_remaining_is_pure(make_invite, t0):
    invite = make_invite(created_at=t0)
    now = t0 + timedelta(minutes=4)

    assert compute_remaining(invite, now) == compute_remaining(invite, now)
    assert invite.status == InviteStatus.pending


# ============================================================================
# respond / expire
# ============================================================================


def test_respond_accepts_pending_invite(engine, make_invite):
    engine.load([make_invite("1")])

    result = engine.respond("1", "accepted")

    assert result.is_ok()
    assert result.value.status == InviteStatus.accepted
    assert engine.get("1").status == InviteStatus.accepted


def test_respond_to_answered_invite_is_invalid_transition(engine, make_invite):
    engine.load([make_invite("1")])
    engine.respond("1", "declined")

    result = engine.respond("1", "accepted")

    assert result.is_err()
    assert result.error.code == "INVALID_TRANSITION"
    assert engine.get("1").status == InviteStatus.declined


def test_respond_to_expired_invite_is_invalid_transition(engine, make_invite):
    engine.load([make_invite("1")])
    engine.expire("1")

    result = engine.respond("1", "accepted")

    assert result.is_err()
    assert result.error.code == "INVALID_TRANSITION"
    assert engine.get("1").status == InviteStatus.expired


@pytest.mark.parametrize("decision", ["expired", "pending", "maybe"])
def test_respond_rejects_non_user_decisions(engine, make_invite, decision):
    engine.load([make_invite("1")])

    result = engine.respond("1", decision)

    assert result.is_err()
    assert result.error.code == "INVALID_DECISION"
    assert engine.get("1").status == InviteStatus.pending


def test_respond_to_unknown_invite(engine):
    result = engine.respond("404", "accepted")

    assert result.is_err()
    assert result.error.code == "INVITE_NOT_FOUND"


@pytest.mark.parametrize("decision", ["accepted", "declined"])
def test_expire_after_respond_is_noop(engine, make_invite, decision):
    """The user's answer wins regardless of which event arrives last"""
    engine.load([make_invite("1")])

    engine.respond("1", decision)
    expired = engine.expire("1")

    assert expired is False
    assert engine.get("1").status == InviteStatus(decision)


def test_expire_pending_invite(engine, make_invite):
    engine.load([make_invite("1")])

    assert engine.expire("1") is True
    assert engine.get("1").status == InviteStatus.expired
    assert engine.expire("1") is False


def test_expire_unknown_invite_is_noop(engine):
    assert engine.expire("404") is False


def test_expire_does_not_look_at_the_clock(engine, make_invite, t0):
    """Expiry trusts the countdown: status is all that is checked"""
    engine.load([make_invite("1", created_at=t0 + timedelta(days=1))])

    assert engine.expire("1") is True


# ============================================================================
# load / discard_pending
# ============================================================================


def test_load_replaces_active_set(engine, make_invite):
    engine.load([make_invite("1"), make_invite("2")])

    engine.load([make_invite("3")])

    assert [invite.id for invite in engine.all()] == ["3"]
    assert engine.get("1") is None


def test_load_keeps_local_terminal_status(engine, make_invite):
    engine.load([make_invite("1")])
    engine.respond("1", "accepted")

    # Server has not caught up yet and still reports pending
    engine.load([make_invite("1")])

    assert engine.get("1").status == InviteStatus.accepted
    assert engine.pending() == []


def test_load_takes_server_terminal_status(engine, make_invite):
    engine.load([make_invite("1")])

    engine.load([make_invite("1", status=InviteStatus.declined)])

    assert engine.get("1").status == InviteStatus.declined


def test_discard_pending_keeps_answered_and_expired(engine, make_invite):
    engine.load([make_invite("1"), make_invite("2"), make_invite("3")])
    engine.respond("1", "accepted")
    engine.expire("3")

    dropped = engine.discard_pending()

    assert dropped == 1
    assert [invite.id for invite in engine.all()] == ["1", "3"]
    assert engine.pending() == []


@pytest.mark.parametrize(
    "local,server",
    [
        ("accepted", InviteStatus.declined),
        ("declined", InviteStatus.expired),
    ],
)
def test_load_keeps_local_answer_over_other_server_status(engine, make_invite, local, server):
    engine.load([make_invite("1")])
    engine.respond("1", local)

    engine.load([make_invite("1", status=server)])

    assert engine.get("1").status == InviteStatus(local)


def test_load_keeps_local_expiry_over_server_answer(engine, make_invite):
    engine.load([make_invite("1")])
    engine.expire("1")

    engine.load([make_invite("1", status=InviteStatus.accepted)])

    assert engine.get("1").status == InviteStatus.expired
    assert engine.respond("1", "declined").error.code == "INVALID_TRANSITION"


def test_discard_pending_then_reload_keeps_answer(engine, make_invite):
    """A dropped fetch in between does not bring an answered invite back"""
    engine.load([make_invite("1"), make_invite("2")])
    engine.respond("1", "accepted")
    engine.discard_pending()

    engine.load([make_invite("1"), make_invite("2")])

    assert engine.get("1").status == InviteStatus.accepted
    assert [invite.id for invite in engine.pending()] == ["2"]
