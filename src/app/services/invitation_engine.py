"""
Invitation Engine

Owns invite state for the student dashboard: remaining-time computation and
the pending -> accepted | declined | expired state machine driven by user
responses and countdown expiry.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional

from src.domain.entities import CountdownState, Invite, InviteStatus
from src.domain.exceptions import InvalidTransition, TimerRaceIgnored
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

RESPONSE_DECISIONS = (InviteStatus.accepted, InviteStatus.declined)


def compute_remaining(invite: Invite, now: datetime) -> CountdownState:
    """
    Remaining answer time of an invite at ``now``.

    Pure: depends only on invite.created_at and now. Once the window has
    elapsed the remaining time is clamped to zero and ``expired`` is set.
    """
    remaining = invite.expires_at - now
    if remaining <= timedelta(0):
        return CountdownState(remaining=timedelta(0), expired=True)
    return CountdownState(remaining=remaining, expired=False)


class InvitationEngine:
    """
    In-memory holder of the active invite set.

    Business Rules:
    - A terminal status never changes again, including across refreshes
    - respond() fails with INVALID_TRANSITION unless the invite is pending
    - expire() is a silent no-op unless the invite is pending
    - Status is checked when each event is processed, so a response that
      lands before the expiry event always wins
    """

    def __init__(self):
        self._invites: Dict[str, Invite] = {}

    def load(self, invites: Iterable[Invite]) -> List[Invite]:
        """
        Replace the active set with a fresh fetch.

        A record that is already terminal locally keeps its local status,
        whatever the server reports for it.
        """
        fresh: Dict[str, Invite] = {}
        for invite in invites:
            known = self._invites.get(invite.id)
            if known is not None and known.is_terminal:
                invite = invite.model_copy(update={"status": known.status})
            fresh[invite.id] = invite
        self._invites = fresh
        return list(fresh.values())

    def get(self, invite_id: str) -> Optional[Invite]:
        return self._invites.get(invite_id)

    def all(self) -> List[Invite]:
        return list(self._invites.values())

    def pending(self) -> List[Invite]:
        return [invite for invite in self._invites.values() if invite.is_pending]

    def discard_pending(self) -> int:
        """
        Drop pending invites, keeping answered and expired ones.

        Used when their countdowns are torn down without a fresh fetch to
        restart them. Returns how many were dropped.
        """
        pending = [invite.id for invite in self.pending()]
        for invite_id in pending:
            del self._invites[invite_id]
        return len(pending)

    def compute_remaining(self, invite: Invite, now: datetime) -> CountdownState:
        return compute_remaining(invite, now)

    def respond(self, invite_id: str, decision: str) -> Result[Invite]:
        """
        Apply a user's accept/decline decision.

        Args:
            invite_id: ID of the invite being answered
            decision: "accepted" or "declined"

        Returns:
            Result with the updated Invite, or Error
            (INVALID_DECISION, INVITE_NOT_FOUND, INVALID_TRANSITION)
        """
        try:
            status = InviteStatus(decision)
        except ValueError:
            status = None
        if status not in RESPONSE_DECISIONS:
            return Return.err(
                Error(
                    "INVALID_DECISION",
                    f"Invalid decision: {decision}. Must be one of: accepted, declined",
                )
            )

        invite = self._invites.get(invite_id)
        if invite is None:
            return Return.err(Error("INVITE_NOT_FOUND", "Invite not found"))

        # No await between the status check and the write
        try:
            invite.transition_to(status)
        except InvalidTransition as exc:
            logger.warning(f"Ignoring response to invite {invite_id}: {exc}")
            return Return.err(Error("INVALID_TRANSITION", str(exc)))

        logger.info(f"Invite {invite_id} {status.value}")
        return Return.ok(invite)

    def expire(self, invite_id: str) -> bool:
        """
        Expire an invite whose countdown reached zero.

        Returns:
            True if the invite moved to expired, False if there was nothing
            to do (unknown id or already answered)
        """
        invite = self._invites.get(invite_id)
        if invite is None:
            logger.debug(f"Expiry for unknown invite {invite_id} ignored")
            return False

        try:
            invite.expire()
        except TimerRaceIgnored as race:
            logger.debug(str(race))
            return False

        logger.info(f"Invite {invite_id} expired")
        return True
