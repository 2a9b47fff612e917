"""
Respond To Invite Use Case

Handles a student accepting or declining a booking-group invite.
"""

import logging

from src.app.services.countdown_board import CountdownBoard
from src.app.services.housing_api import IHousingApi
from src.app.services.invitation_engine import InvitationEngine
from src.app.services.timer_registry import TimerRegistry
from src.domain.exceptions import TransportError
from src.libs.result import Error, Result, Return

from .dtos import RespondToInviteResponse

logger = logging.getLogger(__name__)


class RespondToInviteUseCase:
    """
    Use case for answering an invite.

    Business Rules:
    - Only pending invites can be answered (INVALID_TRANSITION otherwise)
    - The local status changes first, then the invite's countdown stops,
      then the housing API is notified
    - A failed notification does not roll the local status back
    """

    def __init__(
        self,
        api: IHousingApi,
        engine: InvitationEngine,
        registry: TimerRegistry,
        board: CountdownBoard,
    ):
        self.api = api
        self.engine = engine
        self.registry = registry
        self.board = board

    async def execute(
        self, invite_id: str, decision: str
    ) -> Result[RespondToInviteResponse]:
        """
        Execute respond to invite use case.

        Args:
            invite_id: ID of the invite being answered
            decision: "accepted" or "declined"

        Returns:
            Result with RespondToInviteResponse DTO, or Error
        """
        result = self.engine.respond(invite_id, decision)
        if result.is_err():
            return result

        invite = result.value
        self.registry.cancel(invite.id)
        self.board.remove(invite.id)

        try:
            submitted = await self.api.submit_invite_response(invite.id, invite.status)
        except TransportError as exc:
            logger.warning(f"Could not submit response for invite {invite.id}: {exc}")
            return Return.err(Error("TRANSPORT_ERROR", str(exc)))

        if not submitted:
            return Return.err(
                Error("SUBMIT_REJECTED", "The housing service rejected the response")
            )

        return Return.ok(
            RespondToInviteResponse(invite_id=invite.id, status=invite.status.value)
        )
