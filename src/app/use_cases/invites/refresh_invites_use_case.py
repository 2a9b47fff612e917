"""
Refresh Invites Use Case

Fetches the student's invites and restarts their countdowns.
"""

import logging
from functools import partial

from src.app.services.clock import IClock
from src.app.services.countdown_board import CountdownBoard
from src.app.services.housing_api import IHousingApi
from src.app.services.invitation_engine import InvitationEngine
from src.app.services.timer_registry import TimerRegistry
from src.app.use_cases.dtos import ErrorInfo
from src.domain.exceptions import TransportError
from src.libs.result import Result, Return

from .dtos import CountdownView, InviteView, InvitesResponse

logger = logging.getLogger(__name__)


class RefreshInvitesUseCase:
    """
    Use case for (re-)rendering the invite panel.

    Business Rules:
    - Every running countdown is cancelled before any new one starts
    - Only pending invites get a countdown
    - A failed fetch renders an empty list and reports the error; answered
      and expired invites are remembered so their status survives
    """

    def __init__(
        self,
        api: IHousingApi,
        engine: InvitationEngine,
        registry: TimerRegistry,
        board: CountdownBoard,
        clock: IClock,
    ):
        self.api = api
        self.engine = engine
        self.registry = registry
        self.board = board
        self.clock = clock

    async def execute(self) -> Result[InvitesResponse]:
        """
        Execute refresh invites use case.

        Returns:
            Result with InvitesResponse DTO; fetch failures are carried in
            its error field with an empty invite list
        """
        try:
            fetched = await self.api.fetch_invites()
        except TransportError as exc:
            logger.warning(f"Could not fetch invites: {exc}")
            self._reset()
            dropped = self.engine.discard_pending()
            logger.debug(f"Dropped {dropped} pending invite(s) until the next fetch")
            return Return.ok(
                InvitesResponse(invites=[], error=ErrorInfo.from_transport(exc))
            )

        # Nothing below awaits, so no stale tick can interleave with the restart
        self._reset()
        invites = self.engine.load(fetched)

        now = self.clock.now()
        views = []
        for invite in invites:
            countdown = None
            if invite.is_pending:
                state = self.engine.compute_remaining(invite, now)
                self.board.update(invite.id, state)
                self.registry.start_countdown(
                    invite,
                    on_tick=partial(self.board.update, invite.id),
                    on_expire=partial(self._on_expire, invite.id),
                )
                countdown = CountdownView.from_state(invite.id, state)
            views.append(InviteView.from_invite(invite, countdown))

        return Return.ok(InvitesResponse(invites=views))

    def _reset(self) -> None:
        self.registry.cancel_all()
        self.board.reset()

    def _on_expire(self, invite_id: str) -> None:
        if self.engine.expire(invite_id):
            self.board.mark_expired(invite_id)
