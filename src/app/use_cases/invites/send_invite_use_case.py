"""
Send Invite Use Case

Handles creating a booking group and inviting a roommate into it.
"""

import logging
import re

from src.app.services.housing_api import IHousingApi
from src.domain.exceptions import TransportError
from src.libs.result import Error, Result, Return

from .dtos import SendInviteResponse

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class SendInviteUseCase:
    """
    Use case for sending a roommate invite.

    Business Rules:
    - Group name and email are both required
    - Email must look like an address
    """

    def __init__(self, api: IHousingApi):
        self.api = api

    async def execute(self, group: str, email: str) -> Result[SendInviteResponse]:
        group = (group or "").strip()
        email = (email or "").strip()

        if not group or not email:
            return Return.err(
                Error("MISSING_FIELDS", "Please fill in all fields.")
            )

        if not EMAIL_PATTERN.match(email):
            return Return.err(Error("INVALID_EMAIL", f"Invalid email: {email}"))

        try:
            sent = await self.api.send_invite(group, email)
        except TransportError as exc:
            logger.warning(f"Could not send invite to {email}: {exc}")
            return Return.err(Error("TRANSPORT_ERROR", str(exc)))

        if not sent:
            return Return.err(
                Error("SUBMIT_REJECTED", "The housing service rejected the invite")
            )

        return Return.ok(
            SendInviteResponse(
                status="sent",
                message=f'Invite sent to {email} for group "{group}"!',
            )
        )
