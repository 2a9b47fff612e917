"""
Invite Entity

Time-bounded invitation to join a booking group.
"""

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.exceptions import InvalidTransition, TimerRaceIgnored

from .enums import InviteStatus

# Invites can be answered for 10 minutes after creation
INVITE_WINDOW = timedelta(minutes=10)

_ALLOWED_TRANSITIONS = {
    InviteStatus.pending: {
        InviteStatus.accepted,
        InviteStatus.declined,
        InviteStatus.expired,
    },
    InviteStatus.accepted: set(),
    InviteStatus.declined: set(),
    InviteStatus.expired: set(),
}


class Invite(BaseModel):
    """
    Invite entity - a roommate invitation into a booking group.

    Business Rules:
    - Expires INVITE_WINDOW after created_at
    - pending -> accepted | declined | expired, all terminal
    - Status is only changed through transition_to() and expire()
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    sender: str = Field(alias="from")
    group: str
    created_at: datetime = Field(alias="createdAt")
    status: InviteStatus = Field(default=InviteStatus.pending)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value):
        return str(value)

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Naive timestamps from the API are UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def expires_at(self) -> datetime:
        return self.created_at + INVITE_WINDOW

    @property
    def is_pending(self) -> bool:
        return self.status == InviteStatus.pending

    @property
    def is_terminal(self) -> bool:
        return not _ALLOWED_TRANSITIONS[self.status]

    def transition_to(self, target: InviteStatus) -> None:
        """
        Move the invite to a new status.

        Raises:
            InvalidTransition: target is not reachable from the current status
        """
        if target not in _ALLOWED_TRANSITIONS[self.status]:
            raise InvalidTransition(
                "Invite", self.id, self.status.value, InviteStatus(target).value
            )
        self.status = target

    def expire(self) -> None:
        """
        Mark a pending invite as expired.

        Raises:
            TimerRaceIgnored: the invite was answered before the expiry landed
        """
        if not self.is_pending:
            raise TimerRaceIgnored(self.id, self.status.value)
        self.status = InviteStatus.expired
