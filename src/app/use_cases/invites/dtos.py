"""
Invite Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the student invite panel.
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.dtos import ErrorInfo
from src.domain.entities import ActivityLogEntry, CountdownState, Invite


# ============================================================================
# View DTOs
# ============================================================================


class CountdownView(BaseModel):
    """Countdown display state for one invite"""

    invite_id: str
    remaining_seconds: int
    expired: bool
    label: str

    @classmethod
    def from_state(cls, invite_id: str, state: CountdownState) -> "CountdownView":
        return cls(
            invite_id=invite_id,
            remaining_seconds=int(state.remaining.total_seconds()),
            expired=state.expired,
            label=state.label,
        )


class InviteView(BaseModel):
    """Invite card as rendered on the student dashboard"""

    id: str
    sender: str
    group: str
    status: str
    expires_at: str
    countdown: Optional[CountdownView] = None

    @classmethod
    def from_invite(
        cls, invite: Invite, countdown: Optional[CountdownView] = None
    ) -> "InviteView":
        return cls(
            id=invite.id,
            sender=invite.sender,
            group=invite.group,
            status=invite.status.value,
            expires_at=invite.expires_at.isoformat(),
            countdown=countdown,
        )


# ============================================================================
# Response DTOs
# ============================================================================


class InvitesResponse(BaseModel):
    """Response for refresh invites use case"""

    invites: List[InviteView]
    error: Optional[ErrorInfo] = None


class CountdownsResponse(BaseModel):
    """Latest tick of every running countdown"""

    countdowns: List[CountdownView]


class RespondToInviteResponse(BaseModel):
    """Response for respond to invite use case"""

    invite_id: str
    status: str


class SendInviteResponse(BaseModel):
    """Response for send invite use case"""

    status: str
    message: str


class ActivityLogResponse(BaseModel):
    """Response for get activity log use case"""

    entries: List[ActivityLogEntry]
    error: Optional[ErrorInfo] = None
