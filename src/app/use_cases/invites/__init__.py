"""
Student Invite Use Cases

Invite panel rendering, responses, countdown reads and group invites.
"""

from .dtos import (
    ActivityLogResponse,
    CountdownsResponse,
    CountdownView,
    InvitesResponse,
    InviteView,
    RespondToInviteResponse,
    SendInviteResponse,
)
from .get_activity_log_use_case import GetActivityLogUseCase
from .get_countdowns_use_case import GetCountdownsUseCase
from .refresh_invites_use_case import RefreshInvitesUseCase
from .respond_to_invite_use_case import RespondToInviteUseCase
from .send_invite_use_case import SendInviteUseCase

__all__ = [
    "RefreshInvitesUseCase",
    "RespondToInviteUseCase",
    "GetCountdownsUseCase",
    "SendInviteUseCase",
    "GetActivityLogUseCase",
    "InvitesResponse",
    "InviteView",
    "CountdownView",
    "CountdownsResponse",
    "RespondToInviteResponse",
    "SendInviteResponse",
    "ActivityLogResponse",
]
