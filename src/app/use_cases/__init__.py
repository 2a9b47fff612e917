"""
Use Cases

Organized by dashboard area:
- invites/: Student invite panel (countdowns, responses, group invites)
- rooms/: Student room listing and booking
- work_orders/: Technician heatmap and task list

Import from subdirectories for better organization.
"""

from .invites import (
    GetActivityLogUseCase,
    GetCountdownsUseCase,
    RefreshInvitesUseCase,
    RespondToInviteUseCase,
    SendInviteUseCase,
)
from .rooms import (
    BookRoomUseCase,
    ListRoomsUseCase,
)
from .work_orders import (
    ListOpenWorkOrdersUseCase,
    LoadHeatmapUseCase,
    UpdateWorkOrderStatusUseCase,
)

__all__ = [
    # Invites
    "RefreshInvitesUseCase",
    "RespondToInviteUseCase",
    "GetCountdownsUseCase",
    "SendInviteUseCase",
    "GetActivityLogUseCase",
    # Rooms
    "ListRoomsUseCase",
    "BookRoomUseCase",
    # Work orders
    "LoadHeatmapUseCase",
    "ListOpenWorkOrdersUseCase",
    "UpdateWorkOrderStatusUseCase",
]
