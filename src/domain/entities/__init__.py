"""
Hostel Dashboard Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    DensityTier,
    InviteStatus,
    RoomStatus,
    RoomType,
    WorkOrderPriority,
    WorkOrderStatus,
)

# Export all entities
from .activity import ActivityLogEntry
from .countdown import CountdownState
from .density import DensityBucket
from .invite import INVITE_WINDOW, Invite
from .room import Room
from .work_order import WorkOrder

__all__ = [
    # Enums
    "DensityTier",
    "InviteStatus",
    "RoomStatus",
    "RoomType",
    "WorkOrderPriority",
    "WorkOrderStatus",
    # Entities
    "ActivityLogEntry",
    "CountdownState",
    "DensityBucket",
    "INVITE_WINDOW",
    "Invite",
    "Room",
    "WorkOrder",
]
