"""
Hostel Dashboard Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class InviteStatus(str, Enum):
    """Booking-group invite status"""

    pending = "pending"
    accepted = "accepted"
    declined = "declined"
    expired = "expired"


class WorkOrderPriority(str, Enum):
    """Maintenance work order priority"""

    low = "low"
    medium = "medium"
    high = "high"


class WorkOrderStatus(str, Enum):
    """Maintenance work order status"""

    pending = "pending"
    in_progress = "in-progress"
    completed = "completed"


class RoomType(str, Enum):
    """Room occupancy type"""

    single = "single"
    double = "double"
    triple = "triple"


class RoomStatus(str, Enum):
    """Room booking status"""

    available = "available"
    pending = "pending"
    booked = "booked"


class DensityTier(str, Enum):
    """Heatmap severity tier for a room's open work orders"""

    none = "none"
    low = "low"
    medium = "medium"
    high = "high"
