from abc import ABC, abstractmethod
from typing import List

from pydantic import BaseModel

from src.domain.entities import (
    ActivityLogEntry,
    Invite,
    InviteStatus,
    Room,
    WorkOrder,
    WorkOrderStatus,
)


class BookingOutcome(BaseModel):
    """Answer of the housing API to a booking request"""

    success: bool
    message: str = ""


class IHousingApi(ABC):
    """
    Housing API collaborator interface - application layer

    Every call may raise TransportError. Implementations own the wire
    format; the core only sees domain entities.
    """

    @abstractmethod
    async def fetch_rooms(self) -> List[Room]:
        """Get all rooms"""
        pass

    @abstractmethod
    async def fetch_invites(self) -> List[Invite]:
        """Get the current student's invites"""
        pass

    @abstractmethod
    async def fetch_work_orders(self) -> List[WorkOrder]:
        """Get all work orders assigned to the technician"""
        pass

    @abstractmethod
    async def submit_invite_response(
        self, invite_id: str, decision: InviteStatus
    ) -> bool:
        """Report an accept/decline decision, True on success"""
        pass

    @abstractmethod
    async def submit_work_order_status(
        self, order_id: str, status: WorkOrderStatus
    ) -> bool:
        """Report a work order status change, True on success"""
        pass

    @abstractmethod
    async def book_room(self, room_id: str) -> BookingOutcome:
        """Request a booking for a room"""
        pass

    @abstractmethod
    async def send_invite(self, group: str, email: str) -> bool:
        """Invite a roommate into a booking group, True on success"""
        pass

    @abstractmethod
    async def fetch_activity_log(self, role: str) -> List[ActivityLogEntry]:
        """Get the activity log for a dashboard role"""
        pass

    async def aclose(self) -> None:
        """Release network resources, if any"""
        pass
