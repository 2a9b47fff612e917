import logging
import os
from datetime import timedelta
from typing import Dict, List, Optional

import yaml

from src.app.services.clock import IClock
from src.app.services.housing_api import BookingOutcome, IHousingApi
from src.domain.entities import (
    ActivityLogEntry,
    Invite,
    InviteStatus,
    Room,
    RoomStatus,
    WorkOrder,
    WorkOrderStatus,
)

logger = logging.getLogger(__name__)

SEED_FILE_PATH = os.path.join(os.path.dirname(__file__), "seed_data.yaml")


class InMemoryHousingApi(IHousingApi):
    """
    Housing API collaborator backed by process memory.

    Serves copies of its records so callers never mutate the store by
    accident. Used for local runs and integration tests.
    """

    def __init__(
        self,
        clock: IClock,
        rooms: Optional[List[Room]] = None,
        invites: Optional[List[Invite]] = None,
        work_orders: Optional[List[WorkOrder]] = None,
    ):
        self.clock = clock
        self.rooms: Dict[str, Room] = {room.id: room for room in rooms or []}
        self.invites: Dict[str, Invite] = {invite.id: invite for invite in invites or []}
        self.work_orders: Dict[str, WorkOrder] = {
            order.id: order for order in work_orders or []
        }
        self.activity: Dict[str, List[ActivityLogEntry]] = {
            "student": [],
            "technician": [],
        }

    @classmethod
    def from_seed_file(cls, clock: IClock, path: str = SEED_FILE_PATH) -> "InMemoryHousingApi":
        with open(path, "r") as r_file:
            data = yaml.safe_load(r_file) or dict()

        now = clock.now()
        invites = []
        for item in data.get("invites", []):
            item = dict(item)
            minutes_ago = item.pop("minutes_ago", 0)
            item["createdAt"] = now - timedelta(minutes=minutes_ago)
            invites.append(Invite.model_validate(item))

        return cls(
            clock,
            rooms=[Room.model_validate(item) for item in data.get("rooms", [])],
            invites=invites,
            work_orders=[WorkOrder.model_validate(item) for item in data.get("work_orders", [])],
        )

    def _log(self, role: str, action: str) -> None:
        self.activity.setdefault(role, []).append(
            ActivityLogEntry(action=action, timestamp=self.clock.now())
        )

    async def fetch_rooms(self) -> List[Room]:
        return [room.model_copy() for room in self.rooms.values()]

    async def fetch_invites(self) -> List[Invite]:
        return [invite.model_copy() for invite in self.invites.values()]

    async def fetch_work_orders(self) -> List[WorkOrder]:
        return [order.model_copy() for order in self.work_orders.values()]

    async def fetch_activity_log(self, role: str) -> List[ActivityLogEntry]:
        return list(self.activity.get(role, []))

    async def submit_invite_response(self, invite_id: str, decision: InviteStatus) -> bool:
        invite = self.invites.get(invite_id)
        if invite is None or not invite.is_pending:
            return False
        invite.status = InviteStatus(decision)
        self._log("student", f"Invite {invite_id} {invite.status.value}")
        return True

    async def submit_work_order_status(self, order_id: str, status: WorkOrderStatus) -> bool:
        order = self.work_orders.get(order_id)
        if order is None:
            return False
        order.status = WorkOrderStatus(status)
        self._log("technician", f"Work order {order_id} moved to {order.status.value}")
        return True

    async def book_room(self, room_id: str) -> BookingOutcome:
        room = self.rooms.get(str(room_id))
        if room is None:
            return BookingOutcome(success=False, message=f"Room {room_id} does not exist")
        if not room.is_bookable:
            return BookingOutcome(
                success=False, message=f"Room {room_id} is {room.status.value}"
            )
        room.status = RoomStatus.booked
        self._log("student", f"Booked room {room_id}")
        return BookingOutcome(success=True, message=f"Room {room_id} booked successfully!")

    async def send_invite(self, group: str, email: str) -> bool:
        self._log("student", f'Sent invite to {email} for group "{group}"')
        return True
