"""
Book Room Use Case

Handles a student's booking request for a room.
"""

import logging

from src.app.services.housing_api import IHousingApi
from src.domain.exceptions import TransportError
from src.libs.result import Error, Result, Return

from .dtos import BookRoomResponse

logger = logging.getLogger(__name__)


class BookRoomUseCase:
    def __init__(self, api: IHousingApi):
        self.api = api

    async def execute(self, room_id: str) -> Result[BookRoomResponse]:
        try:
            outcome = await self.api.book_room(room_id)
        except TransportError as exc:
            logger.warning(f"Could not book room {room_id}: {exc}")
            return Return.err(Error("TRANSPORT_ERROR", str(exc)))

        if not outcome.success:
            return Return.err(
                Error("BOOKING_FAILED", outcome.message or f"Room {room_id} is not available")
            )

        return Return.ok(
            BookRoomResponse(
                room_id=str(room_id),
                status="booked",
                message=outcome.message or f"Room {room_id} booked successfully!",
            )
        )
