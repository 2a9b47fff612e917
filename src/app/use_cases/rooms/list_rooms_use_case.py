"""
List Rooms Use Case

Retrieves rooms for the student dashboard, optionally filtered by type.
"""

import logging

from src.app.services.housing_api import IHousingApi
from src.app.use_cases.dtos import ErrorInfo
from src.domain.entities import RoomType
from src.domain.exceptions import TransportError
from src.libs.result import Error, Result, Return

from .dtos import RoomsResponse, RoomView

logger = logging.getLogger(__name__)

ALL_TYPES = "all"


class ListRoomsUseCase:
    """
    Use case for listing rooms.

    Business Rules:
    - room_type is "all" or a RoomType value
    - A failed fetch renders no rooms and reports the error
    """

    def __init__(self, api: IHousingApi):
        self.api = api

    async def execute(self, room_type: str = ALL_TYPES) -> Result[RoomsResponse]:
        if room_type != ALL_TYPES:
            try:
                wanted = RoomType(room_type)
            except ValueError:
                return Return.err(
                    Error(
                        "INVALID_ROOM_TYPE",
                        f"Invalid room type: {room_type}. "
                        "Must be one of: all, single, double, triple",
                    )
                )
        else:
            wanted = None

        try:
            rooms = await self.api.fetch_rooms()
        except TransportError as exc:
            logger.warning(f"Could not fetch rooms: {exc}")
            return Return.ok(RoomsResponse(rooms=[], error=ErrorInfo.from_transport(exc)))

        views = [
            RoomView.from_room(room)
            for room in rooms
            if wanted is None or room.type == wanted
        ]
        return Return.ok(RoomsResponse(rooms=views))
