"""
Room Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.dtos import ErrorInfo
from src.domain.entities import Room


class RoomView(BaseModel):
    """Room card on the student dashboard"""

    id: str
    type: str
    price: int
    status: str
    bookable: bool

    @classmethod
    def from_room(cls, room: Room) -> "RoomView":
        return cls(
            id=room.id,
            type=room.type.value,
            price=room.price,
            status=room.status.value,
            bookable=room.is_bookable,
        )


class RoomsResponse(BaseModel):
    """Response for list rooms use case"""

    rooms: List[RoomView]
    error: Optional[ErrorInfo] = None


class BookRoomResponse(BaseModel):
    """Response for book room use case"""

    room_id: str
    status: str
    message: str
