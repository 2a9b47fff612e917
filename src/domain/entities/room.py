"""
Room Entity

Bookable hostel room.
"""

from pydantic import BaseModel, field_validator

from .enums import RoomStatus, RoomType


class Room(BaseModel):
    """Room entity - a hostel room students can book"""

    id: str
    type: RoomType
    price: int
    status: RoomStatus = RoomStatus.available

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value):
        return str(value)

    @property
    def is_bookable(self) -> bool:
        return self.status == RoomStatus.available
