"""
Student Room Use Cases
"""

from .book_room_use_case import BookRoomUseCase
from .dtos import BookRoomResponse, RoomsResponse, RoomView
from .list_rooms_use_case import ListRoomsUseCase

__all__ = [
    "ListRoomsUseCase",
    "BookRoomUseCase",
    "RoomsResponse",
    "RoomView",
    "BookRoomResponse",
]
