from enum import Enum
from decimal import Decimal
from dataclasses import dataclass


class RoomType(str, Enum):
    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"
    SUITE = "SUITE"

    @property
    def display_name(self) -> str:
        return _ROOM_TYPE_DETAILS[self][0]

    @property
    def max_occupancy(self) -> int:
        return _ROOM_TYPE_DETAILS[self][1]


_ROOM_TYPE_DETAILS = {
    RoomType.SINGLE: ("Single Room", 1),
    RoomType.DOUBLE: ("Double Room", 2),
    RoomType.SUITE: ("Suite", 4),
}


@dataclass(eq=False)
class Room:
    room_number: str
    type: RoomType
    price_per_night: Decimal
    available: bool = True
    refundable: bool = True

    def __eq__(self, other):
        if not isinstance(other, Room):
            return NotImplemented
        return self.room_number == other.room_number

    def __hash__(self):
        return hash(("room", self.room_number))
