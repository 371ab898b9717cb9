from decimal import Decimal
from pathlib import Path
from typing import List

from hotel_engine.models.rooms import Room, RoomType
from hotel_engine.repository.json_store import JsonRecordStore


def room_to_item(room: Room) -> dict:
    return {
        "roomNumber": room.room_number,
        "type": room.type.value,
        "pricePerNight": room.price_per_night,
        "available": room.available,
        "refundable": room.refundable,
    }


def room_from_item(item: dict) -> Room:
    return Room(
        room_number=item["roomNumber"],
        type=RoomType(item["type"]),
        price_per_night=Decimal(str(item["pricePerNight"])),
        available=bool(item.get("available", True)),
        refundable=bool(item.get("refundable", True)),
    )


class RoomRepository(JsonRecordStore[Room]):
    def __init__(self, path: Path):
        super().__init__(
            path,
            id_of=lambda room: room.room_number,
            to_item=room_to_item,
            from_item=room_from_item,
        )

    def find_available(self) -> List[Room]:
        return self._find_where(lambda room: room.available)

    def find_available_by_type(self, room_type: RoomType) -> List[Room]:
        return self._find_where(
            lambda room: room.available and room.type == room_type
        )
