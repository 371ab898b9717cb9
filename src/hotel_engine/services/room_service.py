import logging
from datetime import date
from typing import List, Optional

from hotel_engine.models.rooms import Room, RoomType
from hotel_engine.repository.booking_repo import BookingRepository
from hotel_engine.repository.room_repo import RoomRepository
from hotel_engine.schemas.details import RoomDetails, parse_details
from hotel_engine.utils.custom_exceptions import (
    NotFoundException,
    RoomAlreadyExists,
    RoomInUse,
)

logger = logging.getLogger(__name__)


class RoomService:
    def __init__(
        self,
        room_repo: RoomRepository,
        booking_repo: BookingRepository,
    ):
        self.room_repo = room_repo
        self.booking_repo = booking_repo

    def add_room(self, details) -> Room:
        details = parse_details(RoomDetails, details)
        if self.room_repo.exists_by_id(details.room_number):
            raise RoomAlreadyExists(
                f"Room with number {details.room_number} already exists"
            )
        room = Room(**details.model_dump())
        self.room_repo.save(room)
        logger.info(f"Added room {room.room_number}")
        return room

    def update_room(self, details) -> Room:
        details = parse_details(RoomDetails, details)
        if not self.room_repo.exists_by_id(details.room_number):
            raise NotFoundException("room", details.room_number)
        room = Room(**details.model_dump())
        self.room_repo.save(room)
        return room

    def delete_room(self, room_number: str) -> bool:
        if self.booking_repo.find_by_room(room_number):
            raise RoomInUse(f"Room {room_number} is referenced by bookings")
        removed = self.room_repo.delete(room_number)
        if removed:
            logger.info(f"Deleted room {room_number}")
        return removed

    def find_by_room_number(self, room_number: str) -> Optional[Room]:
        return self.room_repo.find_by_id(room_number)

    def get_room(self, room_number: str) -> Room:
        room = self.room_repo.find_by_id(room_number)
        if room is None:
            raise NotFoundException("room", room_number)
        return room

    def get_all_rooms(self) -> List[Room]:
        return self.room_repo.find_all()

    def get_available_rooms(self) -> List[Room]:
        return self.room_repo.find_available()

    def get_available_rooms_by_type(self, room_type: RoomType) -> List[Room]:
        return self.room_repo.find_available_by_type(room_type)

    def search_by_room_number(self, term: str) -> List[Room]:
        term = term.lower()
        return [
            room
            for room in self.room_repo.find_all()
            if term in room.room_number.lower()
        ]

    def set_availability(self, room_number: str, available: bool) -> Room:
        room = self.get_room(room_number)
        room.available = available
        self.room_repo.save(room)
        return room

    def get_available_rooms_for_dates(self, check_in: date, check_out: date) -> List[Room]:
        return [
            room
            for room in self.room_repo.find_available()
            if not any(
                booking.overlaps(check_in, check_out)
                for booking in self.booking_repo.find_confirmed_for_room(room.room_number)
            )
        ]

    def get_total_room_count(self) -> int:
        return self.room_repo.count()

    def get_available_room_count(self) -> int:
        return len(self.room_repo.find_available())
