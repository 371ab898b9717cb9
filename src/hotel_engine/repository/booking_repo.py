from decimal import Decimal
from pathlib import Path
from typing import List

from hotel_engine.models.bookings import Booking, BookingStatus
from hotel_engine.repository.json_store import JsonRecordStore
from hotel_engine.utils.datetime_normaliser import from_iso_date, to_iso_date


def booking_to_item(booking: Booking) -> dict:
    return {
        "bookingId": booking.booking_id,
        "guestId": booking.guest_id,
        "roomNumber": booking.room_number,
        "checkInDate": to_iso_date(booking.check_in),
        "checkOutDate": to_iso_date(booking.check_out),
        "status": booking.status.value,
        "totalCost": booking.total_cost,
        "refundAmount": booking.refund_amount,
    }


def booking_from_item(item: dict) -> Booking:
    return Booking(
        booking_id=item["bookingId"],
        guest_id=item["guestId"],
        room_number=item["roomNumber"],
        check_in=from_iso_date(item["checkInDate"]),
        check_out=from_iso_date(item["checkOutDate"]),
        status=BookingStatus(item["status"]),
        total_cost=Decimal(str(item.get("totalCost", 0))),
        refund_amount=Decimal(str(item.get("refundAmount", 0))),
    )


class BookingRepository(JsonRecordStore[Booking]):
    def __init__(self, path: Path):
        super().__init__(
            path,
            id_of=lambda booking: booking.booking_id,
            to_item=booking_to_item,
            from_item=booking_from_item,
        )

    def find_by_guest(self, guest_id: str) -> List[Booking]:
        return self._find_where(lambda booking: booking.guest_id == guest_id)

    def find_by_room(self, room_number: str) -> List[Booking]:
        return self._find_where(
            lambda booking: booking.room_number == room_number
        )

    def find_by_status(self, status: BookingStatus) -> List[Booking]:
        return self._find_where(lambda booking: booking.status == status)

    def find_confirmed_for_room(self, room_number: str) -> List[Booking]:
        return self._find_where(
            lambda booking: booking.room_number == room_number
            and booking.status == BookingStatus.CONFIRMED
        )
