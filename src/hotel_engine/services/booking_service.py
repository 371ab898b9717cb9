import logging
from datetime import date
from decimal import Decimal
from typing import Callable, List, Optional

from hotel_engine.config.settings import HotelSettings
from hotel_engine.models.bookings import Booking, BookingStatus
from hotel_engine.models.rooms import Room
from hotel_engine.repository.booking_repo import BookingRepository
from hotel_engine.services.refund_policy import (
    calculate_refund,
    resolve_refund_policy,
)
from hotel_engine.services.room_service import RoomService
from hotel_engine.utils.custom_exceptions import (
    InvalidDates,
    InvalidDetails,
    InvalidStatusTransition,
    NotFoundException,
    OverlappingBooking,
    RoomNotAvailable,
)
from hotel_engine.utils.datetime_normaliser import nights_between
from hotel_engine.utils.identifiers import BOOKING_PREFIX, generate_id
from hotel_engine.utils.money import calculate_total, calculate_vat

logger = logging.getLogger(__name__)


class BookingService:
    """Creates, cancels and completes bookings.

    Writes go to the booking collection first and the room collection
    second. The two writes are independent: if the room write fails the
    booking change is already on disk.
    """

    def __init__(
        self,
        booking_repo: BookingRepository,
        room_service: RoomService,
        settings: HotelSettings,
        today: Callable[[], date] = date.today,
    ):
        self.booking_repo = booking_repo
        self.room_service = room_service
        self.settings = settings
        self.today = today

    def create_booking(
        self,
        guest_id: str,
        room_number: str,
        check_in: Optional[date],
        check_out: Optional[date],
    ) -> Booking:
        if not guest_id:
            raise InvalidDetails("Guest id is required")
        self._validate_dates(check_in, check_out)

        room = self.room_service.find_by_room_number(room_number)
        if room is None:
            raise NotFoundException("room", room_number)
        if not room.available:
            raise RoomNotAvailable(f"Room {room_number} is not available")
        if self._has_overlapping_booking(room_number, check_in, check_out):
            raise OverlappingBooking(
                f"Room {room_number} has conflicting bookings for these dates"
            )

        booking = Booking(
            booking_id=generate_id(BOOKING_PREFIX),
            guest_id=guest_id,
            room_number=room_number,
            check_in=check_in,
            check_out=check_out,
            status=BookingStatus.CONFIRMED,
            total_cost=self.calculate_total_cost(room, check_in, check_out),
        )
        self.booking_repo.save(booking)
        self.room_service.set_availability(room_number, False)
        logger.info(
            f"Created booking {booking.booking_id} for room {room_number} "
            f"({check_in} to {check_out})"
        )
        return booking

    def cancel_booking(self, booking_id: str) -> Booking:
        booking = self.get_booking(booking_id)
        if booking.status == BookingStatus.CANCELLED:
            raise InvalidStatusTransition("Booking is already cancelled")
        if booking.status == BookingStatus.COMPLETED:
            raise InvalidStatusTransition("Cannot cancel a completed booking")

        room = self.room_service.find_by_room_number(booking.room_number)
        policy = resolve_refund_policy(room, self.settings.default_refund_policy)

        booking.refund_amount = calculate_refund(policy, booking, self.today())
        booking.status = BookingStatus.CANCELLED
        self.booking_repo.save(booking)
        self._release_room(booking, room)
        logger.info(
            f"Cancelled booking {booking_id} under {policy.value} policy, "
            f"refund {booking.refund_amount}"
        )
        return booking

    def complete_booking(self, booking_id: str) -> Booking:
        booking = self.get_booking(booking_id)
        if booking.status != BookingStatus.CONFIRMED:
            raise InvalidStatusTransition("Only confirmed bookings can be completed")

        booking.status = BookingStatus.COMPLETED
        self.booking_repo.save(booking)
        room = self.room_service.find_by_room_number(booking.room_number)
        self._release_room(booking, room)
        logger.info(f"Completed booking {booking_id}")
        return booking

    def get_all_bookings(self) -> List[Booking]:
        return self.booking_repo.find_all()

    def find_by_id(self, booking_id: str) -> Optional[Booking]:
        return self.booking_repo.find_by_id(booking_id)

    def get_booking(self, booking_id: str) -> Booking:
        booking = self.booking_repo.find_by_id(booking_id)
        if booking is None:
            raise NotFoundException("booking", booking_id)
        return booking

    def get_bookings_by_guest(self, guest_id: str) -> List[Booking]:
        return self.booking_repo.find_by_guest(guest_id)

    def get_bookings_by_room(self, room_number: str) -> List[Booking]:
        return self.booking_repo.find_by_room(room_number)

    def get_active_bookings(self) -> List[Booking]:
        return self.booking_repo.find_by_status(BookingStatus.CONFIRMED)

    def get_active_booking_count(self) -> int:
        return len(self.get_active_bookings())

    def is_room_available_for_dates(
        self, room_number: str, check_in: date, check_out: date
    ) -> bool:
        return not self._has_overlapping_booking(room_number, check_in, check_out)

    def calculate_subtotal(self, room: Room, check_in: date, check_out: date) -> Decimal:
        return nights_between(check_in, check_out) * room.price_per_night

    def calculate_vat(self, room: Room, check_in: date, check_out: date) -> Decimal:
        subtotal = nights_between(check_in, check_out) * room.price_per_night
        return calculate_vat(subtotal, self.settings.vat_rate)

    def calculate_total_cost(self, room: Room, check_in: date, check_out: date) -> Decimal:
        subtotal = nights_between(check_in, check_out) * room.price_per_night
        return calculate_total(subtotal, self.settings.vat_rate)

    def _validate_dates(self, check_in: Optional[date], check_out: Optional[date]):
        if check_in is None or check_out is None:
            raise InvalidDates("Check-in and check-out dates are required")
        if check_in < self.today():
            raise InvalidDates("Check-in date cannot be in the past")
        if check_out <= check_in:
            raise InvalidDates("Check-out must be after check-in")

    def _has_overlapping_booking(
        self, room_number: str, check_in: date, check_out: date
    ) -> bool:
        return any(
            booking.overlaps(check_in, check_out)
            for booking in self.booking_repo.find_confirmed_for_room(room_number)
        )

    def _release_room(self, booking: Booking, room: Optional[Room]):
        if room is None:
            logger.warning(
                f"Room {booking.room_number} for booking {booking.booking_id} "
                "no longer exists, availability not updated"
            )
            return
        self.room_service.set_availability(room.room_number, True)
