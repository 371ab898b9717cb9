from enum import Enum
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from hotel_engine.utils.datetime_normaliser import nights_between
from hotel_engine.utils.money import ZERO


class BookingStatus(str, Enum):
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(eq=False)
class Booking:
    booking_id: str
    guest_id: str
    room_number: str
    check_in: date
    check_out: date
    status: BookingStatus = BookingStatus.CONFIRMED

    total_cost: Decimal = ZERO
    refund_amount: Decimal = ZERO

    @property
    def nights(self) -> int:
        return nights_between(self.check_in, self.check_out)

    def overlaps(self, check_in: date, check_out: date) -> bool:
        return self.check_in < check_out and check_in < self.check_out

    def __eq__(self, other):
        if not isinstance(other, Booking):
            return NotImplemented
        return self.booking_id == other.booking_id

    def __hash__(self):
        return hash(("booking", self.booking_id))
