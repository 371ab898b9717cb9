from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from hotel_engine.models.bookings import Booking
from hotel_engine.models.rooms import Room
from hotel_engine.utils.datetime_normaliser import days_between
from hotel_engine.utils.money import ZERO

FULL_REFUND_DAYS = 7
PARTIAL_REFUND_DAYS = 3
PARTIAL_REFUND_RATE = Decimal("0.50")


class RefundPolicy(str, Enum):
    FULL = "FULL"
    NONE = "NONE"
    TIERED = "TIERED"


def _no_refund(booking: Booking, cancel_date: date) -> Decimal:
    return ZERO


def _full_refund(booking: Booking, cancel_date: date) -> Decimal:
    return booking.total_cost


def _tiered_refund(booking: Booking, cancel_date: date) -> Decimal:
    days_until_check_in = days_between(cancel_date, booking.check_in)
    if days_until_check_in >= FULL_REFUND_DAYS:
        return booking.total_cost
    if days_until_check_in >= PARTIAL_REFUND_DAYS:
        return booking.total_cost * PARTIAL_REFUND_RATE
    return ZERO


_CALCULATORS = {
    RefundPolicy.NONE: _no_refund,
    RefundPolicy.FULL: _full_refund,
    RefundPolicy.TIERED: _tiered_refund,
}

_DESCRIPTIONS = {
    RefundPolicy.NONE: "Non-refundable - no refund will be provided for cancellations.",
    RefundPolicy.FULL: "Full refund - 100% of the booking cost will be refunded.",
    RefundPolicy.TIERED: (
        f"Tiered refund: 100% if cancelled {FULL_REFUND_DAYS}+ days before, "
        f"50% if {PARTIAL_REFUND_DAYS}-{FULL_REFUND_DAYS - 1} days before, "
        f"no refund if less than {PARTIAL_REFUND_DAYS} days."
    ),
}


def policy_from_name(name: Optional[str]) -> RefundPolicy:
    """Map a configured policy name onto a policy, falling back to TIERED."""
    try:
        return RefundPolicy((name or "").strip().upper())
    except ValueError:
        return RefundPolicy.TIERED


def resolve_refund_policy(room: Optional[Room], configured_name: str) -> RefundPolicy:
    if room is None or not room.refundable:
        return RefundPolicy.NONE
    return policy_from_name(configured_name)


def calculate_refund(policy: RefundPolicy, booking: Booking, cancel_date: date) -> Decimal:
    return _CALCULATORS[policy](booking, cancel_date)


def describe_refund_policy(policy: RefundPolicy) -> str:
    return _DESCRIPTIONS[policy]
