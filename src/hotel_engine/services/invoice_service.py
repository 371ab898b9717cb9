import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, List, Optional

from hotel_engine.config.settings import HotelSettings
from hotel_engine.models.invoice import Invoice
from hotel_engine.repository.invoice_repo import InvoiceRepository
from hotel_engine.services.booking_service import BookingService
from hotel_engine.services.room_service import RoomService
from hotel_engine.utils.custom_exceptions import InvalidDetails, NotFoundException
from hotel_engine.utils.identifiers import INVOICE_PREFIX, generate_id
from hotel_engine.utils.money import to_decimal, to_money

logger = logging.getLogger(__name__)


class InvoiceService:
    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        booking_service: BookingService,
        room_service: RoomService,
        settings: HotelSettings,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.invoice_repo = invoice_repo
        self.booking_service = booking_service
        self.room_service = room_service
        self.settings = settings
        self.clock = clock

    def get_all_invoices(self) -> List[Invoice]:
        return self.invoice_repo.find_all()

    def find_by_booking_id(self, booking_id: str) -> Optional[Invoice]:
        return self.invoice_repo.find_by_booking_id(booking_id)

    def generate_invoice(self, booking_id: str) -> Invoice:
        existing = self.invoice_repo.find_by_booking_id(booking_id)
        if existing is not None:
            return existing

        booking = self.booking_service.get_booking(booking_id)
        room = self.room_service.get_room(booking.room_number)

        # priced from the room's current rate, not the booking's stored total
        subtotal = booking.nights * room.price_per_night
        vat_rate = self.settings.vat_rate
        vat = subtotal * vat_rate

        invoice = Invoice(
            invoice_id=generate_id(INVOICE_PREFIX),
            booking_id=booking_id,
            generated_at=self.clock().replace(microsecond=0),
            subtotal=subtotal,
            vat_rate=vat_rate,
            vat=vat,
            total=subtotal + vat,
            refund_amount=booking.refund_amount,
        )
        self.invoice_repo.save(invoice)
        logger.info(f"Generated invoice {invoice.invoice_id} for booking {booking_id}")
        return invoice

    def amend_refund(self, booking_id: str, refund_amount: Decimal) -> Invoice:
        invoice = self.invoice_repo.find_by_booking_id(booking_id)
        if invoice is None:
            raise NotFoundException("invoice for booking", booking_id)

        refund_amount = to_decimal(refund_amount)
        if refund_amount < 0:
            raise InvalidDetails("Refund amount cannot be negative")

        invoice.refund_amount = refund_amount
        self.invoice_repo.save(invoice)
        logger.info(f"Amended invoice {invoice.invoice_id} refund to {refund_amount}")
        return invoice

    def render_invoice(self, invoice: Invoice) -> str:
        currency = self.settings.currency
        booking = self.booking_service.find_by_id(invoice.booking_id)

        lines = [
            self.settings.hotel_name,
            f"Invoice #:    {invoice.invoice_id}",
            f"Booking #:    {invoice.booking_id}",
            f"Generated:    {invoice.generated_at.isoformat(sep=' ')}",
        ]
        if booking is not None:
            lines += [
                f"Room:         {booking.room_number}",
                f"Check-in:     {booking.check_in.isoformat()}",
                f"Check-out:    {booking.check_out.isoformat()}",
                f"Nights:       {booking.nights}",
                f"Status:       {booking.status.display_name}",
            ]
        lines += [
            f"Subtotal:     {currency} {to_money(invoice.subtotal)}",
            f"VAT ({invoice.vat_rate * 100:.0f}%):    {currency} {to_money(invoice.vat)}",
            f"Total:        {currency} {to_money(invoice.total)}",
        ]
        if invoice.refund_amount > 0:
            lines += [
                f"Refund:       {currency} {to_money(invoice.refund_amount)}",
                f"Final Amount: {currency} {to_money(invoice.final_amount)}",
            ]
        return "\n".join(lines) + "\n"
