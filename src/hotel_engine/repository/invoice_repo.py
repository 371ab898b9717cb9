from decimal import Decimal
from pathlib import Path
from typing import Optional

from hotel_engine.models.invoice import Invoice
from hotel_engine.repository.json_store import JsonRecordStore
from hotel_engine.utils.datetime_normaliser import (
    from_iso_datetime,
    to_iso_datetime,
)


def invoice_to_item(invoice: Invoice) -> dict:
    return {
        "invoiceId": invoice.invoice_id,
        "bookingId": invoice.booking_id,
        "generatedAt": to_iso_datetime(invoice.generated_at),
        "subtotal": invoice.subtotal,
        "vatRate": invoice.vat_rate,
        "vat": invoice.vat,
        "total": invoice.total,
        "refundAmount": invoice.refund_amount,
    }


def invoice_from_item(item: dict) -> Invoice:
    return Invoice(
        invoice_id=item["invoiceId"],
        booking_id=item["bookingId"],
        generated_at=from_iso_datetime(item["generatedAt"]),
        subtotal=Decimal(str(item["subtotal"])),
        vat_rate=Decimal(str(item["vatRate"])),
        vat=Decimal(str(item["vat"])),
        total=Decimal(str(item["total"])),
        refund_amount=Decimal(str(item.get("refundAmount", 0))),
    )


class InvoiceRepository(JsonRecordStore[Invoice]):
    def __init__(self, path: Path):
        super().__init__(
            path,
            id_of=lambda invoice: invoice.invoice_id,
            to_item=invoice_to_item,
            from_item=invoice_from_item,
        )

    def find_by_booking_id(self, booking_id: str) -> Optional[Invoice]:
        matches = self._find_where(
            lambda invoice: invoice.booking_id == booking_id
        )
        return matches[0] if matches else None
