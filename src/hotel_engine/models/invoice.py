from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from hotel_engine.utils.money import ZERO


@dataclass(eq=False)
class Invoice:
    invoice_id: str
    booking_id: str
    generated_at: datetime
    subtotal: Decimal
    vat_rate: Decimal
    vat: Decimal
    total: Decimal
    refund_amount: Decimal = ZERO

    @property
    def final_amount(self) -> Decimal:
        return self.total - self.refund_amount

    def __eq__(self, other):
        if not isinstance(other, Invoice):
            return NotImplemented
        return self.invoice_id == other.invoice_id

    def __hash__(self):
        return hash(("invoice", self.invoice_id))
