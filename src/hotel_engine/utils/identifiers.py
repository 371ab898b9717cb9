from uuid import uuid4

BOOKING_PREFIX = "BK-"
GUEST_PREFIX = "G-"
INVOICE_PREFIX = "INV-"


def generate_id(prefix: str) -> str:
    return prefix + uuid4().hex[:8].upper()
