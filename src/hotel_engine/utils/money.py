from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value) -> Decimal:
    """Round an amount half-up to whole cents, for display only."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_vat(subtotal: Decimal, vat_rate: Decimal) -> Decimal:
    return subtotal * vat_rate


def calculate_total(subtotal: Decimal, vat_rate: Decimal) -> Decimal:
    return subtotal + calculate_vat(subtotal, vat_rate)
