"""Decimal money helpers shared by schedule generation and reporting."""

from decimal import Decimal, ROUND_HALF_EVEN

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def quantize_money(value: Decimal | int | str | float | None) -> Decimal:
    if value is None:
        return ZERO
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_EVEN)


def format_money(value: Decimal | int | str | float | None) -> str:
    return str(quantize_money(value))
