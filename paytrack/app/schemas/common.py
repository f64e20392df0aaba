"""Shared field types for money and date payloads."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from paytrack.app.services.money import format_money

MONEY_PATTERN = r"^\d{1,8}(\.\d{1,2})?$"

# Incoming money is a decimal string that fits Numeric(10, 2): up to eight
# integer digits and at most two fractional digits.
MoneyStr = Annotated[str, Field(pattern=MONEY_PATTERN)]

# Outgoing money is always rendered with exactly two fractional digits.
Money = Annotated[Decimal, PlainSerializer(format_money, return_type=str, when_used="always")]


def coerce_date(value):
    """Accept plain dates as well as ISO datetimes (``2024-01-15T00:00:00Z``)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value
