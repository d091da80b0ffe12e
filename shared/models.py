"""Pydantic contracts for payment records and calendar months."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    email: str


class PaymentItem(BaseModel):
    """One line item of a payment."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    regular_price: Decimal
    final_price: Decimal

    @field_validator("regular_price", "final_price", mode="before")
    @classmethod
    def reject_binary_float(cls, value: object) -> object:
        if isinstance(value, float):
            raise ValueError("Prices must be exact decimals, not binary floats")
        return value


class Payment(BaseModel):
    """Completed transaction made by a user.

    Payments compare and hash by value: two records with the same date, user
    and items are equal and collapse into one element of a set result.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    payment_date: datetime
    user: User
    items: tuple[PaymentItem, ...] = ()

    @field_validator("payment_date")
    @classmethod
    def require_timezone(cls, value: datetime) -> datetime:
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("payment_date must be timezone-aware")
        return value


class YearMonth(BaseModel):
    """Calendar month, e.g. ``2025-01``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)

    @classmethod
    def of(cls, year: int, month: int) -> "YearMonth":
        return cls(year=year, month=month)

    @classmethod
    def from_datetime(cls, value: datetime) -> "YearMonth":
        return cls(year=value.year, month=value.month)

    @classmethod
    def parse(cls, raw_value: str) -> "YearMonth":
        """Parse a ``YYYY-MM`` string."""
        year_part, separator, month_part = raw_value.strip().partition("-")
        if not separator or not year_part.isdigit() or not month_part.isdigit():
            raise ValueError(f"Invalid year-month value: {raw_value!r}")
        return cls(year=int(year_part), month=int(month_part))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
