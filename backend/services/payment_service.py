"""Read-only queries over the payments returned by a repository.

Every query reads the repository afresh; nothing is cached between calls.
Malformed arguments are rejected with ``ValueError`` before the repository is
read, while errors raised by the repository or the clock propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal

from backend.clock import Clock
from backend.repositories.payments_repository import PaymentsRepository
from shared.models import Payment, PaymentItem, YearMonth


logger = logging.getLogger(__name__)


def _require_year_month(year_month: object) -> YearMonth:
    if not isinstance(year_month, YearMonth):
        raise ValueError(f"year_month must be a YearMonth, got {type(year_month).__name__}")
    return year_month


def _require_days(days: object) -> int:
    if isinstance(days, bool) or not isinstance(days, int):
        raise ValueError(f"days must be an integer, got {type(days).__name__}")
    return days


def _require_email(email: object) -> str:
    if not isinstance(email, str):
        raise ValueError(f"email must be a string, got {type(email).__name__}")
    return email


def _require_threshold(threshold: object) -> Decimal:
    if isinstance(threshold, Decimal):
        if threshold.is_nan():
            raise ValueError("threshold must be a number, got NaN")
        return threshold
    if isinstance(threshold, int) and not isinstance(threshold, bool):
        return Decimal(threshold)
    raise ValueError(
        f"threshold must be an int or Decimal, got {type(threshold).__name__}"
    )


@dataclass(slots=True)
class PaymentQueryService:
    payments_repository: PaymentsRepository
    clock: Clock

    def _log_result(self, name: str, count: int) -> None:
        logger.debug("payments_query name=%s count=%s", name, count)

    def payments_sorted_by_date_ascending(self) -> list[Payment]:
        payments = sorted(
            self.payments_repository.find_all(),
            key=lambda payment: payment.payment_date,
        )
        self._log_result("sorted_by_date_asc", len(payments))
        return payments

    def payments_sorted_by_date_descending(self) -> list[Payment]:
        """Reverse of the ascending order, so payments sharing a date appear in
        reverse source order."""
        payments = self.payments_sorted_by_date_ascending()
        payments.reverse()
        return payments

    def payments_sorted_by_item_count_ascending(self) -> list[Payment]:
        payments = sorted(
            self.payments_repository.find_all(),
            key=lambda payment: len(payment.items),
        )
        self._log_result("sorted_by_item_count_asc", len(payments))
        return payments

    def payments_sorted_by_item_count_descending(self) -> list[Payment]:
        payments = self.payments_sorted_by_item_count_ascending()
        payments.reverse()
        return payments

    def payments_for_month(self, year_month: YearMonth) -> list[Payment]:
        """Return payments whose month-of-year matches, whatever their year.

        The month is read from ``payment_date`` in its own timezone.
        """
        month = _require_year_month(year_month).month
        payments = [
            payment
            for payment in self.payments_repository.find_all()
            if payment.payment_date.month == month
        ]
        self._log_result("for_month", len(payments))
        return payments

    def payments_for_current_month(self) -> list[Payment]:
        return self.payments_for_month(self.clock.current_month())

    def payments_for_last_days(self, days: int) -> list[Payment]:
        """Return payments strictly after ``now - days``; the boundary instant is excluded.

        A cutoff beyond the datetime range matches every payment for positive
        ``days`` and none for negative ``days``.
        """
        days = _require_days(days)
        now = self.clock.now()
        payments = self.payments_repository.find_all()
        try:
            cutoff = now - timedelta(days=days)
        except OverflowError:
            payments = payments if days > 0 else []
        else:
            payments = [payment for payment in payments if payment.payment_date > cutoff]
        self._log_result("for_last_days", len(payments))
        return payments

    def payments_with_exactly_one_item(self) -> set[Payment]:
        payments = {
            payment
            for payment in self.payments_repository.find_all()
            if len(payment.items) == 1
        }
        self._log_result("with_one_item", len(payments))
        return payments

    def product_names_sold_in_current_month(self) -> set[str]:
        names = {item.name for item in self._items_for_month(self.clock.current_month())}
        self._log_result("product_names_current_month", len(names))
        return names

    def total_sales_for_month(self, year_month: YearMonth) -> Decimal:
        items = list(self._items_for_month(year_month))
        total = sum((item.final_price for item in items), Decimal("0"))
        self._log_result("total_sales_for_month", len(items))
        return total

    def total_discount_for_month(self, year_month: YearMonth) -> Decimal:
        items = list(self._items_for_month(year_month))
        regular_total = sum((item.regular_price for item in items), Decimal("0"))
        final_total = sum((item.final_price for item in items), Decimal("0"))
        self._log_result("total_discount_for_month", len(items))
        return regular_total - final_total

    def items_for_user_with_email(self, email: str) -> list[PaymentItem]:
        """Flatten the items of payments made by the user with this exact email."""
        email = _require_email(email)
        items = [
            item
            for payment in self.payments_repository.find_all()
            if payment.user.email == email
            for item in payment.items
        ]
        self._log_result("items_for_user", len(items))
        return items

    def payments_with_value_over(self, threshold: int | Decimal) -> set[Payment]:
        limit = _require_threshold(threshold)
        payments = {
            payment
            for payment in self.payments_repository.find_all()
            if self._payment_value(payment) > limit
        }
        self._log_result("with_value_over", len(payments))
        return payments

    def _items_for_month(self, year_month: YearMonth) -> Iterator[PaymentItem]:
        for payment in self.payments_for_month(year_month):
            yield from payment.items

    @staticmethod
    def _payment_value(payment: Payment) -> Decimal:
        return sum((item.final_price for item in payment.items), Decimal("0"))
