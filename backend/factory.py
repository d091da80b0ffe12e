"""Composition root for backend services."""

from __future__ import annotations

from collections.abc import Iterable

from backend.clock import Clock, SystemClock
from backend.repositories.payments_repository import InMemoryPaymentsRepository
from backend.services.payment_service import PaymentQueryService
from shared import config
from shared.models import Payment


def build_payment_query_service(
    payments: Iterable[Payment] | None = None,
    clock: Clock | None = None,
) -> PaymentQueryService:
    """Build the payment query service over an in-memory repository.

    Without an explicit clock, a system clock in the configured
    `PAYMENTS_TIMEZONE` is used.
    """

    return PaymentQueryService(
        payments_repository=InMemoryPaymentsRepository(payments),
        clock=clock if clock is not None else SystemClock(config.payments_timezone()),
    )
