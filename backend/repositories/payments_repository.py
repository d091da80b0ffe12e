"""Payments repository adapters."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from shared.models import Payment


class PaymentsRepository(Protocol):
    def find_all(self) -> list[Payment]:
        """Return every payment currently stored, in source order."""


class InMemoryPaymentsRepository:
    """In-memory store; each read returns a copy of the current contents."""

    def __init__(self, payments: Iterable[Payment] | None = None) -> None:
        self._payments: list[Payment] = list(payments or [])

    def find_all(self) -> list[Payment]:
        return list(self._payments)

    def add(self, payment: Payment) -> None:
        self._payments.append(payment)

    def replace_all(self, payments: Iterable[Payment]) -> None:
        self._payments = list(payments)
