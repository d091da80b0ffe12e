from datetime import datetime, timezone
from decimal import Decimal

from backend.clock import FixedClock, SystemClock
from backend.factory import build_payment_query_service
from backend.main import create_backend_services
from shared.models import YearMonth
from tests.fakes import ALICE, item, payment


def test_imports_succeed() -> None:
    services = create_backend_services()

    service = services["payment_query_service"]
    assert isinstance(service.clock, SystemClock)
    assert service.payments_sorted_by_date_ascending() == []


def test_build_payment_query_service_wires_payments_and_clock() -> None:
    clock = FixedClock(datetime(2025, 1, 25, tzinfo=timezone.utc))
    service = build_payment_query_service(
        payments=[payment(datetime(2025, 1, 5, tzinfo=timezone.utc), ALICE, item("Book", "10.00", "7.50"))],
        clock=clock,
    )

    assert service.clock is clock
    assert service.product_names_sold_in_current_month() == {"Book"}
    assert service.total_discount_for_month(YearMonth.of(2025, 1)) == Decimal("2.50")
