"""Backend entrypoint."""

from backend.factory import build_payment_query_service


def create_backend_services() -> dict[str, object]:
    """Factory for backend service objects used by local integrations."""
    return {"payment_query_service": build_payment_query_service()}
