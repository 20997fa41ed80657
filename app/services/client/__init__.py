# Client Services
from app.services.client.contact_request_service import create_contact_request
from app.services.client.rating_service import (
    submit_rating,
    get_rating_page_context,
    parse_rating_value,
)
from app.services.client.dashboard_service import get_dashboard_properties

__all__ = [
    "create_contact_request",
    "submit_rating",
    "get_rating_page_context",
    "parse_rating_value",
    "get_dashboard_properties",
]
