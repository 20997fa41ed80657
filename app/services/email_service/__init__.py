# Email Services
from app.services.email_service.client import send_email, send_email_sync
from app.services.email_service.notification_service import (
    build_contact_request_email,
    notify_contact_request,
)

__all__ = [
    "send_email",
    "send_email_sync",
    "build_contact_request_email",
    "notify_contact_request",
]
