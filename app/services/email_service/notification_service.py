"""
Notification Service - Operator emails for new contact requests
Each recipient is attempted independently; failures are logged, never raised
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal
from html import escape
from typing import Dict, List, Optional
from app.config import settings
from app.services.email_service.client import send_email

logger = logging.getLogger(__name__)


def format_price(price) -> str:
    if price is None or price == "":
        return "N/A"
    return f"₦{Decimal(str(price)):,.0f}"


def format_location(property_data: Dict) -> str:
    parts = [property_data.get("area"), property_data.get("state")]
    return ", ".join(part for part in parts if part) or "N/A"


def build_contact_request_email(details: Dict) -> Dict[str, str]:
    """Build subject and HTML body for a contact request notification"""
    client = details["client"]
    agent = details["agent"]
    property_data = details["property"]
    requested_at = details.get("requested_at") or datetime.now(timezone.utc)

    subject = f"🏠 New Contact Request - {client['full_name']} contacted {agent['full_name']}"
    html = f"""
      <h2>🏠 New Contact Request - HomLet</h2>
      <p><strong>Client:</strong> {escape(client['full_name'])} ({escape(client['email'])})</p>
      <p><strong>Phone:</strong> {escape(client.get('phone') or 'N/A')}</p>
      <p><strong>Agent:</strong> {escape(agent['full_name'])} ({escape(agent['email'])})</p>
      <p><strong>Property:</strong> {escape(property_data['title'])}</p>
      <p><strong>Location:</strong> {escape(format_location(property_data))}</p>
      <p><strong>Price:</strong> {format_price(property_data.get('price'))}</p>
      <p><strong>Time:</strong> {requested_at.strftime('%Y-%m-%d %H:%M:%S %Z').strip()}</p>
      <hr>
      <p>Please follow up on this contact request.</p>
    """
    return {"subject": subject, "html": html}


async def notify_contact_request(details: Dict, recipients: Optional[List[str]] = None) -> int:
    """
    Email every operator about a new contact request
    Returns the number of recipients the message was delivered to
    """
    if recipients is None:
        recipients = settings.contact_notification_email_list

    if not recipients:
        logger.warning("No contact notification recipients configured, skipping notification")
        return 0

    email = build_contact_request_email(details)
    delivered = 0

    for recipient in recipients:
        try:
            sent = await send_email(
                to_email=recipient,
                subject=email["subject"],
                html=email["html"],
                from_email=settings.EMAIL_FROM,
            )
        except Exception as e:
            logger.error(f"Contact request notification to {recipient} failed: {str(e)}", exc_info=True)
            continue

        if sent:
            delivered += 1

    logger.info(f"Contact request notification delivered to {delivered}/{len(recipients)} recipients")
    return delivered
