"""
Email Client Service - SMTP transport for outgoing mail
Low-level SMTP interactions, run off the event loop
"""
import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional
from app.config import settings
from app.utils.errors import NotificationError

logger = logging.getLogger(__name__)


def send_email_sync(to_email: str, subject: str, html: str, from_email: Optional[str] = None) -> bool:
    """
    Send an HTML email through the configured SMTP server (synchronous)
    Returns False without sending when SMTP is not configured
    """
    sender = from_email or settings.EMAIL_FROM

    if not settings.smtp_configured:
        logger.warning(f"[Email not sent] SMTP not configured - To: {to_email}, Subject: {subject}")
        return False

    message = EmailMessage()
    message["Subject"] = subject
    message["From"] = sender
    message["To"] = to_email
    message.set_content("This message requires an HTML capable email client.")
    message.add_alternative(html, subtype="html")

    try:
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=settings.SMTP_TIMEOUT) as smtp:
            if settings.SMTP_USE_TLS:
                smtp.starttls()
            if settings.SMTP_USERNAME and settings.SMTP_PASSWORD:
                smtp.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
            smtp.send_message(message)
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Error sending email to {to_email}: {str(e)}")
        raise NotificationError(f"Failed to send email to {to_email}: {str(e)}")

    logger.info(f"Email sent - To: {to_email}, Subject: {subject}")
    return True


async def send_email(to_email: str, subject: str, html: str, from_email: Optional[str] = None) -> bool:
    """Async wrapper for sending an email"""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, send_email_sync, to_email, subject, html, from_email)
