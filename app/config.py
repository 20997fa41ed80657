from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    DATABASE_URL: str
    SECRET_KEY: str

    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    SESSION_MAX_AGE: int = 86400  # 1 day

    # Outgoing mail (contact request notifications)
    EMAIL_FROM: str = "noreply@homlet.com"
    SMTP_HOST: Optional[str] = None
    SMTP_PORT: int = 587
    SMTP_USERNAME: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_USE_TLS: bool = True
    SMTP_TIMEOUT: float = 10.0

    # Comma-separated operator addresses notified on every contact request
    CONTACT_NOTIFICATION_EMAILS: str = ""

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def contact_notification_email_list(self) -> list[str]:
        """Get operator notification recipients from env"""
        return [
            email.strip().lower()
            for email in self.CONTACT_NOTIFICATION_EMAILS.split(",")
            if email.strip()
        ]

    @property
    def smtp_configured(self) -> bool:
        return bool(self.SMTP_HOST and self.EMAIL_FROM)


settings = Settings()
