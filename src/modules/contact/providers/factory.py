"""
Startup-time selection of the active email provider.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from src.common.config import Settings
from .base import BaseEmailProvider, EmailProviderKind
from .resend_provider import ResendProvider
from .smtp_provider import SmtpProvider, SmtpTimeouts

logger = logging.getLogger(__name__)

RESEND_DEFAULT_SENDER = "Portfolio Contact <onboarding@resend.dev>"


@dataclass(frozen=True)
class ProviderConfig:
    """Immutable provider selection, built once when the app starts."""
    provider: Optional[BaseEmailProvider]
    sender: str
    recipient: str
    deadline_seconds: float = 45.0

    @property
    def is_configured(self) -> bool:
        return self.provider is not None

    @property
    def kind(self) -> Optional[EmailProviderKind]:
        return self.provider.kind if self.provider else None


def build_provider_config(settings: Settings) -> ProviderConfig:
    """
    An API key selects the Resend provider; otherwise complete SMTP credentials
    select the SMTP fallback. With neither, sends fail as not configured.
    """
    recipient = settings.contact_recipient
    provider: Optional[BaseEmailProvider] = None
    sender = settings.EMAIL_SENDER

    if settings.RESEND_API_KEY:
        provider = ResendProvider(
            api_key=settings.RESEND_API_KEY,
            base_url=settings.RESEND_BASE_URL,
            timeout=settings.EMAIL_DEADLINE_SECONDS,
        )
        sender = sender or RESEND_DEFAULT_SENDER
        logger.info("Email provider: Resend API, recipient=%s", recipient)
    elif settings.SMTP_USER and settings.SMTP_PASSWORD:
        provider = SmtpProvider(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.SMTP_USER,
            password=settings.SMTP_PASSWORD,
            secure=settings.SMTP_SECURE,
            timeouts=SmtpTimeouts(
                connection=settings.SMTP_CONNECTION_TIMEOUT,
                greeting=settings.SMTP_GREETING_TIMEOUT,
                socket=settings.SMTP_SOCKET_TIMEOUT,
            ),
        )
        sender = sender or f"Portfolio Contact <{settings.SMTP_USER}>"
        logger.info("Email provider: SMTP %s:%s, recipient=%s", settings.SMTP_HOST, settings.SMTP_PORT, recipient)
    else:
        logger.warning(
            "No email provider configured: set RESEND_API_KEY or SMTP_USER/SMTP_PASSWORD. "
            "Contact form submissions will be rejected."
        )

    return ProviderConfig(
        provider=provider,
        sender=sender,
        recipient=recipient,
        deadline_seconds=settings.EMAIL_DEADLINE_SECONDS,
    )


def get_provider_config(request: Request) -> ProviderConfig:
    """Dependency returning the provider selected at startup."""
    return request.app.state.email_provider_config
