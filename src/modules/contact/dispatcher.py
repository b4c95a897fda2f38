"""
Turns a validated contact submission into one delivered email, or one classified failure.
"""
import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from src.common.utils.email_service import render_template
from src.modules.contact.outcomes import (
    Delivered,
    DeliveryOutcome,
    EmailDeliveryError,
    Failed,
    FailureKind,
)
from src.modules.contact.providers.base import ContactEmail
from src.modules.contact.providers.factory import ProviderConfig
from src.modules.contact.validator import ContactSubmission

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryAttempt:
    """One send attempt; its outcome is whichever of the provider reply or the deadline settles first."""
    provider: str
    started_at: datetime
    deadline: datetime

    @classmethod
    def start(cls, provider: str, timeout: float) -> "DeliveryAttempt":
        started_at = datetime.now(timezone.utc)
        return cls(provider=provider, started_at=started_at, deadline=started_at + timedelta(seconds=timeout))

    def elapsed(self) -> float:
        return (datetime.now(timezone.utc) - self.started_at).total_seconds()


def build_contact_email(submission: ContactSubmission, config: ProviderConfig, sent_at: datetime) -> ContactEmail:
    context = {
        "name": submission.name,
        "email": submission.email,
        "message": submission.message,
        "sent_at": sent_at.strftime("%Y-%m-%d %H:%M:%S %Z"),
    }
    return ContactEmail(
        sender=config.sender,
        recipient=config.recipient,
        reply_to=submission.email,
        subject=f"New Contact Form Message from {submission.name}",
        text=render_template("contact_notification.txt", context),
        html=render_template("contact_notification.html", context),
    )


async def send_contact_email(
    submission: ContactSubmission,
    config: ProviderConfig,
    deadline_seconds: Optional[float] = None,
) -> DeliveryOutcome:
    """
    Send the submission through the configured provider, racing it against a deadline.
    The provider call is cancelled once the deadline passes, so a late reply can
    never turn a timeout into a delivery.
    """
    if not config.is_configured:
        return Failed(kind=FailureKind.NOT_CONFIGURED, detail="no email provider configured")

    provider = config.provider
    timeout = config.deadline_seconds if deadline_seconds is None else deadline_seconds
    attempt = DeliveryAttempt.start(provider.name, timeout)

    try:
        email = build_contact_email(submission, config, attempt.started_at)
        message_id = await asyncio.wait_for(provider.send(email), timeout=timeout)
    except asyncio.TimeoutError:
        outcome = Failed(
            kind=FailureKind.TIMEOUT,
            detail=f"{provider.name} did not respond within {timeout}s",
            provider=provider.name,
        )
    except EmailDeliveryError as e:
        outcome = Failed(kind=e.kind, detail=e.detail, provider=provider.name, public_detail=e.public_detail)
    except Exception as e:
        logger.exception("Unexpected error sending contact email via %s", provider.name)
        outcome = Failed(kind=FailureKind.UNKNOWN, detail=repr(e), provider=provider.name)
    else:
        if message_id:
            outcome = Delivered(message_id=message_id, provider=provider.name)
        else:
            outcome = Failed(
                kind=FailureKind.PROVIDER_ERROR,
                detail=f"{provider.name} returned no message id",
                provider=provider.name,
            )

    elapsed = attempt.elapsed()
    if isinstance(outcome, Delivered):
        logger.info("Contact email delivered via %s id=%s in %.2fs", provider.name, outcome.message_id, elapsed)
    else:
        logger.error(
            "Contact email failed via %s kind=%s after %.2fs (deadline %s): %s",
            provider.name, outcome.kind.value, elapsed, attempt.deadline.isoformat(), outcome.detail,
        )
    return outcome
