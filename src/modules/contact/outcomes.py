"""
Delivery outcomes for contact-form emails and the user-facing messages they map to.
"""
import enum
from dataclasses import dataclass
from typing import Optional, Union


class FailureKind(enum.Enum):
    NOT_CONFIGURED = "NotConfigured"
    TIMEOUT = "Timeout"
    AUTH_FAILURE = "AuthFailure"
    CONNECTION_FAILURE = "ConnectionFailure"
    PROVIDER_ERROR = "ProviderError"
    UNKNOWN = "Unknown"


USER_MESSAGES = {
    FailureKind.NOT_CONFIGURED: "Email service is not configured",
    FailureKind.TIMEOUT: "Email service is taking too long. Please try again later.",
    FailureKind.AUTH_FAILURE: "Email authentication failed. Please check SMTP credentials.",
    FailureKind.CONNECTION_FAILURE: "Cannot connect to email server. This may be due to network restrictions.",
    FailureKind.UNKNOWN: "Failed to send message. Please try again later.",
}


@dataclass(frozen=True)
class Delivered:
    """The provider accepted the message."""
    message_id: str
    provider: str


@dataclass(frozen=True)
class Failed:
    """
    Delivery did not happen.

    `detail` is for server logs only. `public_detail` is the provider's own
    short error text, the only provider-originated string shown to users.
    """
    kind: FailureKind
    detail: str
    provider: Optional[str] = None
    public_detail: Optional[str] = None


DeliveryOutcome = Union[Delivered, Failed]


class EmailDeliveryError(Exception):
    """Raised by providers; carries the classification of the failure."""

    kind = FailureKind.UNKNOWN

    def __init__(self, detail: str, public_detail: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.public_detail = public_detail


class EmailAuthError(EmailDeliveryError):
    kind = FailureKind.AUTH_FAILURE


class EmailConnectionError(EmailDeliveryError):
    kind = FailureKind.CONNECTION_FAILURE


class EmailTimeoutError(EmailDeliveryError):
    kind = FailureKind.TIMEOUT


class EmailProviderError(EmailDeliveryError):
    kind = FailureKind.PROVIDER_ERROR


def user_message(outcome: Failed) -> str:
    """Reduce a failed outcome to the stable message returned to the submitter."""
    if outcome.kind == FailureKind.PROVIDER_ERROR:
        return f"Email service error: {outcome.public_detail or 'unexpected provider response'}"
    return USER_MESSAGES[outcome.kind]
