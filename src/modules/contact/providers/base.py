"""
Abstract base class for email providers.
"""
import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class EmailProviderKind(enum.Enum):
    PRIMARY_API = "PrimaryAPI"
    FALLBACK_SMTP = "FallbackSMTP"


@dataclass(frozen=True)
class ContactEmail:
    """A rendered notification ready to hand to a provider."""
    sender: str
    recipient: str
    reply_to: str
    subject: str
    text: str
    html: Optional[str] = None


class BaseEmailProvider(ABC):
    """Abstract base class for email providers."""

    kind: EmailProviderKind

    @property
    def name(self) -> str:
        return self.kind.value

    @abstractmethod
    async def send(self, email: ContactEmail) -> str:
        """
        Send a single email. No retries.

        Args:
            email: The rendered message

        Returns:
            The provider-assigned message identifier

        Raises:
            EmailDeliveryError: classified provider failure
        """
        pass
