"""
Resend HTTP API email provider.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from src.modules.contact.outcomes import (
    EmailAuthError,
    EmailConnectionError,
    EmailProviderError,
    EmailTimeoutError,
)
from .base import BaseEmailProvider, ContactEmail, EmailProviderKind

logger = logging.getLogger(__name__)


class ResendProvider(BaseEmailProvider):
    """Primary provider: one POST to the Resend `/emails` endpoint."""

    kind = EmailProviderKind.PRIMARY_API

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.resend.com",
        timeout: float = 45.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def send(self, email: ContactEmail) -> str:
        payload: Dict[str, Any] = {
            "from": email.sender,
            "to": [email.recipient],
            "reply_to": email.reply_to,
            "subject": email.subject,
            "text": email.text,
        }
        if email.html:
            payload["html"] = email.html

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    f"{self.base_url}/emails",
                    headers=self.headers,
                    json=payload,
                    timeout=self.timeout,
                )
        except httpx.TimeoutException as e:
            raise EmailTimeoutError(f"Resend request timed out: {e!r}")
        except httpx.TransportError as e:
            raise EmailConnectionError(f"Resend request failed: {e!r}")

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.status_code in (401, 403):
            raise EmailAuthError(f"Resend rejected credentials status={response.status_code} body={data}")
        if response.status_code >= 400:
            message = data.get("message") or data.get("name")
            raise EmailProviderError(
                f"Resend error status={response.status_code} body={data}",
                public_detail=message,
            )

        message_id = data.get("id")
        if not message_id:
            raise EmailProviderError(f"Resend response missing id: {data}")
        logger.debug("Resend accepted message id=%s", message_id)
        return str(message_id)
