"""
SMTP fallback email provider.
"""
import asyncio
import logging
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import make_msgid, parseaddr

import aiosmtplib

from src.modules.contact.outcomes import (
    EmailAuthError,
    EmailConnectionError,
    EmailDeliveryError,
    EmailProviderError,
)
from .base import BaseEmailProvider, ContactEmail, EmailProviderKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmtpTimeouts:
    """Per-stage limits, in seconds, independent of the overall send deadline."""
    connection: float = 10.0
    greeting: float = 10.0
    socket: float = 30.0


class SmtpProvider(BaseEmailProvider):
    """Fallback provider: one message over an authenticated SMTP connection."""

    kind = EmailProviderKind.FALLBACK_SMTP

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        secure: bool = False,
        timeouts: SmtpTimeouts = SmtpTimeouts(),
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.secure = secure
        self.timeouts = timeouts

    def build_message(self, email: ContactEmail) -> EmailMessage:
        message = EmailMessage()
        message["From"] = email.sender
        message["To"] = email.recipient
        message["Reply-To"] = email.reply_to
        message["Subject"] = email.subject
        domain = parseaddr(email.sender)[1].rpartition("@")[2] or None
        message["Message-ID"] = make_msgid(domain=domain)
        message.set_content(email.text)

        # If HTML content is provided, add it as an alternative.
        if email.html:
            message.add_alternative(email.html, subtype="html")
        return message

    def _client(self) -> aiosmtplib.SMTP:
        # Port 465 style servers take implicit TLS, everything else upgrades with STARTTLS.
        return aiosmtplib.SMTP(
            hostname=self.host,
            port=self.port,
            username=self.username,
            password=self.password,
            use_tls=self.secure,
            start_tls=not self.secure,
            timeout=self.timeouts.socket,
        )

    async def send(self, email: ContactEmail) -> str:
        message = self.build_message(email)
        client = self._client()
        try:
            # connect() also reads the greeting, upgrades TLS and logs in.
            await asyncio.wait_for(
                client.connect(timeout=self.timeouts.connection),
                timeout=self.timeouts.connection + self.timeouts.greeting,
            )
            errors, response = await client.send_message(message)
        except aiosmtplib.SMTPAuthenticationError as e:
            raise EmailAuthError(f"SMTP auth failed on {self.host}: {e.code} {e.message}")
        except (aiosmtplib.SMTPConnectError, aiosmtplib.SMTPTimeoutError, aiosmtplib.SMTPServerDisconnected) as e:
            raise EmailConnectionError(f"SMTP connection to {self.host}:{self.port} failed: {e!r}")
        except asyncio.TimeoutError:
            raise EmailConnectionError(f"SMTP greeting from {self.host}:{self.port} timed out")
        except aiosmtplib.SMTPResponseException as e:
            raise EmailProviderError(f"SMTP {self.host} replied {e.code} {e.message}", public_detail=f"SMTP {e.code}")
        except aiosmtplib.SMTPException as e:
            raise EmailDeliveryError(f"SMTP send via {self.host} failed: {e!r}")
        except OSError as e:
            # DNS lookup failures and refused sockets surface as OSError subclasses.
            raise EmailConnectionError(f"SMTP connection to {self.host}:{self.port} failed: {e!r}")
        else:
            # The message is already accepted; a failed QUIT must not turn that into an error.
            try:
                await client.quit()
            except (aiosmtplib.SMTPException, OSError) as e:
                logger.warning("SMTP QUIT to %s failed after delivery: %r", self.host, e)
        finally:
            client.close()

        if errors:
            logger.warning("SMTP server refused some recipients: %s", errors)
        logger.debug("SMTP server accepted message: %s", response)
        return message["Message-ID"]
