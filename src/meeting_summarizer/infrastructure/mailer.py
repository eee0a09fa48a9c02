"""SMTP delivery of meeting summaries."""

import asyncio
import html
import logging
from email.message import EmailMessage

import aiosmtplib

from meeting_summarizer.config import Settings
from meeting_summarizer.domain.delivery import DeliveryResult

logger = logging.getLogger(__name__)

HTML_TEMPLATE = """\
<h2>Meeting Summary</h2>
<p>A meeting summary has been shared with you:</p>
<hr>
<div style="white-space: pre-wrap;">{summary}</div>
<hr>
<p>This summary was generated using AI Meeting Summarizer.</p>
"""


def build_message(sender: str, recipient: str, subject: str, summary: str) -> EmailMessage:
    """Build a multipart summary email with plain-text and HTML bodies."""
    message = EmailMessage()
    message["From"] = sender
    message["To"] = recipient
    message["Subject"] = subject
    message.set_content(summary)
    message.add_alternative(
        HTML_TEMPLATE.format(summary=html.escape(summary)), subtype="html"
    )
    return message


class SMTPMailer:
    """Sends summaries through an SMTP relay, one message per recipient."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str = "",
        password: str = "",
        sender: str = "",
        use_tls: bool = True,
        timeout_seconds: int = 30,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender
        self.use_tls = use_tls
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "SMTPMailer":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            sender=settings.sender_address,
            use_tls=settings.smtp_use_tls,
        )

    async def send(self, recipient: str, subject: str, summary: str) -> DeliveryResult:
        """Send one message; failures are reported in the result, not raised."""
        try:
            message = build_message(self.sender, recipient, subject, summary)
            await aiosmtplib.send(
                message,
                hostname=self.host,
                port=self.port,
                username=self.username or None,
                password=self.password or None,
                start_tls=self.use_tls,
                timeout=self.timeout_seconds,
            )
        # ValueError: header injection (CR/LF) in recipient or subject
        except (aiosmtplib.SMTPException, OSError, ValueError) as e:
            logger.error(f"Failed to send summary to {recipient}: {e}")
            return DeliveryResult(recipient=recipient, delivered=False, error=str(e))

        return DeliveryResult(recipient=recipient, delivered=True)

    async def send_all(
        self, recipients: list[str], subject: str, summary: str
    ) -> list[DeliveryResult]:
        """Send to every recipient concurrently, results in recipient order."""
        return list(
            await asyncio.gather(*(self.send(r, subject, summary) for r in recipients))
        )
