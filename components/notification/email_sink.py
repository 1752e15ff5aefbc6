"""Email sinks used to deliver notifications."""

import logging
from abc import ABC, abstractmethod
from email.message import EmailMessage

import aiosmtplib

from components.core.config import Settings
from components.core.errors import EmailDeliveryError

logger = logging.getLogger(__name__)


class EmailSink(ABC):
    """Destination for outgoing emails."""

    @abstractmethod
    async def send_email(self, recipient: str, subject: str, body: str) -> None:
        """Deliver one message; raise EmailDeliveryError on failure."""


class LoggingEmailSink(EmailSink):
    """Simulated delivery: the message is written to the log."""

    async def send_email(self, recipient: str, subject: str, body: str) -> None:
        logger.info("Simulated email to %s | %s | %s", recipient, subject, body)


class SmtpEmailSink(EmailSink):
    """Delivers messages through an SMTP server."""

    def __init__(
        self,
        hostname: str,
        port: int,
        sender: str,
        username: str = None,
        password: str = None,
        start_tls: bool = True,
    ):
        self.hostname = hostname
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.start_tls = start_tls

    async def send_email(self, recipient: str, subject: str, body: str) -> None:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(body)

        try:
            await aiosmtplib.send(
                message,
                hostname=self.hostname,
                port=self.port,
                username=self.username,
                password=self.password,
                start_tls=self.start_tls,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            raise EmailDeliveryError(f"Could not deliver email to {recipient}: {exc}") from exc


def build_email_sink(settings: Settings) -> EmailSink:
    """Pick the sink configured by EMAIL_BACKEND."""
    if settings.EMAIL_BACKEND == "smtp":
        return SmtpEmailSink(
            hostname=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            sender=settings.EMAIL_SENDER,
            username=settings.SMTP_USER,
            password=settings.SMTP_PASSWORD,
            start_tls=settings.SMTP_USE_TLS,
        )
    if settings.EMAIL_BACKEND == "log":
        return LoggingEmailSink()
    raise ValueError(f"Unknown EMAIL_BACKEND: {settings.EMAIL_BACKEND}")
