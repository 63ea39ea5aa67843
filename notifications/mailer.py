from email.message import EmailMessage
from typing import Optional
import logging

import aiosmtplib
from fastapi import Request
from sqlalchemy import insert
from starlette.concurrency import run_in_threadpool

import config
from database import Database, StorageError
from .model import EmailLog, EmailStatus, EmailType
from . import templates

# Configure logging
logger = logging.getLogger(__name__)

email_logs = EmailLog.__table__


class MailConfigurationError(Exception):
    pass


class SMTPTransport:
    """Delivers messages through the configured SMTP relay."""

    def __init__(
        self,
        hostname: Optional[str] = None,
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        start_tls: bool = True,
        timeout: float = 30,
    ):
        self.hostname = hostname
        self.port = port
        self.username = username
        self.password = password
        self.start_tls = start_tls
        self.timeout = timeout

    @classmethod
    def from_config(cls) -> "SMTPTransport":
        return cls(
            hostname=config.MAIL_SERVER,
            port=config.MAIL_PORT,
            username=config.MAIL_USERNAME,
            password=config.MAIL_PASSWORD,
            start_tls=config.MAIL_USE_TLS,
            timeout=config.MAIL_TIMEOUT,
        )

    async def send_message(self, message: EmailMessage):
        if not self.hostname:
            raise MailConfigurationError("MAIL_SERVER is not configured")

        # Implicit TLS on 465, STARTTLS otherwise when enabled
        use_tls = self.port == 465
        await aiosmtplib.send(
            message,
            hostname=self.hostname,
            port=self.port,
            username=self.username,
            password=self.password,
            use_tls=use_tls,
            start_tls=self.start_tls and not use_tls,
            timeout=self.timeout,
        )


class Notifier:
    """Best-effort transactional mail.

    Each attempt is made once and recorded in ``email_logs`` as sent or
    failed. Delivery errors never reach the caller; ``send`` reports the
    outcome as a bool instead.
    """

    def __init__(self, db: Database, transport, sender: str = config.MAIL_SENDER):
        self.db = db
        self.transport = transport
        self.sender = sender

    def _build_message(self, recipient: str, subject: str, html_body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(html_body, subtype="html")
        return message

    async def _record(self, recipient: str, subject: str, email_type: str, status: EmailStatus,
                      error_message: Optional[str] = None):
        try:
            await run_in_threadpool(
                self.db.execute,
                insert(email_logs).values(
                    recipient=recipient,
                    subject=subject,
                    email_type=email_type,
                    status=status.value,
                    error_message=error_message,
                )
            )
        except StorageError as e:
            logger.error(f"Could not record {status.value} email to {recipient}: {e}")

    async def send(self, recipient: str, subject: str, html_body: str, email_type: str) -> bool:
        try:
            message = self._build_message(recipient, subject, html_body)
            await self.transport.send_message(message)
        except Exception as e:
            await self._record(recipient, subject, email_type, EmailStatus.FAILED, str(e))
            logger.error(f"Error sending {email_type} email to {recipient}: {e}")
            return False

        await self._record(recipient, subject, email_type, EmailStatus.SENT)
        logger.info(f"Email sent to {recipient} ({email_type})")
        return True

    async def send_contact_reply(self, recipient: str, contact_name: str, event_name: str) -> bool:
        html_body = templates.render_contact_reply(contact_name, event_name)
        return await self.send(
            recipient, templates.CONTACT_REPLY_SUBJECT, html_body, EmailType.CONTACT_REPLY.value
        )

    async def send_newsletter_welcome(self, recipient: str) -> bool:
        html_body = templates.render_newsletter_welcome(recipient)
        return await self.send(
            recipient, templates.NEWSLETTER_WELCOME_SUBJECT, html_body, EmailType.NEWSLETTER_WELCOME.value
        )


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier
