"""Tests for the notification dispatcher."""

import pytest
from sqlalchemy import select

from database import StorageError
from notifications import templates
from notifications.mailer import MailConfigurationError, SMTPTransport
from notifications.model import EmailLog

email_logs = EmailLog.__table__


@pytest.mark.asyncio
async def test_send_records_sent_log(notifier, transport, db):
    result = await notifier.send("jo@x.com", "Hello", "<p>Hi</p>", "contact_reply")

    assert result is True
    assert len(transport.sent) == 1
    message = transport.sent[0]
    assert message["To"] == "jo@x.com"
    assert message["From"] == "Test <noreply@example.com>"
    assert message["Subject"] == "Hello"

    logs = db.fetch_many(select(email_logs))
    assert len(logs) == 1
    assert logs[0]["status"] == "sent"
    assert logs[0]["email_type"] == "contact_reply"
    assert logs[0]["error_message"] is None


@pytest.mark.asyncio
async def test_send_failure_is_logged_not_raised(notifier, transport, db):
    transport.error = ConnectionRefusedError("relay unreachable")

    result = await notifier.send("jo@x.com", "Hello", "<p>Hi</p>", "newsletter_welcome")

    assert result is False
    logs = db.fetch_many(select(email_logs))
    assert len(logs) == 1
    assert logs[0]["status"] == "failed"
    assert logs[0]["error_message"] == "relay unreachable"


@pytest.mark.asyncio
async def test_send_survives_audit_log_failure(notifier, db, monkeypatch):
    def broken_execute(statement):
        raise StorageError("disk full")

    monkeypatch.setattr(db, "execute", broken_execute)

    assert await notifier.send("jo@x.com", "Hello", "<p>Hi</p>", "contact_reply") is True


@pytest.mark.asyncio
async def test_contact_reply_uses_template(notifier, transport, db):
    await notifier.send_contact_reply("jo@x.com", "Jo", "Wedding")

    message = transport.sent[0]
    assert message["Subject"] == templates.CONTACT_REPLY_SUBJECT
    body = message.get_content()
    assert "Thank You, Jo!" in body
    assert "<strong>Wedding</strong>" in body

    log = db.fetch_one(select(email_logs))
    assert log["email_type"] == "contact_reply"


@pytest.mark.asyncio
async def test_newsletter_welcome_uses_template(notifier, transport, db):
    await notifier.send_newsletter_welcome("jo@x.com")

    assert transport.sent[0]["Subject"] == templates.NEWSLETTER_WELCOME_SUBJECT
    assert db.fetch_one(select(email_logs))["email_type"] == "newsletter_welcome"


def test_templates_escape_markup():
    body = templates.render_contact_reply("<script>", "Party & Co")

    assert "<script>" not in body
    assert "&lt;script&gt;" in body
    assert "Party &amp; Co" in body


@pytest.mark.asyncio
async def test_smtp_transport_requires_server():
    transport = SMTPTransport(hostname=None)

    with pytest.raises(MailConfigurationError):
        await transport.send_message(None)


@pytest.mark.asyncio
async def test_unconfigured_relay_is_recorded_as_failure(db):
    from notifications.mailer import Notifier

    notifier = Notifier(db, SMTPTransport(hostname=None))

    assert await notifier.send_newsletter_welcome("jo@x.com") is False
    log = db.fetch_one(select(email_logs))
    assert log["status"] == "failed"
    assert "MAIL_SERVER" in log["error_message"]
