"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from database import Database
from main import create_app
from notifications.mailer import Notifier


class FakeTransport:
    """Records outgoing messages instead of talking to an SMTP relay."""

    def __init__(self):
        self.sent = []
        self.error = None

    async def send_message(self, message):
        if self.error is not None:
            raise self.error
        self.sent.append(message)


@pytest.fixture
def db():
    """In-memory SQLite handle with the schema created."""
    database = Database("sqlite://")
    database.create_tables()
    yield database
    database.close()


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def notifier(db, transport):
    return Notifier(db, transport, sender="Test <noreply@example.com>")


@pytest.fixture
def app(db, notifier):
    return create_app(db=db, notifier=notifier)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def contact_payload():
    return {
        "name": "Jo",
        "email": "jo@x.com",
        "event_name": "Wedding",
        "details": "Need a full bar setup for 100 guests",
    }


@pytest.fixture
def contact_id(client, contact_payload):
    response = client.post("/api/contact/submit", json=contact_payload)
    assert response.status_code == 201
    return response.json()["data"]["id"]
