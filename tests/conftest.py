"""
Shared pytest fixtures for contact API tests.
"""
import pytest
from fastapi.testclient import TestClient

from contact_api.core.config import Settings
from contact_api.core.mailer import EmailDeliveryError
from contact_api.core.rate_limit import limiter
from contact_api.main import create_app

ALLOWED_ORIGIN = "https://www.wynstrategies.com"
SENDER = "Wyn Strategies <contact@wynstrategies.com>"


class FakeMailer:
    """Records every message; raises on the sends listed in fail_on (0-based)."""

    def __init__(self, fail_on=()):
        self.sent = []
        self.attempts = 0
        self.fail_on = set(fail_on)

    async def send(self, email):
        index = self.attempts
        self.attempts += 1
        if index in self.fail_on:
            raise EmailDeliveryError("Resend API error 422: invalid `to` field", status_code=422)
        self.sent.append(email)
        return f"msg_{index}"


@pytest.fixture(autouse=True)
def reset_limiter():
    """Rate-limit counters are process-wide; clear them around each test."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        email_user=SENDER,
        team_inbox="team@wynstrategies.com",
        resend_api_key="re_test_key",
    )


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def client(settings, mailer):
    return TestClient(create_app(settings=settings, mailer=mailer))


@pytest.fixture
def valid_payload():
    return {
        "name": "Jane Doe",
        "email": "jane.doe@gmail.com",
        "phone": "555-0100",
        "subject": "Consulting inquiry",
        "message": "I'd like to talk about a project.",
    }
