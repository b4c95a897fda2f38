"""Shared fixtures: app client with mocked database and a fake email provider."""

from __future__ import annotations

import asyncio
import os
import tempfile
import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time, so pin the environment before the app loads.
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="portfolio-uploads-")
os.environ["ADMIN_PASSWORD"] = "test-admin"
os.environ["RESEND_API_KEY"] = ""
os.environ["SMTP_USER"] = ""
os.environ["SMTP_PASSWORD"] = ""
os.environ["CONTACT_RECIPIENT"] = "owner@example.com"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from src.common.database.database import get_db_session  # noqa: E402
from src.main import app  # noqa: E402
from src.modules.contact.providers.base import BaseEmailProvider, ContactEmail, EmailProviderKind  # noqa: E402
from src.modules.contact.providers.factory import ProviderConfig, get_provider_config  # noqa: E402

ADMIN_HEADERS = {"x-admin-password": "test-admin"}


class FakeEmailProvider(BaseEmailProvider):
    """In-memory provider that can succeed, fail, or stall."""

    def __init__(self, message_id: str | None = "abc123", error: Exception | None = None, delay: float = 0.0, kind: EmailProviderKind = EmailProviderKind.PRIMARY_API) -> None:
        self.kind = kind
        self.message_id = message_id
        self.error = error
        self.delay = delay
        self.sent: list[ContactEmail] = []
        self.cancelled = False
        self.completed = False

    async def send(self, email: ContactEmail) -> str:
        self.sent.append(email)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error:
            raise self.error
        self.completed = True
        return self.message_id


def make_config(provider: BaseEmailProvider | None, deadline_seconds: float = 45.0) -> ProviderConfig:
    return ProviderConfig(provider=provider, sender="Portfolio Contact <noreply@example.com>", recipient="owner@example.com", deadline_seconds=deadline_seconds)


def _refresh(obj) -> None:
    # Stand in for server defaults the database would fill.
    if getattr(obj, "id", None) is None:
        obj.id = uuid.uuid4()
    if getattr(obj, "created_at", None) is None:
        obj.created_at = datetime.now(timezone.utc)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def mock_db_session():
    session = MagicMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.delete = AsyncMock()
    session.refresh = AsyncMock(side_effect=_refresh)
    result = MagicMock()
    result.scalars.return_value.all.return_value = []
    result.scalars.return_value.first.return_value = None
    session.execute.return_value = result
    return session


@pytest.fixture
def provider_factory():
    return FakeEmailProvider


@pytest.fixture
def config_factory():
    return make_config


@pytest.fixture
def admin_headers():
    return dict(ADMIN_HEADERS)


@pytest.fixture
def upload_dir():
    return os.environ["UPLOAD_DIR"]


@pytest.fixture
def fake_provider():
    return FakeEmailProvider()


@pytest.fixture
def client(mock_db_session, fake_provider):
    async def _get_db():
        yield mock_db_session

    app.dependency_overrides[get_db_session] = _get_db
    app.dependency_overrides[get_provider_config] = lambda: make_config(fake_provider)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
