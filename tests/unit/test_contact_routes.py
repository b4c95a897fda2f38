import pytest

from src.common.rate_limit import limiter
from src.main import app
from src.modules.contact import recorder
from src.modules.contact.outcomes import EmailAuthError, EmailProviderError
from src.modules.contact.providers.factory import get_provider_config

URL = "/api/contact/send"
VALID = {"name": "Jo", "email": "jo@x.com", "message": "Hello there, this is long enough."}


@pytest.fixture
def recorded(monkeypatch):
    calls = []

    async def fake_record(submission, *args, **kwargs):
        calls.append(submission)

    monkeypatch.setattr(recorder, "record_submission", fake_record)
    return calls


def test_delivered_message_returns_id_and_records_once(client, fake_provider, recorded):
    response = client.post(URL, json=VALID)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Message sent successfully", "messageId": "abc123"}
    assert len(fake_provider.sent) == 1
    assert len(recorded) == 1
    assert recorded[0].email == "jo@x.com"


def test_submission_is_trimmed_before_sending(client, fake_provider, recorded):
    response = client.post(URL, json={"name": "  Jo ", "email": "jo@x.com", "message": "  Hello there, this is long enough.  "})

    assert response.status_code == 200
    assert fake_provider.sent[0].subject == "New Contact Form Message from Jo"
    assert recorded[0].message == "Hello there, this is long enough."


def test_invalid_submission_reports_every_field(client, fake_provider, recorded):
    response = client.post(URL, json={"name": "A", "email": "bad", "message": "short"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Name must be at least 2 characters"
    assert body["fields"] == {
        "name": "Name must be at least 2 characters",
        "email": "Please enter a valid email address",
        "message": "Message must be at least 10 characters",
    }
    assert fake_provider.sent == []
    assert recorded == []


def test_missing_fields_are_required(client, fake_provider):
    response = client.post(URL, json={})

    assert response.status_code == 400
    assert set(response.json()["fields"]) == {"name", "email", "message"}
    assert fake_provider.sent == []


def test_malformed_json_is_rejected(client, fake_provider):
    response = client.post(URL, content=b"{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}
    assert fake_provider.sent == []


def test_not_configured_is_reported(client, config_factory, recorded):
    app.dependency_overrides[get_provider_config] = lambda: config_factory(None)

    response = client.post(URL, json=VALID)

    assert response.status_code == 500
    assert response.json() == {"error": "Email service is not configured"}
    assert recorded == []


def test_provider_timeout_is_reported(client, provider_factory, config_factory, recorded):
    provider = provider_factory(delay=5)
    app.dependency_overrides[get_provider_config] = lambda: config_factory(provider, deadline_seconds=0.05)

    response = client.post(URL, json=VALID)

    assert response.status_code == 500
    assert response.json() == {"error": "Email service is taking too long. Please try again later."}
    assert provider.cancelled
    assert recorded == []


@pytest.mark.parametrize(
    "error, expected",
    [
        (EmailAuthError("535 5.7.8 rejected for me@gmail.com"), "Email authentication failed. Please check SMTP credentials."),
        (EmailProviderError("status=422 body={...}", public_detail="Invalid `from` field."), "Email service error: Invalid `from` field."),
    ],
)
def test_provider_failures_use_stable_messages(client, provider_factory, config_factory, recorded, error, expected):
    app.dependency_overrides[get_provider_config] = lambda: config_factory(provider_factory(error=error))

    response = client.post(URL, json=VALID)

    assert response.status_code == 500
    assert response.json() == {"error": expected}
    assert "me@gmail.com" not in response.text
    assert recorded == []


def test_recording_failure_does_not_change_response(client, monkeypatch, caplog):
    async def failing_insert(submission, db):
        raise RuntimeError("connection refused")

    monkeypatch.setattr(recorder, "_insert_submission", failing_insert)

    response = client.post(URL, json=VALID)

    assert response.status_code == 200
    assert response.json()["messageId"] == "abc123"
    assert "Failed to record contact message" in caplog.text


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.fixture
def rate_limited(monkeypatch):
    monkeypatch.setattr(limiter, "enabled", True)
    limiter.reset()
    yield limiter
    limiter.reset()


def test_contact_form_is_rate_limited_per_client(client, fake_provider, recorded, rate_limited):
    statuses = [client.post(URL, json=VALID).status_code for _ in range(7)]

    assert statuses == [200, 200, 200, 200, 200, 429, 429]
    assert len(fake_provider.sent) == 5
    assert len(recorded) == 5
