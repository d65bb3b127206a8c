"""Unit tests for the SendGrid email helper utilities."""

from __future__ import annotations

import json
import types
from datetime import date

import pytest

from sehra.infrastructure import email as email_module


class _Settings:
    def __init__(self, api_key: str | None = "SG.fake", sender: str | None = "sender@example.com"):
        self.sendgrid_api_key = api_key
        self.sendgrid_sender = sender


class _RecordingClient:
    sent: list = []

    def __init__(self, api_key: str):
        self.api_key = api_key

    def send(self, message):
        _RecordingClient.sent.append(message)
        return types.SimpleNamespace(status_code=202, body=None)


@pytest.fixture(autouse=True)
def _reset_recorder():
    _RecordingClient.sent = []


def test_send_email_without_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    """When SendGrid settings are missing the helper should exit early."""

    monkeypatch.setattr(email_module, "get_settings", lambda: _Settings(None, None))
    monkeypatch.setattr(email_module, "SendGridAPIClient", _RecordingClient)

    assert email_module.send_email("Subject", "<p>Body</p>", "user@example.com") is False
    assert _RecordingClient.sent == []


def test_send_email_success(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(email_module, "get_settings", lambda: _Settings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", _RecordingClient)

    assert email_module.send_email("Subject", "<p>Body</p>", "user@example.com") is True
    assert len(_RecordingClient.sent) == 1


def test_send_email_logs_forbidden_error(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    """Forbidden responses from SendGrid should surface meaningful log details."""

    class FakeForbiddenError(Exception):
        status_code = 403
        body = json.dumps(
            {"errors": [{"message": "The provided authorization grant is invalid."}]}
        ).encode()

    class FailingClient(_RecordingClient):
        def send(self, message):
            raise FakeForbiddenError()

    monkeypatch.setattr(email_module, "get_settings", lambda: _Settings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", FailingClient)

    with caplog.at_level("ERROR"):
        result = email_module.send_email("Subject", "<p>Body</p>", "user@example.com")

    assert result is False
    assert "status 403" in caplog.text
    assert "authorization grant is invalid" in caplog.text


def test_send_email_rejects_non_success_status(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    class RejectingClient(_RecordingClient):
        def send(self, message):
            return types.SimpleNamespace(status_code=400, body=b'{"errors": [{"message": "bad to"}]}')

    monkeypatch.setattr(email_module, "get_settings", lambda: _Settings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", RejectingClient)

    with caplog.at_level("ERROR"):
        assert email_module.send_email("Subject", "<p>Body</p>", "user@example.com") is False
    assert "bad to" in caplog.text


def test_booking_confirmation_mentions_vendor_and_date(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = {}

    def fake_send(subject, html_content, recipient):
        captured.update(subject=subject, html=html_content, recipient=recipient)
        return True

    monkeypatch.setattr(email_module, "send_email", fake_send)

    assert email_module.send_booking_confirmation_email(
        "Asha",
        "asha@example.com",
        business_name="Golden Lens",
        vendor_type="photographer",
        event_date=date(2027, 2, 14),
    )
    assert captured["recipient"] == "asha@example.com"
    assert "Golden Lens" in captured["subject"]
    assert "2027-02-14" in captured["html"]


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        (None, None),
        (b"", None),
        ("plain failure", "plain failure"),
        ({"errors": [{"message": "a"}, {"message": "b"}]}, "a; b"),
    ],
)
def test_extract_sendgrid_error_details(body, expected) -> None:
    assert email_module._extract_sendgrid_error_details(body) == expected
