"""Unit tests for the SendGrid email helper utilities."""

from __future__ import annotations

import json
import types

import pytest

pytest.importorskip("sendgrid")

from app.infrastructure import email as email_module  # noqa: E402


class DummySettings:
    sendgrid_api_key = "SG.fake"
    sendgrid_sender = "sender@example.com"


class RecordingClient:
    """Stand-in for ``SendGridAPIClient`` capturing the sent message."""

    sent: list = []

    def __init__(self, api_key: str):
        self.api_key = api_key

    def send(self, message):
        RecordingClient.sent.append(message)
        return types.SimpleNamespace(status_code=202, body=None)


def test_send_email_without_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    """When SendGrid settings are missing the helper should exit early."""

    class EmptySettings:
        sendgrid_api_key = None
        sendgrid_sender = None

    monkeypatch.setattr(email_module, "get_settings", lambda: EmptySettings())

    assert email_module.send_email("Subject", "<p>Body</p>", "user@example.com") is False


def test_send_welcome_email_success(monkeypatch: pytest.MonkeyPatch) -> None:
    RecordingClient.sent = []
    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", RecordingClient)

    assert email_module.send_welcome_email("Ada <Admin>", "ada@example.com") is True
    assert len(RecordingClient.sent) == 1
    body = json.dumps(RecordingClient.sent[0].get())
    assert "Ada &lt;Admin&gt;" in body
    assert "Welcome to Taskly" in body


def test_send_email_logs_unsuccessful_response(monkeypatch: pytest.MonkeyPatch, caplog):
    class RejectingClient(RecordingClient):
        def send(self, message):
            return types.SimpleNamespace(
                status_code=400,
                body=json.dumps({"errors": [{"message": "Invalid recipient"}]}),
            )

    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", RejectingClient)

    with caplog.at_level("ERROR"):
        result = email_module.send_email("Subject", "<p>Body</p>", "user@example.com")

    assert result is False
    assert "status 400" in caplog.text
    assert "Invalid recipient" in caplog.text


def test_send_email_logs_forbidden_error(monkeypatch: pytest.MonkeyPatch, caplog):
    """Forbidden responses from SendGrid should surface meaningful log details."""

    class FakeForbiddenError(Exception):
        status_code = 403
        body = json.dumps(
            {
                "errors": [
                    {
                        "message": "The provided authorization grant is invalid.",
                        "help": "https://docs.sendgrid.com/for-developers/sending-email/authentication",
                    }
                ]
            }
        ).encode()

    class FailingClient(RecordingClient):
        def send(self, message):
            raise FakeForbiddenError()

    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", FailingClient)

    with caplog.at_level("ERROR"):
        result = email_module.send_email("Subject", "<p>Body</p>", "user@example.com")

    assert result is False
    assert "status 403" in caplog.text
    assert "authorization grant is invalid" in caplog.text
