"""Utility helpers for sending transactional email notifications via SendGrid."""

from __future__ import annotations

import html
import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from app.config import get_settings

logger = logging.getLogger(__name__)


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            body = json.loads(body)
        except json.JSONDecodeError:
            return body

    if isinstance(body, dict):
        messages: list[str] = []
        for item in body.get("errors") or []:
            if not isinstance(item, dict) or not item.get("message"):
                continue
            help_link = item.get("help")
            if help_link:
                messages.append(f"{item['message']} (help: {help_link})")
            else:
                messages.append(str(item["message"]))
        if messages:
            return "; ".join(messages)
        return json.dumps(body, default=str)

    if isinstance(body, list):
        return "; ".join(str(item) for item in body)

    return None


def _log_delivery_failure(source: Any, *, prefix: str) -> None:
    status_code = getattr(source, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(source, "body", None))

    if status_code and details:
        logger.error("%s with status %s: %s", prefix, status_code, details)
    elif status_code:
        logger.error("%s with status %s", prefix, status_code)
    elif details:
        logger.error("%s: %s", prefix, details)
    else:
        logger.error("%s: %r", prefix, source)


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Send an email using the configured SendGrid credentials.

    Returns ``False`` instead of raising when delivery is not configured or
    fails, so callers can carry on with the user-facing operation.
    """

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        client = SendGridAPIClient(settings.sendgrid_api_key)
        response = client.send(message)
    except Exception as exc:  # pragma: no cover - network failures depend on environment
        _log_delivery_failure(exc, prefix="SendGrid API request failed")
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_delivery_failure(response, prefix="SendGrid API responded")
        return False

    return True


def send_welcome_email(full_name: str, email: str) -> bool:
    """Greet a freshly registered user."""

    subject = "Welcome to Taskly"
    html_content = "".join(
        (
            f"<p>Hi {html.escape(full_name)},</p>",
            "<p>Your Taskly account has been created successfully.</p>",
            "<p>Log in to start planning your tasks. We will remind you before "
            "they are due.</p>",
        )
    )
    return send_email(subject, html_content, email)


__all__ = ["send_email", "send_welcome_email"]
