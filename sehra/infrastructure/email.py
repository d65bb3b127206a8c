"""Utility helpers for sending transactional email notifications via SendGrid."""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from sehra.config import get_settings

logger = logging.getLogger(__name__)


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

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
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages = [
                str(item["message"])
                for item in errors
                if isinstance(item, dict) and item.get("message")
            ]
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    return None


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Send an email using the configured SendGrid credentials."""

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
        status_code = getattr(exc, "status_code", None)
        details = _extract_sendgrid_error_details(getattr(exc, "body", None))
        logger.error(
            "SendGrid API request failed with status %s: %s",
            status_code,
            details or exc,
        )
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        details = _extract_sendgrid_error_details(getattr(response, "body", None))
        logger.error("SendGrid API responded with status %s: %s", status_code, details)
        return False

    return True


def send_welcome_email(name: str, email: str, role: str) -> bool:
    """Greet a newly registered account."""

    subject = "Welcome to Sehra"
    html_content = (
        f"<p>Hi {name},</p>"
        "<p>Your Sehra account is ready.</p>"
        f"<p>You signed up as <strong>{role}</strong>. Log in to start planning.</p>"
    )
    return send_email(subject, html_content, email)


def send_booking_confirmation_email(
    name: str,
    email: str,
    *,
    business_name: str,
    vendor_type: str,
    event_date: date,
) -> bool:
    """Confirm to a client that their booking request was recorded."""

    subject = f"Booking request sent to {business_name}"
    html_content = "".join(
        (
            f"<p>Hi {name},</p>",
            f"<p>Your booking request with <strong>{business_name}</strong> ({vendor_type}) ",
            f"for {event_date.isoformat()} has been received.</p>",
            "<p>The vendor will confirm availability shortly.</p>",
        )
    )
    return send_email(subject, html_content, email)


def send_account_credentials_email(name: str, email: str, *, role: str, password: str) -> bool:
    """Send an administrator-created account its sign-in details."""

    subject = "Your Sehra account"
    html_content = "".join(
        (
            f"<p>Hi {name},</p>",
            f"<p>A Sehra <strong>{role}</strong> account was created for you.</p>",
            f"<p><strong>Email:</strong> {email}<br><strong>Password:</strong> {password}</p>",
            "<p>Please sign in and change your password.</p>",
        )
    )
    return send_email(subject, html_content, email)


def send_password_reset_email(name: str, email: str, password: str) -> bool:
    subject = "Your Sehra password has been reset"
    html_content = "".join(
        (
            f"<p>Hi {name},</p>",
            "<p>An administrator reset your password.</p>",
            f"<p><strong>Temporary password:</strong> {password}</p>",
            "<p>Please sign in and change it.</p>",
        )
    )
    return send_email(subject, html_content, email)


def send_supervisor_assignment_email(
    client_name: str, client_email: str, *, supervisor_name: str, supervisor_email: str
) -> bool:
    """Introduce a client to the supervisor now looking after their wedding."""

    subject = "Meet your Sehra supervisor"
    html_content = (
        f"<p>Hi {client_name},</p>"
        f"<p><strong>{supervisor_name}</strong> ({supervisor_email}) will supervise your "
        "wedding planning from now on.</p>"
    )
    return send_email(subject, html_content, client_email)
