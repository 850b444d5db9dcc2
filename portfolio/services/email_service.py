"""
Contact email delivery via the Resend HTTP API.

One blocking attempt per submission; no retries. Returns a DeliveryResult
instead of raising so the contact endpoint can branch on the outcome.

Usage:
    from portfolio.services.email_service import send_contact_email

    result = send_contact_email(submission)  # Sent | Unconfigured | Failed
"""

import logging
import time
from datetime import datetime

import requests
from flask import current_app, render_template

from portfolio.models.contact import ContactSubmission
from portfolio.models.delivery import Failed, Sent, Unconfigured
from portfolio.services.sanitize_service import sanitize_submission

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10  # seconds
SUBJECT_PREFIX = "Portfolio Contact: "


def _render_bodies(submission):
    """Render the HTML and plain-text versions from the same context."""
    context = {
        "name": submission.name,
        "email": submission.email,
        "subject": submission.subject,
        "message": submission.message,
        "site_name": current_app.config.get("SITE_NAME", "Portfolio"),
        "sent_at": datetime.now().strftime("%A, %B %d, %Y at %I:%M %p"),
    }
    html_body = render_template("emails/contact_notification.html", **context)
    text_body = render_template("emails/contact_notification.txt", **context)
    return html_body, text_body


def _provider_error(response):
    """Pull a readable reason out of a non-2xx Resend response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return body["message"]
    return f"Resend returned HTTP {response.status_code}"


def send_contact_email(submission):
    """
    Send a contact submission to the site owner.

    Args:
        submission: A validated, genuine, already-sanitized ContactSubmission.

    Returns:
        Sent(message_id), Unconfigured() when RESEND_API_KEY is unset, or
        Failed(reason).
    """
    config = current_app.config
    api_key = config.get("RESEND_API_KEY")

    if not api_key:
        logger.warning("Email not sent — RESEND_API_KEY not configured.")
        return Unconfigured()

    from_email = config.get("EMAIL_FROM")
    to_email = config.get("EMAIL_TO")
    if not from_email or not to_email:
        logger.error("Email not sent — EMAIL_FROM or EMAIL_TO not configured.")
        return Failed("Email addresses not configured")

    html_body, text_body = _render_bodies(submission)

    payload = {
        "from": from_email,
        "to": [to_email],
        "subject": f"{SUBJECT_PREFIX}{submission.subject}",
        "html": html_body,
        "text": text_body,
        "reply_to": submission.email,
        "headers": {
            "X-Entity-Ref-ID": f"contact-{int(time.time() * 1000)}",
        },
    }

    try:
        resp = requests.post(
            config.get("RESEND_API_URL", "https://api.resend.com/emails"),
            json=payload,
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"Failed to reach Resend: {e}")
        return Failed(str(e))

    if not resp.ok:
        reason = _provider_error(resp)
        logger.error(f"Resend API error ({resp.status_code}): {reason}")
        return Failed(reason)

    try:
        message_id = resp.json().get("id")
    except (ValueError, AttributeError):
        message_id = None
    if not message_id:
        logger.error("Resend accepted the request but returned no message id")
        return Failed("Missing message id in provider response")

    logger.info(f"Contact email sent to {to_email} — id {message_id}")
    return Sent(message_id)


def send_test_email():
    """Send a fixed sample submission to check the email configuration."""
    sample = ContactSubmission(
        name="Test User",
        email="test@example.com",
        subject="Test Email from Portfolio",
        message="This is a test email to verify the email configuration is working correctly.",
    )
    return send_contact_email(sanitize_submission(sample))
