"""
Contact form blueprint — /api/contact

Pipeline for one submission:
    rate limit -> parse JSON -> validate -> honeypot -> sanitize -> send email

Everything that can go wrong is answered here with JSON; nothing from the
pipeline is allowed to escape to Flask as an unhandled exception.

Route Map:
  POST /api/contact  — Accept a contact submission
  GET  /api/contact  — 405, the endpoint is POST-only
"""

import logging

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import BadRequest

from portfolio.models.delivery import Failed, Sent, Unconfigured
from portfolio.services.email_service import send_contact_email
from portfolio.services.rate_limit_service import check_rate_limit, client_key_from_headers
from portfolio.services.sanitize_service import sanitize_submission
from portfolio.services.validation_service import is_honeypot_triggered, validate_contact

contact_bp = Blueprint("contact", __name__, url_prefix="/api")

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Message sent successfully! You will receive a response soon."
DEV_SUCCESS_MESSAGE = "Message received. Email delivery is not configured, so it was only logged."
RATE_LIMIT_MESSAGE = "Too many requests. Please try again in an hour."
DELIVERY_FAILED_MESSAGE = "Failed to send message. Please try again or email me directly."
GENERIC_ERROR_MESSAGE = "Failed to send message. Please try again later."


@contact_bp.route("/contact", methods=["POST"])
def submit_contact():
    """
    Accept a JSON contact form submission.

    Expects: { name, email, subject, message, honeypot }
    Returns: { success: true, message } or { error: "..." }
    """
    try:
        return _handle_submission()
    except Exception:
        logger.exception("[API] POST /api/contact failed")
        return jsonify(error=GENERIC_ERROR_MESSAGE), 500


@contact_bp.route("/contact", methods=["GET"])
def contact_method_not_allowed():
    return jsonify(error="Method not allowed"), 405


def _handle_submission():
    # --- Rate limit (before the body is even read) ---
    client_key = client_key_from_headers(request.headers)
    if not check_rate_limit(client_key):
        logger.warning(f"Contact form rate limit hit for {client_key}")
        return jsonify(error=RATE_LIMIT_MESSAGE), 429

    # --- Parse ---
    try:
        data = request.get_json(force=True)
    except BadRequest as e:
        logger.error(f"Contact form body could not be parsed: {e}")
        return jsonify(error=GENERIC_ERROR_MESSAGE), 500

    # --- Validate ---
    submission, errors = validate_contact(data)

    # --- Honeypot: fake success so bots can't tell they were caught ---
    if is_honeypot_triggered(data):
        email = data.get("email") if isinstance(data, dict) else None
        logger.warning(f"[SECURITY] Honeypot triggered: ip={client_key} email={email!r}")
        return jsonify(success=True, message=SUCCESS_MESSAGE), 200

    if errors:
        return jsonify(
            error="Invalid input",
            details=[e.to_dict() for e in errors],
        ), 400

    # --- Sanitize ---
    submission = sanitize_submission(submission)
    logger.info(
        f"[CONTACT FORM] New submission from {submission.name} <{submission.email}> "
        f"(ip: {client_key})"
    )

    # --- Deliver ---
    result = send_contact_email(submission)

    if isinstance(result, Sent):
        logger.info(f"Contact email delivered — id {result.message_id}")
        return jsonify(success=True, message=SUCCESS_MESSAGE), 200

    if isinstance(result, Unconfigured):
        logger.warning(
            f"Contact form submission from {submission.email} not emailed — "
            "email service not configured."
        )
        return jsonify(success=True, message=DEV_SUCCESS_MESSAGE, development=True), 200

    if isinstance(result, Failed):
        logger.error(f"Contact email delivery failed: {result.reason}")
        return jsonify(error=DELIVERY_FAILED_MESSAGE), 500

    raise TypeError(f"Unexpected delivery result: {result!r}")
