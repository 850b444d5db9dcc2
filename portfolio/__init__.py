import os
import logging

import click
from flask import Flask, jsonify

from portfolio.config import config_by_name
from portfolio.extensions import limiter


def create_app(config_name=None):
    """Application factory."""

    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.sort_keys = False

    # --- Validate required env vars (skip in testing, fatal in production) ---
    if config_name != "testing":
        try:
            config_by_name[config_name].validate()
        except RuntimeError as e:
            if config_name == "production":
                raise
            app.logger.warning(f"Config validation: {e}")

    # --- Init extensions ---
    limiter.init_app(app)

    # --- Register blueprints ---
    from portfolio.blueprints.contact import contact_bp

    app.register_blueprint(contact_bp)

    # --- Error handlers ---
    @app.errorhandler(404)
    def not_found(e):
        return jsonify(error="Not found"), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify(error="Method not allowed"), 405

    @app.errorhandler(500)
    def server_error(e):
        return jsonify(error="Internal server error"), 500

    # --- CLI commands ---
    register_cli(app)

    # --- Security headers ---
    @app.after_request
    def add_security_headers(response):
        """Add security headers to every response."""
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Permissions-Policy"] = (
            "camera=(), microphone=(), geolocation=(), payment=()"
        )
        # JSON API only, nothing here loads subresources
        response.headers["Content-Security-Policy"] = (
            "default-src 'none'; frame-ancestors 'none'; base-uri 'none';"
        )
        # Strict Transport Security (only in production)
        if not app.debug:
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )
        return response

    # --- Logging ---
    if not app.debug:
        logging.basicConfig(level=logging.INFO)

    return app


def register_cli(app):
    """Register custom CLI commands with the Flask app."""

    @app.cli.command("send-test-email")
    def send_test_email_command():
        """Send a sample contact email to EMAIL_TO.

        Usage:
            flask send-test-email
        """
        from portfolio.models.delivery import Failed, Sent, Unconfigured
        from portfolio.services.email_service import send_test_email

        result = send_test_email()

        if isinstance(result, Sent):
            click.echo(f"Test email sent. Message id: {result.message_id}")
        elif isinstance(result, Unconfigured):
            click.echo("Email service not configured. Set RESEND_API_KEY to send emails.")
        elif isinstance(result, Failed):
            click.echo(f"ERROR: {result.reason}")
