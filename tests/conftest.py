"""Shared test fixtures for the portfolio test suite.

Provides:
- app: Flask app configured for testing (email provider unconfigured)
- client: Flask test client
- reset_rate_limiter: fresh contact form limiter for every test
- email_configured: app config with a fake Resend key
- valid_payload: a contact submission that passes validation
"""

import pytest

from portfolio import create_app
from portfolio.extensions import limiter


@pytest.fixture(scope="session")
def app():
    """Create the Flask application configured for testing."""
    app = create_app("testing")
    yield app


@pytest.fixture(autouse=True)
def reset_rate_limiter(app):
    """Each test starts with no clients counted."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def email_configured(app, monkeypatch):
    """Pretend a Resend API key is set for the duration of one test."""
    monkeypatch.setitem(app.config, "RESEND_API_KEY", "re_test_fake")
    return app


@pytest.fixture
def valid_payload():
    """Boundary-length submission: 2-char name, 10-char message."""
    return {
        "name": "Al",
        "email": "a@b.co",
        "subject": "Hi there",
        "message": "1234567890",
        "honeypot": "",
    }
