import os
import re

# Same sanity check the contact blueprint uses for submitted addresses.
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Config:
    """Base configuration. Shared across all environments."""

    # --- Site ---
    SITE_URL = os.environ.get("SITE_URL", "http://localhost:5000")
    SITE_NAME = os.environ.get("SITE_NAME", "Portfolio")

    # --- MongoDB (not used by the contact form) ---
    MONGODB_URI = os.environ.get("MONGODB_URI")
    MONGODB_DB = os.environ.get("MONGODB_DB")

    # --- Email (Resend) ---
    RESEND_API_KEY = os.environ.get("RESEND_API_KEY")
    RESEND_API_URL = os.environ.get("RESEND_API_URL", "https://api.resend.com/emails")
    EMAIL_FROM = os.environ.get("EMAIL_FROM")  # e.g. contact@yourdomain.dev
    EMAIL_TO = os.environ.get("EMAIL_TO")      # where submissions land

    # --- Contact form rate limiting ---
    CONTACT_RATE_LIMIT = int(os.environ.get("CONTACT_RATE_LIMIT", 3))
    CONTACT_RATE_WINDOW = int(os.environ.get("CONTACT_RATE_WINDOW", 3600))  # seconds

    @staticmethod
    def validate():
        """Fail fast if required env vars are missing or malformed."""
        required = [
            "SITE_URL",
            "SITE_NAME",
            "RESEND_API_KEY",
            "EMAIL_FROM",
            "EMAIL_TO",
        ]
        problems = [v for v in required if not os.environ.get(v)]

        site_url = os.environ.get("SITE_URL", "")
        if site_url and not site_url.startswith(("http://", "https://")):
            problems.append("SITE_URL (not an http(s) URL)")

        for var in ("EMAIL_FROM", "EMAIL_TO"):
            value = os.environ.get(var, "")
            if value and not _EMAIL_RE.match(value):
                problems.append(f"{var} (not an email address)")

        if problems:
            raise RuntimeError(
                f"Missing or invalid environment variables: {', '.join(problems)}"
            )


class DevConfig(Config):
    """Local development."""

    DEBUG = True


class TestConfig(Config):
    """Testing — provider unconfigured unless a test sets it."""

    TESTING = True
    DEBUG = True
    SITE_URL = "http://localhost:5000"
    SITE_NAME = "Test Portfolio"
    RESEND_API_KEY = None
    EMAIL_FROM = "contact@portfolio.test"
    EMAIL_TO = "owner@portfolio.test"
    CONTACT_RATE_LIMIT = 3
    CONTACT_RATE_WINDOW = 3600

    @staticmethod
    def validate():
        """Skip validation in test mode — everything is hardcoded."""
        pass


class ProdConfig(Config):
    """Production."""

    DEBUG = False


config_by_name = {
    "development": DevConfig,
    "production": ProdConfig,
    "testing": TestConfig,
}
