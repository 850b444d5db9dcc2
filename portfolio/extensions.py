"""
Deferred extension instances.

Created here, bound to the app in create_app() via init_app().
"""

from flask_limiter import Limiter

from portfolio.services.rate_limit_service import client_key_from_request

limiter = Limiter(
    key_func=client_key_from_request,
    default_limits=[],  # No global limit, the contact form checks its own
    storage_uri="memory://",
    strategy="fixed-window",
)
