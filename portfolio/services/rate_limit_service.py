"""Contact form rate limiting on top of Flask-Limiter's fixed-window strategy.

Each client key gets a window that starts on its first request and lasts
CONTACT_RATE_WINDOW seconds. Within a window the first CONTACT_RATE_LIMIT
requests are allowed; the rest are denied without being counted. A client
can therefore land up to 2x the limit across a window boundary. The
in-memory storage drops expired windows on its own.

State is process-local and lost on restart. Client keys come from proxy
headers, which clients can forge, so this only makes sense behind a
trusted reverse proxy that sets them.
"""

from flask import current_app, request
from limits import RateLimitItemPerSecond

ANONYMOUS_KEY = "anonymous"
NAMESPACE = "contact"


def client_key_from_headers(headers) -> str:
    """Rate limit key for a request: X-Forwarded-For, then X-Real-IP, then a shared sentinel.

    Clients without either header all share the ANONYMOUS_KEY bucket.
    """
    forwarded = headers.get("X-Forwarded-For")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    real_ip = (headers.get("X-Real-IP") or "").strip()
    if real_ip:
        return real_ip
    return ANONYMOUS_KEY


def client_key_from_request() -> str:
    """Limiter key_func: the client key of the current request."""
    return client_key_from_headers(request.headers)


def contact_rate_limit():
    """The configured contact limit, e.g. 3 per 3600 seconds."""
    return RateLimitItemPerSecond(
        current_app.config["CONTACT_RATE_LIMIT"],
        current_app.config["CONTACT_RATE_WINDOW"],
    )


def check_rate_limit(client_key: str) -> bool:
    """Count a contact submission from client_key. Returns False if it is over the limit."""
    from portfolio.extensions import limiter

    item = contact_rate_limit()
    # Denied requests are not counted against the window
    if not limiter.limiter.test(item, NAMESPACE, client_key):
        return False
    return limiter.limiter.hit(item, NAMESPACE, client_key)


def remaining_requests(client_key: str) -> int:
    """How many more submissions client_key may make in its current window."""
    from portfolio.extensions import limiter

    stats = limiter.limiter.get_window_stats(contact_rate_limit(), NAMESPACE, client_key)
    return stats.remaining
