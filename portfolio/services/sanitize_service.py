"""HTML-escape free-text contact fields before they are logged or emailed.

Escaping happens exactly once per submission. The escaped values come back
as Markup so the Jinja email templates render them as-is instead of
escaping them a second time.
"""

from dataclasses import replace

from markupsafe import Markup, escape


def sanitize_string(text) -> Markup:
    """Escape &, <, >, " and ' in user input."""
    return escape(text)


def sanitize_submission(submission):
    """Return a copy of the submission with name, subject and message escaped.

    The email address is left alone; validation already trimmed and
    lowercased it.
    """
    return replace(
        submission,
        name=sanitize_string(submission.name),
        subject=sanitize_string(submission.subject),
        message=sanitize_string(submission.message),
    )
