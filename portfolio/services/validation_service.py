"""Contact form validation.

Checks every field and reports all failing fields together (one error per
field, the first check it fails). The honeypot is not part of
validation; see is_honeypot_triggered().
"""

import re

from portfolio.models.contact import ContactSubmission, FieldError

# Simple email regex: not exhaustive, just a sanity check
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
NAME_RE = re.compile(r"^[a-zA-Z\s'-]+$")

NAME_MIN, NAME_MAX = 2, 100
EMAIL_MAX = 254
SUBJECT_MIN, SUBJECT_MAX = 5, 200
MESSAGE_MIN, MESSAGE_MAX = 10, 10000


def _string_field(data, field, errors):
    """Return data[field] if it is a string, else record an error and return None."""
    value = data.get(field)
    if value is None:
        errors.append(FieldError(field, "Required"))
        return None
    if not isinstance(value, str):
        errors.append(FieldError(field, "Expected string"))
        return None
    return value


def _check_length(field, value, minimum, maximum, label, errors):
    if len(value) < minimum:
        errors.append(FieldError(field, f"{label} must be at least {minimum} characters"))
        return False
    if len(value) > maximum:
        errors.append(FieldError(field, f"{label} must be less than {maximum:,} characters"))
        return False
    return True


def validate_contact(data):
    """Validate a parsed request body.

    Args:
        data: Whatever the JSON body decoded to.

    Returns:
        (ContactSubmission, []) on success, (None, [FieldError, ...]) otherwise.
    """
    if not isinstance(data, dict):
        return None, [FieldError("body", "Expected a JSON object")]

    errors = []

    name = _string_field(data, "name", errors)
    if name is not None:
        if _check_length("name", name, NAME_MIN, NAME_MAX, "Name", errors):
            if not NAME_RE.match(name):
                errors.append(FieldError("name", "Name contains invalid characters"))

    email = _string_field(data, "email", errors)
    if email is not None:
        email = email.strip()
        if not EMAIL_RE.match(email):
            errors.append(FieldError("email", "Invalid email address"))
        elif len(email) > EMAIL_MAX:
            errors.append(FieldError("email", "Email is too long"))
        email = email.lower()

    subject = _string_field(data, "subject", errors)
    if subject is not None:
        _check_length("subject", subject, SUBJECT_MIN, SUBJECT_MAX, "Subject", errors)

    message = _string_field(data, "message", errors)
    if message is not None:
        _check_length("message", message, MESSAGE_MIN, MESSAGE_MAX, "Message", errors)

    if errors:
        return None, errors

    submission = ContactSubmission(
        name=name,
        email=email,
        subject=subject,
        message=message,
    )
    return submission, []


def is_honeypot_triggered(data):
    """True if the hidden bot-trap field carries any value.

    Only a missing field, null or the empty string count as untouched.
    """
    if not isinstance(data, dict):
        return False
    value = data.get("honeypot")
    return value is not None and value != ""
