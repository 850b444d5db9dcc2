# Models package: transient request data, nothing is stored.

from portfolio.models.contact import ContactSubmission, FieldError  # noqa: F401
from portfolio.models.delivery import (  # noqa: F401
    DeliveryResult,
    Failed,
    Sent,
    Unconfigured,
)
