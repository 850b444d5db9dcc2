"""Contact form data.

A ContactSubmission only exists once every field has passed validation.
Nothing here is persisted; submissions live for the length of a request.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactSubmission:
    name: str
    email: str
    subject: str
    message: str


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self):
        return {"field": self.field, "message": self.message}
