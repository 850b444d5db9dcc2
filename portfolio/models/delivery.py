"""Outcome of a single attempt to deliver a contact email.

Exactly one of:
    Sent          — provider accepted the email, carries its message id
    Unconfigured  — no provider credential; nothing was sent
    Failed        — provider or transport rejected the send, carries the reason
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Sent:
    message_id: str


@dataclass(frozen=True)
class Unconfigured:
    pass


@dataclass(frozen=True)
class Failed:
    reason: str


DeliveryResult = Sent | Unconfigured | Failed
