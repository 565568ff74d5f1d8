"""
User verified domain event.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class UserVerified(DomainEvent):
    """Event raised when a user confirms their phone number with an OTP."""
    user_id: UUID
    phone_number: str
