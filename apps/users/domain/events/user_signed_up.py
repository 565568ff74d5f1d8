"""
User signed up domain event.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class UserSignedUp(DomainEvent):
    """Event raised when a verified user completes their profile."""
    user_id: UUID
    phone_number: str
    role: str
