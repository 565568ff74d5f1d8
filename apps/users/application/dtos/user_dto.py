"""
User DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from ...domain.entities.user import User


@dataclass
class UserUpdateDTO:
    """DTO for updating a user."""
    full_name: Optional[str] = None
    address: Optional[str] = None


@dataclass
class UserDTO:
    """DTO for user output."""
    id: UUID
    phone_number: str
    full_name: str
    address: str
    role: str
    is_active: bool
    is_verified: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> 'UserDTO':
        """Create DTO from entity."""
        return cls(
            id=user.id,
            phone_number=user.phone_number.value,
            full_name=user.full_name,
            address=user.address,
            role=user.role.value,
            is_active=user.is_active,
            is_verified=user.is_verified,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
