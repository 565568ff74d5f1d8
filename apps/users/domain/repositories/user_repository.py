"""
User repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.user import User
from ..value_objects.user_role import UserRole


class UserRepository(ABC):
    """Abstract repository for User aggregate."""

    @abstractmethod
    def save(self, user: User) -> User:
        """Save a user."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    def find_by_phone(self, phone_number: str) -> Optional[User]:
        """Find a user by normalized phone number."""
        pass

    @abstractmethod
    def find_all(
        self,
        role: Optional[UserRole] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[User]:
        """Find all users with an optional role filter."""
        pass

    @abstractmethod
    def get_role(self, user_id: UUID) -> UserRole:
        """Return the user's role, raising UserNotFoundError when absent."""
        pass

    def find_delivery_personnel(self) -> List[User]:
        """Active users holding the delivery role."""
        return [
            user for user in self.find_all(role=UserRole.DELIVERY, limit=1000)
            if user.is_active
        ]
