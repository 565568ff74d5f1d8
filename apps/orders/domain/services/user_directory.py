"""
User lookups needed by order assignment.
"""
from abc import ABC, abstractmethod
from uuid import UUID

from apps.users.domain.value_objects import UserRole


class UserDirectory(ABC):

    @abstractmethod
    def get_user_role(self, user_id: UUID) -> UserRole:
        """Role of the user; raises a not-found error for unknown ids."""
        pass
