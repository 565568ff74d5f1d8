"""
User directory backed by the users context.
"""
from uuid import UUID

from apps.users.domain.value_objects import UserRole
from apps.users.infrastructure.repositories import DjangoUserRepository
from ...domain.services.user_directory import UserDirectory


class DjangoUserDirectory(UserDirectory):

    def __init__(self, user_repository=None):
        self.user_repository = user_repository or DjangoUserRepository()

    def get_user_role(self, user_id: UUID) -> UserRole:
        return self.user_repository.get_role(user_id)
