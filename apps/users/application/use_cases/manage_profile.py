"""
Profile and directory use cases.
"""
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import UserNotFoundError
from ...domain.repositories.user_repository import UserRepository
from ...domain.value_objects.user_role import UserRole
from ..dtos.user_dto import UserDTO, UserUpdateDTO


@dataclass
class GetUserUseCase(UseCase[UUID, UserDTO]):
    """Fetch a single user."""

    user_repository: UserRepository

    def execute(self, input_dto: UUID) -> UseCaseResult[UserDTO]:
        user = self.user_repository.find_by_id(input_dto)
        if user is None:
            raise UserNotFoundError(str(input_dto))
        return UseCaseResult.ok(UserDTO.from_entity(user))


@dataclass
class UpdateProfileUseCase(UseCase[UserUpdateDTO, UserDTO]):
    """Update name and address of the calling user."""

    user_repository: UserRepository
    user_id: UUID

    def execute(self, input_dto: UserUpdateDTO) -> UseCaseResult[UserDTO]:
        user = self.user_repository.find_by_id(self.user_id)
        if user is None:
            raise UserNotFoundError(str(self.user_id))
        user.update_profile(full_name=input_dto.full_name, address=input_dto.address)
        return UseCaseResult.ok(UserDTO.from_entity(self.user_repository.save(user)))


@dataclass
class ListUsersUseCase(UseCase[Optional[UserRole], List[UserDTO]]):
    """List users, optionally narrowed to one role."""

    user_repository: UserRepository
    offset: int = 0
    limit: int = 100

    def execute(self, input_dto: Optional[UserRole] = None) -> UseCaseResult[List[UserDTO]]:
        users = self.user_repository.find_all(role=input_dto, offset=self.offset, limit=self.limit)
        return UseCaseResult.ok([UserDTO.from_entity(user) for user in users])
