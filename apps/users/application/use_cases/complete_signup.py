"""
Complete signup use case.
"""
import logging
from dataclasses import dataclass

from shared.domain.exceptions import ValidationError
from shared.application import UseCase, UseCaseResult, parse_optional_enum
from ...domain.exceptions import PhoneNotVerifiedError, UserNotFoundError
from ...domain.repositories.user_repository import UserRepository
from ...domain.value_objects.phone_number import PhoneNumber
from ...domain.value_objects.user_role import UserRole
from ...infrastructure.tokens import JwtTokenIssuer
from ..dtos.auth_dto import AuthResultDTO, CompleteSignupDTO
from ..dtos.user_dto import UserDTO

logger = logging.getLogger(__name__)


@dataclass
class CompleteSignupUseCase(UseCase[CompleteSignupDTO, AuthResultDTO]):
    """Fill in the profile of a verified account and re-issue tokens."""

    user_repository: UserRepository
    token_issuer: JwtTokenIssuer

    def execute(self, input_dto: CompleteSignupDTO) -> UseCaseResult[AuthResultDTO]:
        phone = PhoneNumber(value=input_dto.phone_number)

        user = self.user_repository.find_by_phone(phone.value)
        if user is None:
            raise UserNotFoundError(phone.value)
        if not user.is_verified:
            raise PhoneNotVerifiedError(phone.value)

        role = parse_optional_enum(UserRole, input_dto.role, "role")
        if role is not None:
            # Admin accounts are provisioned out of band.
            if role not in UserRole.self_assignable():
                raise ValidationError(f"Role '{role.value}' cannot be self-assigned", field="role")

        user.complete_profile(
            full_name=input_dto.full_name,
            address=input_dto.address,
            role=role,
        )
        saved_user = self.user_repository.save(user)
        for event in user.clear_domain_events():
            logger.info("%s user=%s role=%s", event.event_type, user.id, user.role.value)

        return UseCaseResult.ok(
            AuthResultDTO(
                tokens=self.token_issuer.issue(saved_user),
                user=UserDTO.from_entity(saved_user),
                is_new_user=False,
            )
        )
