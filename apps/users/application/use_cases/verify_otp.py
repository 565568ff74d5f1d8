"""
Verify OTP use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import InvalidOtpError, UserInactiveError, UserNotFoundError
from ...domain.repositories.user_repository import UserRepository
from ...domain.value_objects.phone_number import PhoneNumber
from ...infrastructure.tokens import JwtTokenIssuer
from ..dtos.auth_dto import AuthResultDTO, VerifyOtpDTO
from ..dtos.user_dto import UserDTO

logger = logging.getLogger(__name__)


@dataclass
class VerifyOtpUseCase(UseCase[VerifyOtpDTO, AuthResultDTO]):
    """Exchange a valid OTP for a token pair."""

    user_repository: UserRepository
    token_issuer: JwtTokenIssuer

    def execute(self, input_dto: VerifyOtpDTO) -> UseCaseResult[AuthResultDTO]:
        phone = PhoneNumber(value=input_dto.phone_number)

        user = self.user_repository.find_by_phone(phone.value)
        if user is None:
            raise UserNotFoundError(phone.value)
        if not user.is_active:
            raise UserInactiveError(str(user.id))

        if not user.verify_otp(input_dto.otp_code):
            logger.warning("OTP verification failed for %s", phone.value)
            raise InvalidOtpError()

        user.record_login()
        saved_user = self.user_repository.save(user)
        for event in user.clear_domain_events():
            logger.info("%s user=%s", event.event_type, user.id)

        return UseCaseResult.ok(
            AuthResultDTO(
                tokens=self.token_issuer.issue(saved_user),
                user=UserDTO.from_entity(saved_user),
                is_new_user=saved_user.is_new_user,
            )
        )
