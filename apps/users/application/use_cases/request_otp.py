"""
Request OTP use case.
"""
import logging
import secrets
from dataclasses import dataclass
from datetime import timedelta

from django.conf import settings

from shared.application import UseCase, UseCaseResult
from ...domain.entities.user import User
from ...domain.exceptions import UserInactiveError
from ...domain.repositories.user_repository import UserRepository
from ...domain.value_objects.phone_number import PhoneNumber
from ..dtos.auth_dto import OtpIssuedDTO, RequestOtpDTO

logger = logging.getLogger(__name__)


def generate_otp_code() -> str:
    """Return the configured fixed code, or a random 6-digit one."""
    fixed = getattr(settings, 'OTP_FIXED_CODE', '')
    if fixed:
        return fixed
    return f"{secrets.randbelow(1_000_000):06d}"


@dataclass
class RequestOtpUseCase(UseCase[RequestOtpDTO, OtpIssuedDTO]):
    """Issue a one-time code, creating a placeholder account on first contact."""

    user_repository: UserRepository

    def execute(self, input_dto: RequestOtpDTO) -> UseCaseResult[OtpIssuedDTO]:
        phone = PhoneNumber(value=input_dto.phone_number)

        user = self.user_repository.find_by_phone(phone.value)
        if user is None:
            user = User.create_placeholder(phone.value)
        elif not user.is_active:
            raise UserInactiveError(str(user.id))

        expiry_minutes = getattr(settings, 'OTP_EXPIRY_MINUTES', 5)
        code = generate_otp_code()
        user.issue_otp(code, timedelta(minutes=expiry_minutes))
        self.user_repository.save(user)

        # No SMS gateway; the log line is how the code reaches operators.
        logger.info("OTP issued for %s: %s", phone.value, code)

        return UseCaseResult.ok(
            OtpIssuedDTO(
                message="OTP sent successfully",
                expires_in_seconds=expiry_minutes * 60,
                otp_code=code if settings.DEBUG else None,
            )
        )
