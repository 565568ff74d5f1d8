# DTOs
from .user_dto import UserDTO, UserUpdateDTO
from .auth_dto import (
    AuthResultDTO,
    CompleteSignupDTO,
    OtpIssuedDTO,
    RequestOtpDTO,
    TokenDTO,
    VerifyOtpDTO,
)

__all__ = [
    'UserDTO',
    'UserUpdateDTO',
    'AuthResultDTO',
    'CompleteSignupDTO',
    'OtpIssuedDTO',
    'RequestOtpDTO',
    'TokenDTO',
    'VerifyOtpDTO',
]
