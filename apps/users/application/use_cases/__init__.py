# Use cases
from .request_otp import RequestOtpUseCase
from .verify_otp import VerifyOtpUseCase
from .complete_signup import CompleteSignupUseCase
from .manage_profile import GetUserUseCase, ListUsersUseCase, UpdateProfileUseCase

__all__ = [
    'RequestOtpUseCase',
    'VerifyOtpUseCase',
    'CompleteSignupUseCase',
    'GetUserUseCase',
    'ListUsersUseCase',
    'UpdateProfileUseCase',
]
