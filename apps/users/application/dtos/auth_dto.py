"""
Authentication DTOs.
"""
from dataclasses import dataclass
from typing import Optional

from .user_dto import UserDTO


@dataclass
class RequestOtpDTO:
    """DTO for an OTP request."""
    phone_number: str


@dataclass
class OtpIssuedDTO:
    """DTO for OTP request response; the code is only echoed in debug mode."""
    message: str
    expires_in_seconds: int
    otp_code: Optional[str] = None


@dataclass
class VerifyOtpDTO:
    """DTO for OTP verification request."""
    phone_number: str
    otp_code: str


@dataclass
class CompleteSignupDTO:
    """DTO for completing a profile after OTP verification."""
    phone_number: str
    full_name: str
    address: str
    role: Optional[str] = None


@dataclass
class TokenDTO:
    """DTO for token response."""
    access_token: str
    refresh_token: str
    token_type: str = "Bearer"


@dataclass
class AuthResultDTO:
    """Tokens plus the authenticated user."""
    tokens: TokenDTO
    user: UserDTO
    is_new_user: bool = False
