"""
User domain exceptions.
"""
from shared.domain.exceptions import (
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationError,
)


class InvalidPhoneNumberError(ValidationError):
    """Raised when a phone number is invalid."""

    def __init__(self, phone: str):
        super().__init__(message=f"Invalid phone number: '{phone}'", field="phone_number")
        self.phone = phone


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user is not found."""

    def __init__(self, identifier: str):
        super().__init__(entity_name="User", entity_id=identifier, code="USER_NOT_FOUND")
        self.identifier = identifier


class InvalidOtpError(ValidationError):
    """Raised when an OTP does not match or has expired."""

    def __init__(self):
        super().__init__(message="Invalid or expired OTP", field="otp_code", code="INVALID_OTP")


class PhoneNotVerifiedError(ValidationError):
    """Raised when signup is completed before the phone number was verified."""

    def __init__(self, phone: str):
        super().__init__(
            message=f"Phone number '{phone}' is not verified. Please verify OTP first",
            field="phone_number",
            code="PHONE_NOT_VERIFIED",
        )
        self.phone = phone


class UserInactiveError(PermissionDeniedError):
    """Raised when an inactive user attempts to perform an action."""

    def __init__(self, user_id: str):
        super().__init__(message=f"User '{user_id}' is inactive", code="USER_INACTIVE")
        self.user_id = user_id
