"""
User entity (Aggregate Root).
"""
import hmac
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from shared.domain import AggregateRoot, utc_now
from ..value_objects.phone_number import PhoneNumber
from ..value_objects.user_role import UserRole
from ..events.user_signed_up import UserSignedUp
from ..events.user_verified import UserVerified

PLACEHOLDER_NAME = "New User"


@dataclass(eq=False)
class User(AggregateRoot):
    """User entity; the phone number is the login identifier (no password)."""
    phone_number: PhoneNumber
    full_name: str = PLACEHOLDER_NAME
    address: str = ""
    role: UserRole = UserRole.CUSTOMER
    is_active: bool = True
    is_verified: bool = False
    is_staff: bool = False
    otp_code: str = ""
    otp_expiry: Optional[datetime] = None
    last_login: Optional[datetime] = None

    @classmethod
    def create_placeholder(cls, phone_number: str) -> 'User':
        """Create the unverified account an OTP request is attached to."""
        return cls(phone_number=PhoneNumber(value=phone_number))

    def issue_otp(self, code: str, valid_for: timedelta) -> None:
        """Attach a fresh one-time code to the account."""
        self.otp_code = code
        self.otp_expiry = utc_now() + valid_for
        self.touch()

    def verify_otp(self, code: str) -> bool:
        """Consume the pending code; returns False on mismatch or expiry."""
        if not self.otp_code or not hmac.compare_digest(self.otp_code, code or ""):
            return False
        if self.otp_expiry is not None and utc_now() > self.otp_expiry:
            return False

        first_verification = not self.is_verified
        self.otp_code = ""
        self.otp_expiry = None
        self.is_verified = True
        self.touch()
        if first_verification:
            self.add_domain_event(
                UserVerified(user_id=self.id, phone_number=self.phone_number.value)
            )
        return True

    def complete_profile(
        self,
        full_name: str,
        address: str,
        role: Optional[UserRole] = None,
    ) -> None:
        """Fill in the profile after the phone number has been verified."""
        self.full_name = full_name
        self.address = address
        if role is not None:
            self.role = role
        self.touch()
        self.add_domain_event(
            UserSignedUp(
                user_id=self.id,
                phone_number=self.phone_number.value,
                role=self.role.value,
            )
        )

    def update_profile(
        self,
        full_name: Optional[str] = None,
        address: Optional[str] = None,
    ) -> None:
        """Update user profile information."""
        if full_name is not None:
            self.full_name = full_name
        if address is not None:
            self.address = address
        self.touch()

    def record_login(self) -> None:
        """Record a successful login."""
        self.last_login = utc_now()
        self.touch()

    def has_role(self, role: UserRole) -> bool:
        return self.role == role

    @property
    def is_new_user(self) -> bool:
        """True while the profile still holds the placeholder values."""
        return self.full_name == PLACEHOLDER_NAME or not self.address
