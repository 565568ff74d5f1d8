"""
Phone number value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidPhoneNumberError


@dataclass(frozen=True)
class PhoneNumber(ValueObject):
    """Bangladeshi mobile number, stored in the local 01XXXXXXXXX form."""
    value: str

    def __post_init__(self):
        normalized = self._normalize(self.value)
        if not self._is_valid(normalized):
            raise InvalidPhoneNumberError(self.value)
        # Use object.__setattr__ for frozen dataclass
        object.__setattr__(self, 'value', normalized)

    @staticmethod
    def _normalize(phone: str) -> str:
        """Strip separators and fold the +880 country prefix into a leading 0."""
        digits = re.sub(r'[^0-9+]', '', phone or '')
        digits = re.sub(r'^\+?880', '0', digits)
        if digits and not digits.startswith('0'):
            digits = '0' + digits
        return digits

    @staticmethod
    def _is_valid(phone: str) -> bool:
        """Validate phone number format."""
        return re.match(r'^01[3-9][0-9]{8}$', phone) is not None

    @property
    def international(self) -> str:
        """Get the +880 form of the number."""
        return f"+880{self.value[1:]}"
