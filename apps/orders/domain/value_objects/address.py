"""
Address value object.
"""
from dataclasses import dataclass

from shared.domain import ValidationError, ValueObject


@dataclass(frozen=True)
class Address(ValueObject):
    """Pickup or delivery address."""
    full_address: str
    landmark: str = ""
    contact_phone: str = ""

    def __post_init__(self):
        if not self.full_address or not self.full_address.strip():
            raise ValidationError("Address is required", field="full_address")

    @classmethod
    def from_dict(cls, data: dict) -> 'Address':
        return cls(
            full_address=data.get('full_address', ''),
            landmark=data.get('landmark') or '',
            contact_phone=data.get('contact_phone') or '',
        )
