"""
Localized name value object.
"""
from dataclasses import dataclass

from shared.domain import ValidationError, ValueObject


@dataclass(frozen=True)
class LocalizedName(ValueObject):
    """English and Bangla display names."""
    en: str
    bn: str

    def __post_init__(self):
        if not self.en or not self.en.strip():
            raise ValidationError("English name is required", field="name.en")
        if not self.bn or not self.bn.strip():
            raise ValidationError("Bangla name is required", field="name.bn")
