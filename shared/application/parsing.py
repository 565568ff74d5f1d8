"""
Input coercion helpers shared by use cases.
"""
from enum import Enum
from typing import Optional, Type, TypeVar

from shared.domain.exceptions import ValidationError

E = TypeVar('E', bound=Enum)


def parse_enum(enum_cls: Type[E], value, field: str) -> E:
    """Coerce a raw value into ``enum_cls`` or raise a ValidationError naming ``field``."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(
            f"Invalid {field} '{value}'. Expected one of: {allowed}",
            field=field,
        ) from None


def parse_optional_enum(enum_cls: Type[E], value, field: str) -> Optional[E]:
    if value in (None, ""):
        return None
    return parse_enum(enum_cls, value, field)
