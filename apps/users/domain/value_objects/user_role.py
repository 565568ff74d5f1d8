"""
User role value object.
"""
from enum import Enum


class UserRole(str, Enum):
    """Roles used for access control; values are what the mobile app sends."""
    CUSTOMER = 'customer'
    DELIVERY = 'delivery'
    ADMIN = 'admin'

    @classmethod
    def choices(cls):
        return [(role.value, role.name.title()) for role in cls]

    @classmethod
    def self_assignable(cls):
        """Roles a user may pick for themselves while completing signup."""
        return [cls.CUSTOMER, cls.DELIVERY]
