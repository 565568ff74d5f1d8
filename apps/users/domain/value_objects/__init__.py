# Value objects
from .phone_number import PhoneNumber
from .user_role import UserRole

__all__ = ['PhoneNumber', 'UserRole']
