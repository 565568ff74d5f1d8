# Domain events
from .user_signed_up import UserSignedUp
from .user_verified import UserVerified

__all__ = ['UserSignedUp', 'UserVerified']
