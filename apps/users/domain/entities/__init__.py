# Domain entities
from .user import User, PLACEHOLDER_NAME

__all__ = ['User', 'PLACEHOLDER_NAME']
