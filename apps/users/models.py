"""
Expose ORM models for Django's model discovery; definitions live under infrastructure.
"""
from .infrastructure.models import UserModel

__all__ = ['UserModel']
