"""
Expose ORM models for Django's model discovery; definitions live under infrastructure.
"""
from .infrastructure.models import ClothingItemModel, LaundryServiceModel, PricingModel

__all__ = ['ClothingItemModel', 'LaundryServiceModel', 'PricingModel']
