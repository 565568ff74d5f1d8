from .django_clothing_item_repository import DjangoClothingItemRepository
from .django_laundry_service_repository import DjangoLaundryServiceRepository
from .django_pricing_repository import DjangoPricingRepository

__all__ = [
    'DjangoClothingItemRepository',
    'DjangoLaundryServiceRepository',
    'DjangoPricingRepository',
]
