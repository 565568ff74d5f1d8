from .clothing_item_repository import ClothingItemRepository
from .laundry_service_repository import LaundryServiceRepository
from .pricing_repository import PricingRepository

__all__ = ['ClothingItemRepository', 'LaundryServiceRepository', 'PricingRepository']
