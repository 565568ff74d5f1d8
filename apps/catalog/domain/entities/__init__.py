# Domain entities
from .clothing_item import ClothingItem
from .laundry_service import LaundryService
from .pricing_entry import PricingEntry

__all__ = ['ClothingItem', 'LaundryService', 'PricingEntry']
