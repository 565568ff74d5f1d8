# Value objects
from .clothing_category import ClothingCategory
from .localized_name import LocalizedName
from .service_type import ServiceType

__all__ = ['ClothingCategory', 'LocalizedName', 'ServiceType']
