# Use cases
from .clothing_items import (
    CreateClothingItemUseCase,
    GetClothingItemUseCase,
    ListClothingItemsUseCase,
    UpdateClothingItemUseCase,
)
from .laundry_services import CreateLaundryServiceUseCase, ListLaundryServicesUseCase
from .pricing import ListPricingUseCase, UpsertPricingUseCase
from .seed_catalog import SeedCatalogUseCase

__all__ = [
    'CreateClothingItemUseCase',
    'GetClothingItemUseCase',
    'ListClothingItemsUseCase',
    'UpdateClothingItemUseCase',
    'CreateLaundryServiceUseCase',
    'ListLaundryServicesUseCase',
    'ListPricingUseCase',
    'UpsertPricingUseCase',
    'SeedCatalogUseCase',
]
