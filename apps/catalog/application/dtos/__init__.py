# DTOs
from .catalog_dto import (
    ClothingItemCreateDTO,
    ClothingItemDTO,
    ClothingItemUpdateDTO,
    LaundryServiceCreateDTO,
    LaundryServiceDTO,
    PricingDTO,
    PricingUpsertDTO,
    SeedResultDTO,
)

__all__ = [
    'ClothingItemCreateDTO',
    'ClothingItemDTO',
    'ClothingItemUpdateDTO',
    'LaundryServiceCreateDTO',
    'LaundryServiceDTO',
    'PricingDTO',
    'PricingUpsertDTO',
    'SeedResultDTO',
]
