# Serializers
from .catalog_serializer import (
    ClothingItemCreateSerializer,
    ClothingItemSerializer,
    ClothingItemUpdateSerializer,
    LaundryServiceCreateSerializer,
    LaundryServiceSerializer,
    PricingSerializer,
    PricingUpsertSerializer,
    SeedResultSerializer,
)

__all__ = [
    'ClothingItemCreateSerializer',
    'ClothingItemSerializer',
    'ClothingItemUpdateSerializer',
    'LaundryServiceCreateSerializer',
    'LaundryServiceSerializer',
    'PricingSerializer',
    'PricingUpsertSerializer',
    'SeedResultSerializer',
]
