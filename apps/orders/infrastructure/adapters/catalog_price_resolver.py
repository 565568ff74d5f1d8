"""
Catalog-backed price resolver.
"""
from decimal import Decimal
from typing import Optional
from uuid import UUID

from apps.catalog.domain.exceptions import ClothingItemNotFoundError
from apps.catalog.domain.repositories import ClothingItemRepository, PricingRepository
from apps.catalog.domain.value_objects import ClothingCategory, ServiceType
from apps.catalog.infrastructure.repositories import (
    DjangoClothingItemRepository,
    DjangoPricingRepository,
)
from ...domain.services.pricing_calculator import PriceResolver


class CatalogPriceResolver(PriceResolver):
    """Resolves active prices and item names from the catalog tables."""

    def __init__(
        self,
        item_repository: Optional[ClothingItemRepository] = None,
        pricing_repository: Optional[PricingRepository] = None,
    ):
        self.item_repository = item_repository or DjangoClothingItemRepository()
        self.pricing_repository = pricing_repository or DjangoPricingRepository()

    def resolve_price(
        self,
        clothing_item_id: UUID,
        service_type: ServiceType,
        category: ClothingCategory,
    ) -> Optional[Decimal]:
        return self.pricing_repository.find_active_price(clothing_item_id, service_type, category)

    def get_item_display_name(self, clothing_item_id: UUID) -> str:
        item = self.item_repository.find_by_id(clothing_item_id)
        if item is None:
            raise ClothingItemNotFoundError(str(clothing_item_id))
        return item.display_name
