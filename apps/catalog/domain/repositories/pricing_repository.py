"""
Pricing repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.pricing_entry import PricingEntry
from ..value_objects.clothing_category import ClothingCategory
from ..value_objects.service_type import ServiceType


class PricingRepository(ABC):
    """Abstract repository for PricingEntry."""

    @abstractmethod
    def save(self, entry: PricingEntry) -> PricingEntry:
        """Insert or update the entry for its (item, service, category) key."""
        pass

    @abstractmethod
    def find_by_key(
        self,
        clothing_item_id: UUID,
        service_type: ServiceType,
        category: ClothingCategory,
    ) -> Optional[PricingEntry]:
        pass

    @abstractmethod
    def find_active_price(
        self,
        clothing_item_id: UUID,
        service_type: ServiceType,
        category: ClothingCategory,
    ):
        """Return the active price as a Decimal, or None when not priced."""
        pass

    @abstractmethod
    def find_active(
        self,
        category: Optional[ClothingCategory] = None,
        service_type: Optional[ServiceType] = None,
    ) -> List[PricingEntry]:
        pass
