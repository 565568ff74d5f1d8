"""
Clothing item repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.clothing_item import ClothingItem
from ..value_objects.clothing_category import ClothingCategory


class ClothingItemRepository(ABC):
    """Abstract repository for ClothingItem."""

    @abstractmethod
    def save(self, item: ClothingItem) -> ClothingItem:
        pass

    @abstractmethod
    def find_by_id(self, item_id: UUID) -> Optional[ClothingItem]:
        pass

    @abstractmethod
    def find_active(self, category: Optional[ClothingCategory] = None) -> List[ClothingItem]:
        """Active items sorted by category, then English name."""
        pass

    @abstractmethod
    def count(self) -> int:
        pass
