"""
Django ORM implementation of ClothingItemRepository.
"""
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from ...domain.entities.clothing_item import ClothingItem
from ...domain.repositories.clothing_item_repository import ClothingItemRepository
from ...domain.value_objects.clothing_category import ClothingCategory
from ...domain.value_objects.localized_name import LocalizedName
from ...domain.value_objects.service_type import ServiceType
from ..models.catalog_models import ClothingItemModel


class DjangoClothingItemRepository(ClothingItemRepository):
    """Django ORM based clothing item repository implementation."""

    def save(self, item: ClothingItem) -> ClothingItem:
        """Save a clothing item entity."""
        with transaction.atomic():
            model, created = ClothingItemModel.objects.update_or_create(
                id=item.id,
                defaults={
                    'name_en': item.name.en,
                    'name_bn': item.name.bn,
                    'category': item.category.value,
                    'icon': item.icon,
                    'available_services': [service.value for service in item.available_services],
                    'is_active': item.is_active,
                }
            )
            return self._to_entity(model)

    def find_by_id(self, item_id: UUID) -> Optional[ClothingItem]:
        """Find a clothing item by ID."""
        try:
            model = ClothingItemModel.objects.get(id=item_id)
            return self._to_entity(model)
        except ClothingItemModel.DoesNotExist:
            return None

    def find_active(self, category: Optional[ClothingCategory] = None) -> List[ClothingItem]:
        queryset = ClothingItemModel.objects.filter(is_active=True)
        if category is not None:
            queryset = queryset.filter(category=category.value)
        return [self._to_entity(model) for model in queryset.order_by('category', 'name_en')]

    def count(self) -> int:
        return ClothingItemModel.objects.count()

    def _to_entity(self, model: ClothingItemModel) -> ClothingItem:
        """Convert Django model to domain entity."""
        return ClothingItem(
            id=model.id,
            name=LocalizedName(en=model.name_en, bn=model.name_bn),
            category=ClothingCategory(model.category),
            icon=model.icon,
            available_services=[ServiceType(value) for value in model.available_services],
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
