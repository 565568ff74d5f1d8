"""
Django ORM implementation of PricingRepository.
"""
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from ...domain.entities.pricing_entry import PricingEntry
from ...domain.repositories.pricing_repository import PricingRepository
from ...domain.value_objects.clothing_category import ClothingCategory
from ...domain.value_objects.service_type import ServiceType
from ..models.catalog_models import PricingModel


class DjangoPricingRepository(PricingRepository):
    """Django ORM based pricing repository implementation."""

    def save(self, entry: PricingEntry) -> PricingEntry:
        """Upsert on the natural key so the uniqueness constraint is never hit."""
        with transaction.atomic():
            model, created = PricingModel.objects.update_or_create(
                clothing_item_id=entry.clothing_item_id,
                service_type=entry.service_type.value,
                category=entry.category.value,
                defaults={
                    'price': entry.price,
                    'is_active': entry.is_active,
                },
                create_defaults={
                    'id': entry.id,
                    'price': entry.price,
                    'is_active': entry.is_active,
                },
            )
            return self._to_entity(model)

    def find_by_key(
        self,
        clothing_item_id: UUID,
        service_type: ServiceType,
        category: ClothingCategory,
    ) -> Optional[PricingEntry]:
        model = PricingModel.objects.filter(
            clothing_item_id=clothing_item_id,
            service_type=service_type.value,
            category=category.value,
        ).first()
        return self._to_entity(model) if model else None

    def find_active_price(
        self,
        clothing_item_id: UUID,
        service_type: ServiceType,
        category: ClothingCategory,
    ) -> Optional[Decimal]:
        return PricingModel.objects.filter(
            clothing_item_id=clothing_item_id,
            service_type=service_type.value,
            category=category.value,
            is_active=True,
        ).values_list('price', flat=True).first()

    def find_active(
        self,
        category: Optional[ClothingCategory] = None,
        service_type: Optional[ServiceType] = None,
    ) -> List[PricingEntry]:
        queryset = PricingModel.objects.filter(is_active=True)
        if category is not None:
            queryset = queryset.filter(category=category.value)
        if service_type is not None:
            queryset = queryset.filter(service_type=service_type.value)
        queryset = queryset.order_by('category', 'clothing_item__name_en', 'service_type')
        return [self._to_entity(model) for model in queryset]

    def _to_entity(self, model: PricingModel) -> PricingEntry:
        return PricingEntry(
            id=model.id,
            clothing_item_id=model.clothing_item_id,
            service_type=ServiceType(model.service_type),
            category=ClothingCategory(model.category),
            price=model.price,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
