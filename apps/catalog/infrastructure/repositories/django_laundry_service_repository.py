"""
Django ORM implementation of LaundryServiceRepository.
"""
from typing import List, Optional

from django.db import transaction

from ...domain.entities.laundry_service import LaundryService
from ...domain.repositories.laundry_service_repository import LaundryServiceRepository
from ...domain.value_objects.localized_name import LocalizedName
from ...domain.value_objects.service_type import ServiceType
from ..models.catalog_models import LaundryServiceModel


class DjangoLaundryServiceRepository(LaundryServiceRepository):
    """Django ORM based laundry service repository implementation."""

    def save(self, service: LaundryService) -> LaundryService:
        with transaction.atomic():
            model, created = LaundryServiceModel.objects.update_or_create(
                id=service.id,
                defaults={
                    'name_en': service.name.en,
                    'name_bn': service.name.bn,
                    'service_type': service.service_type.value,
                    'description': service.description,
                    'icon': service.icon,
                    'is_active': service.is_active,
                }
            )
            return self._to_entity(model)

    def find_by_type(self, service_type: ServiceType) -> Optional[LaundryService]:
        model = LaundryServiceModel.objects.filter(service_type=service_type.value).first()
        return self._to_entity(model) if model else None

    def find_active(self) -> List[LaundryService]:
        queryset = LaundryServiceModel.objects.filter(is_active=True).order_by('service_type')
        return [self._to_entity(model) for model in queryset]

    def _to_entity(self, model: LaundryServiceModel) -> LaundryService:
        return LaundryService(
            id=model.id,
            name=LocalizedName(en=model.name_en, bn=model.name_bn),
            service_type=ServiceType(model.service_type),
            description=model.description,
            icon=model.icon,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
