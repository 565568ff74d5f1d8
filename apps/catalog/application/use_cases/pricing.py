"""
Pricing use cases.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from shared.application import UseCase, UseCaseResult, parse_enum, parse_optional_enum
from ...domain.entities.pricing_entry import PricingEntry
from ...domain.exceptions import ClothingItemNotFoundError
from ...domain.repositories.clothing_item_repository import ClothingItemRepository
from ...domain.repositories.pricing_repository import PricingRepository
from ...domain.value_objects.clothing_category import ClothingCategory
from ...domain.value_objects.service_type import ServiceType
from ..dtos.catalog_dto import PricingDTO, PricingUpsertDTO

logger = logging.getLogger(__name__)


@dataclass
class ListPricingUseCase(UseCase[Tuple[Optional[str], Optional[str]], List[PricingDTO]]):
    """List active prices with their clothing items, optionally filtered."""

    pricing_repository: PricingRepository
    item_repository: ClothingItemRepository

    def execute(self, input_dto=(None, None)) -> UseCaseResult[List[PricingDTO]]:
        raw_category, raw_service = input_dto
        entries = self.pricing_repository.find_active(
            category=parse_optional_enum(ClothingCategory, raw_category, "category"),
            service_type=parse_optional_enum(ServiceType, raw_service, "service_type"),
        )

        items = {}
        for entry in entries:
            if entry.clothing_item_id not in items:
                items[entry.clothing_item_id] = self.item_repository.find_by_id(entry.clothing_item_id)

        return UseCaseResult.ok([
            PricingDTO.from_entity(entry, items.get(entry.clothing_item_id))
            for entry in entries
        ])


@dataclass
class UpsertPricingUseCase(UseCase[PricingUpsertDTO, PricingDTO]):
    """Create or replace the price for an (item, service, category) key."""

    pricing_repository: PricingRepository
    item_repository: ClothingItemRepository

    def execute(self, input_dto: PricingUpsertDTO) -> UseCaseResult[PricingDTO]:
        item = self.item_repository.find_by_id(input_dto.clothing_item_id)
        if item is None:
            raise ClothingItemNotFoundError(str(input_dto.clothing_item_id))

        service_type = parse_enum(ServiceType, input_dto.service_type, "service_type")
        category = parse_enum(ClothingCategory, input_dto.category, "category")

        entry = self.pricing_repository.find_by_key(item.id, service_type, category)
        if entry is None:
            entry = PricingEntry(
                clothing_item_id=item.id,
                service_type=service_type,
                category=category,
                price=input_dto.price,
                is_active=input_dto.is_active,
            )
        entry.reprice(input_dto.price, is_active=input_dto.is_active)

        saved = self.pricing_repository.save(entry)
        for event in entry.clear_domain_events():
            logger.info(
                "%s item=%s %s/%s price=%s",
                event.event_type, item.id, service_type.value, category.value, entry.price,
            )
        return UseCaseResult.ok(PricingDTO.from_entity(saved, item))
