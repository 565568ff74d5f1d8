"""
Clothing item use cases.
"""
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from shared.application import UseCase, UseCaseResult, parse_enum, parse_optional_enum
from ...domain.entities.clothing_item import ClothingItem
from ...domain.exceptions import ClothingItemNotFoundError
from ...domain.repositories.clothing_item_repository import ClothingItemRepository
from ...domain.value_objects.clothing_category import ClothingCategory
from ...domain.value_objects.localized_name import LocalizedName
from ...domain.value_objects.service_type import ServiceType
from ..dtos.catalog_dto import ClothingItemCreateDTO, ClothingItemDTO, ClothingItemUpdateDTO


def _parse_services(values) -> Optional[List[ServiceType]]:
    if values is None:
        return None
    return [parse_enum(ServiceType, value, "available_services") for value in values]


@dataclass
class ListClothingItemsUseCase(UseCase[Optional[str], List[ClothingItemDTO]]):
    """List active clothing items, optionally for one category."""

    item_repository: ClothingItemRepository

    def execute(self, input_dto: Optional[str] = None) -> UseCaseResult[List[ClothingItemDTO]]:
        category = parse_optional_enum(ClothingCategory, input_dto, "category")
        items = self.item_repository.find_active(category=category)
        return UseCaseResult.ok([ClothingItemDTO.from_entity(item) for item in items])


@dataclass
class GetClothingItemUseCase(UseCase[UUID, ClothingItemDTO]):
    """Fetch one clothing item."""

    item_repository: ClothingItemRepository

    def execute(self, input_dto: UUID) -> UseCaseResult[ClothingItemDTO]:
        item = self.item_repository.find_by_id(input_dto)
        if item is None:
            raise ClothingItemNotFoundError(str(input_dto))
        return UseCaseResult.ok(ClothingItemDTO.from_entity(item))


@dataclass
class CreateClothingItemUseCase(UseCase[ClothingItemCreateDTO, ClothingItemDTO]):
    """Add a clothing item to the catalog."""

    item_repository: ClothingItemRepository

    def execute(self, input_dto: ClothingItemCreateDTO) -> UseCaseResult[ClothingItemDTO]:
        item = ClothingItem.create(
            name_en=input_dto.name.get('en', ''),
            name_bn=input_dto.name.get('bn', ''),
            category=parse_enum(ClothingCategory, input_dto.category, "category"),
            icon=input_dto.icon,
            available_services=_parse_services(input_dto.available_services),
            is_active=input_dto.is_active,
        )
        saved = self.item_repository.save(item)
        return UseCaseResult.ok(ClothingItemDTO.from_entity(saved))


@dataclass
class UpdateClothingItemUseCase(UseCase[ClothingItemUpdateDTO, ClothingItemDTO]):
    """Partially update a clothing item."""

    item_repository: ClothingItemRepository
    item_id: UUID

    def execute(self, input_dto: ClothingItemUpdateDTO) -> UseCaseResult[ClothingItemDTO]:
        item = self.item_repository.find_by_id(self.item_id)
        if item is None:
            raise ClothingItemNotFoundError(str(self.item_id))

        name = None
        if input_dto.name is not None:
            name = LocalizedName(
                en=input_dto.name.get('en', item.name.en),
                bn=input_dto.name.get('bn', item.name.bn),
            )

        item.update(
            name=name,
            category=parse_optional_enum(ClothingCategory, input_dto.category, "category"),
            icon=input_dto.icon,
            available_services=_parse_services(input_dto.available_services),
            is_active=input_dto.is_active,
        )
        saved = self.item_repository.save(item)
        return UseCaseResult.ok(ClothingItemDTO.from_entity(saved))
