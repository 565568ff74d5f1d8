"""
Catalog DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from ...domain.entities.clothing_item import ClothingItem
from ...domain.entities.laundry_service import LaundryService
from ...domain.entities.pricing_entry import PricingEntry


@dataclass
class ClothingItemCreateDTO:
    """DTO for creating a clothing item."""
    name: Dict[str, str]
    category: str
    icon: str = ""
    available_services: Optional[List[str]] = None
    is_active: bool = True


@dataclass
class ClothingItemUpdateDTO:
    """DTO for a partial clothing item update."""
    name: Optional[Dict[str, str]] = None
    category: Optional[str] = None
    icon: Optional[str] = None
    available_services: Optional[List[str]] = None
    is_active: Optional[bool] = None


@dataclass
class ClothingItemDTO:
    """DTO for clothing item output."""
    id: UUID
    name: Dict[str, str]
    category: str
    icon: str
    available_services: List[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, item: ClothingItem) -> 'ClothingItemDTO':
        return cls(
            id=item.id,
            name=item.name.to_dict(),
            category=item.category.value,
            icon=item.icon,
            available_services=[service.value for service in item.available_services],
            is_active=item.is_active,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


@dataclass
class LaundryServiceCreateDTO:
    """DTO for creating a laundry service."""
    name: Dict[str, str]
    type: str
    description: str = ""
    icon: str = ""
    is_active: bool = True


@dataclass
class LaundryServiceDTO:
    """DTO for laundry service output."""
    id: UUID
    name: Dict[str, str]
    type: str
    description: str
    icon: str
    is_active: bool

    @classmethod
    def from_entity(cls, service: LaundryService) -> 'LaundryServiceDTO':
        return cls(
            id=service.id,
            name=service.name.to_dict(),
            type=service.service_type.value,
            description=service.description,
            icon=service.icon,
            is_active=service.is_active,
        )


@dataclass
class PricingUpsertDTO:
    """DTO for creating or updating a price."""
    clothing_item_id: UUID
    service_type: str
    category: str
    price: Decimal
    is_active: bool = True


@dataclass
class PricingDTO:
    """DTO for pricing output."""
    id: UUID
    clothing_item_id: UUID
    service_type: str
    category: str
    price: Decimal
    is_active: bool
    clothing_item: Optional[ClothingItemDTO] = None

    @classmethod
    def from_entity(
        cls,
        entry: PricingEntry,
        clothing_item: Optional[ClothingItem] = None,
    ) -> 'PricingDTO':
        return cls(
            id=entry.id,
            clothing_item_id=entry.clothing_item_id,
            service_type=entry.service_type.value,
            category=entry.category.value,
            price=entry.price,
            is_active=entry.is_active,
            clothing_item=ClothingItemDTO.from_entity(clothing_item) if clothing_item else None,
        )


@dataclass
class SeedResultDTO:
    """Counts of what a seed run inserted; all zero when already seeded."""
    seeded: bool
    services: int = 0
    clothing_items: int = 0
    pricing_entries: int = 0
    skipped_reason: str = field(default="")
