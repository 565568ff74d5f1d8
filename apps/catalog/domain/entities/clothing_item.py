"""
Clothing item entity.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from shared.domain import AggregateRoot, ValidationError
from ..value_objects.clothing_category import ClothingCategory
from ..value_objects.localized_name import LocalizedName
from ..value_objects.service_type import ServiceType


def _all_services() -> List[ServiceType]:
    return list(ServiceType)


@dataclass(eq=False)
class ClothingItem(AggregateRoot):
    """A garment type customers can put in an order."""
    name: LocalizedName
    category: ClothingCategory
    icon: str = ""
    available_services: List[ServiceType] = field(default_factory=_all_services)
    is_active: bool = True

    def __post_init__(self):
        if not self.available_services:
            raise ValidationError(
                "A clothing item must offer at least one service",
                field="available_services",
            )

    @classmethod
    def create(
        cls,
        name_en: str,
        name_bn: str,
        category: ClothingCategory,
        icon: str = "",
        available_services: Optional[List[ServiceType]] = None,
        is_active: bool = True,
    ) -> 'ClothingItem':
        """Factory method to create a new clothing item."""
        return cls(
            name=LocalizedName(en=name_en, bn=name_bn),
            category=category,
            icon=icon,
            available_services=list(available_services) if available_services else _all_services(),
            is_active=is_active,
        )

    def update(
        self,
        name: Optional[LocalizedName] = None,
        category: Optional[ClothingCategory] = None,
        icon: Optional[str] = None,
        available_services: Optional[List[ServiceType]] = None,
        is_active: Optional[bool] = None,
    ) -> None:
        """Partially update the item."""
        if name is not None:
            self.name = name
        if category is not None:
            self.category = category
        if icon is not None:
            self.icon = icon
        if available_services is not None:
            if not available_services:
                raise ValidationError(
                    "A clothing item must offer at least one service",
                    field="available_services",
                )
            self.available_services = list(available_services)
        if is_active is not None:
            self.is_active = is_active
        self.touch()

    @property
    def display_name(self) -> str:
        return self.name.en
