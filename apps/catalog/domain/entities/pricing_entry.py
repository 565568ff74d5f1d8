"""
Pricing entry entity.
"""
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.domain import AggregateRoot
from ..events.pricing_changed import PricingChanged
from ..exceptions import InvalidPriceError
from ..value_objects.clothing_category import ClothingCategory
from ..value_objects.service_type import ServiceType


@dataclass(eq=False)
class PricingEntry(AggregateRoot):
    """Price of one service for one clothing item in one category.

    At most one entry exists per (clothing_item_id, service_type, category).
    """
    clothing_item_id: UUID
    service_type: ServiceType
    category: ClothingCategory
    price: Decimal
    is_active: bool = True

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))
        if self.price < 0:
            raise InvalidPriceError(self.price)

    @property
    def key(self):
        return (self.clothing_item_id, self.service_type, self.category)

    def reprice(self, price: Decimal, is_active: bool = True) -> None:
        """Change the price of an existing entry."""
        price = Decimal(str(price))
        if price < 0:
            raise InvalidPriceError(price)
        self.price = price
        self.is_active = is_active
        self.touch()
        self.add_domain_event(
            PricingChanged(
                clothing_item_id=self.clothing_item_id,
                service_type=self.service_type.value,
                category=self.category.value,
                price=self.price,
            )
        )
