"""
Order item (order line snapshot).
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple
from uuid import UUID

from apps.catalog.domain.value_objects import ClothingCategory, ServiceType
from shared.domain import ValueObject
from ..exceptions import InvalidOrderError


@dataclass(frozen=True)
class OrderItem(ValueObject):
    """A priced order line.

    Name and prices are copied from the catalog when the order is placed and
    never refreshed afterwards.
    """
    clothing_item_id: UUID
    clothing_item_name: str
    category: ClothingCategory
    services: Tuple[ServiceType, ...]
    quantity: int
    unit_price: Decimal
    subtotal: Decimal

    def __post_init__(self):
        object.__setattr__(self, 'services', tuple(self.services))
        for name in ('unit_price', 'subtotal'):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))

        if not self.services:
            raise InvalidOrderError("Each item needs at least one service", field="services")
        if self.quantity < 1:
            raise InvalidOrderError("Quantity must be at least 1", field="quantity")
        if self.unit_price < 0:
            raise InvalidOrderError("Unit price must be non-negative", field="unit_price")
        if self.subtotal != self.unit_price * self.quantity:
            raise InvalidOrderError(
                f"Subtotal {self.subtotal} does not equal {self.unit_price} x {self.quantity}",
                field="subtotal",
            )

    @classmethod
    def priced(
        cls,
        clothing_item_id: UUID,
        clothing_item_name: str,
        category: ClothingCategory,
        services,
        quantity: int,
        unit_price: Decimal,
    ) -> 'OrderItem':
        return cls(
            clothing_item_id=clothing_item_id,
            clothing_item_name=clothing_item_name,
            category=category,
            services=tuple(services),
            quantity=quantity,
            unit_price=unit_price,
            subtotal=unit_price * quantity,
        )
