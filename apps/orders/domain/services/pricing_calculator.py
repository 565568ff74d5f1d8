"""
Pricing calculator: turns requested order lines into priced order items.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from apps.catalog.domain.value_objects import ClothingCategory, ServiceType
from ..entities.order_item import OrderItem
from ..exceptions import InvalidOrderError, PricingUnavailableError
from ..value_objects.order_pricing import MAX_ORDER_AMOUNT, OrderPricing

MAX_LINE_QUANTITY = 1000


class PriceResolver(ABC):
    """Read-only view of catalog prices used while pricing an order."""

    @abstractmethod
    def resolve_price(
        self,
        clothing_item_id: UUID,
        service_type: ServiceType,
        category: ClothingCategory,
    ) -> Optional[Decimal]:
        """Active unit price for the combination, or None when it is not priced."""
        pass

    @abstractmethod
    def get_item_display_name(self, clothing_item_id: UUID) -> str:
        """Display name of the item; raises a not-found error for unknown ids."""
        pass


@dataclass(frozen=True)
class PricingLine:
    """One requested order line before pricing."""
    clothing_item_id: UUID
    category: ClothingCategory
    services: Tuple[ServiceType, ...]
    quantity: int


@dataclass(frozen=True)
class PricedOrder:
    items: List[OrderItem]
    pricing: OrderPricing


class PricingCalculator:
    """Prices order lines against the catalog.

    A line's unit price is the sum of its service prices; the delivery
    charge is added once per order. Any unpriced service aborts the whole
    calculation.
    """

    def __init__(self, price_resolver: PriceResolver):
        self.price_resolver = price_resolver

    def calculate(self, lines: Sequence[PricingLine], delivery_charge: Decimal) -> PricedOrder:
        if not lines:
            raise InvalidOrderError("An order needs at least one item", field="items")
        delivery_charge = Decimal(str(delivery_charge))
        if delivery_charge < 0:
            raise InvalidOrderError("Delivery charge must be non-negative", field="delivery_charge")

        items = [self._price_line(line) for line in lines]
        items_total = sum((item.subtotal for item in items), Decimal("0"))
        if items_total + delivery_charge > MAX_ORDER_AMOUNT:
            raise InvalidOrderError(
                f"Order total exceeds the maximum of {MAX_ORDER_AMOUNT}", field="items"
            )

        return PricedOrder(
            items=items,
            pricing=OrderPricing.compose(items_total=items_total, delivery_charge=delivery_charge),
        )

    def _price_line(self, line: PricingLine) -> OrderItem:
        if not line.services:
            raise InvalidOrderError("Each item needs at least one service", field="services")
        if line.quantity < 1:
            raise InvalidOrderError("Quantity must be at least 1", field="quantity")
        if line.quantity > MAX_LINE_QUANTITY:
            raise InvalidOrderError(
                f"Quantity must be at most {MAX_LINE_QUANTITY}", field="quantity"
            )

        name = self.price_resolver.get_item_display_name(line.clothing_item_id)

        # Duplicate service entries would otherwise be charged twice.
        services = tuple(dict.fromkeys(line.services))
        unit_price = Decimal("0")
        for service_type in services:
            price = self.price_resolver.resolve_price(line.clothing_item_id, service_type, line.category)
            if price is None:
                raise PricingUnavailableError(name, service_type.value, line.category.value)
            unit_price += Decimal(str(price))

        return OrderItem.priced(
            clothing_item_id=line.clothing_item_id,
            clothing_item_name=name,
            category=line.category,
            services=services,
            quantity=line.quantity,
            unit_price=unit_price,
        )
