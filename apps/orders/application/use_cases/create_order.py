"""
Create order use case.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from django.conf import settings

from apps.catalog.domain.value_objects import ClothingCategory, ServiceType
from shared.application import UseCase, UseCaseResult, parse_enum
from ...domain.entities.order import Order
from ...domain.repositories.order_repository import OrderRepository
from ...domain.services.order_access_policy import OrderAccessPolicy
from ...domain.services.pricing_calculator import PriceResolver, PricingCalculator, PricingLine
from ...domain.value_objects.address import Address
from ..dtos.order_dto import AddressDTO, CreateOrderDTO, OrderDTO

logger = logging.getLogger(__name__)


def configured_delivery_charge() -> Decimal:
    return Decimal(str(getattr(settings, 'DEFAULT_DELIVERY_CHARGE', 60)))


def _address(dto: Optional[AddressDTO]) -> Optional[Address]:
    if dto is None:
        return None
    return Address(
        full_address=dto.full_address,
        landmark=dto.landmark or "",
        contact_phone=dto.contact_phone or "",
    )


@dataclass
class CreateOrderUseCase(UseCase[CreateOrderDTO, OrderDTO]):
    """Price the requested lines and persist a REQUESTED order.

    Nothing is stored when any line cannot be priced.
    """

    order_repository: OrderRepository
    price_resolver: PriceResolver
    access_policy: OrderAccessPolicy = field(default_factory=OrderAccessPolicy)
    delivery_charge: Optional[Decimal] = None

    def execute(self, input_dto: CreateOrderDTO) -> UseCaseResult[OrderDTO]:
        actor = input_dto.actor
        self.access_policy.ensure_can_create(actor)

        lines = [
            PricingLine(
                clothing_item_id=line.clothing_item_id,
                category=parse_enum(ClothingCategory, line.category, "category"),
                services=tuple(parse_enum(ServiceType, value, "services") for value in line.services),
                quantity=line.quantity,
            )
            for line in input_dto.items
        ]

        delivery_charge = self.delivery_charge
        if delivery_charge is None:
            delivery_charge = configured_delivery_charge()

        priced = PricingCalculator(self.price_resolver).calculate(lines, delivery_charge)

        order = Order.place(
            customer_id=actor.user_id,
            items=priced.items,
            pricing=priced.pricing,
            pickup_address=_address(input_dto.pickup_address),
            delivery_address=_address(input_dto.delivery_address),
            notes=input_dto.notes,
            scheduled_pickup_time=input_dto.scheduled_pickup_time,
        )
        saved = self.order_repository.save(order)

        for event in order.clear_domain_events():
            logger.info(
                "%s order=%s customer=%s grand_total=%s",
                event.event_type, saved.id, actor.user_id, saved.pricing.grand_total,
            )
        return UseCaseResult.ok(OrderDTO.from_entity(saved))
