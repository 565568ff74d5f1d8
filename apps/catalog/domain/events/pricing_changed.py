"""
Pricing changed domain event.
"""
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class PricingChanged(DomainEvent):
    """Event raised when a price is created or updated."""
    clothing_item_id: UUID
    service_type: str
    category: str
    price: Decimal
