"""
Delivery person assigned domain event.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class DeliveryPersonAssigned(DomainEvent):
    """Event raised when a courier is put on an order."""
    order_id: UUID
    delivery_person_id: UUID
    previous_delivery_person_id: Optional[UUID]
    assigned_by: UUID
