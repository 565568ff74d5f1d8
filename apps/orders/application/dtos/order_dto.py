"""
Order DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from ...domain.entities.order import Order
from ...domain.services.order_access_policy import Actor


@dataclass
class OrderLineDTO:
    """Requested order line."""
    clothing_item_id: UUID
    category: str
    services: List[str]
    quantity: int = 1


@dataclass
class AddressDTO:
    full_address: str
    landmark: str = ""
    contact_phone: str = ""


@dataclass
class CreateOrderDTO:
    """DTO for creating an order."""
    actor: Actor
    items: List[OrderLineDTO]
    pickup_address: AddressDTO
    delivery_address: Optional[AddressDTO] = None
    notes: str = ""
    scheduled_pickup_time: Optional[datetime] = None


@dataclass
class UpdateOrderStatusDTO:
    """DTO for a status change."""
    actor: Actor
    order_id: UUID
    status: str
    note: str = ""


@dataclass
class AssignDeliveryPersonDTO:
    """DTO for a courier assignment."""
    actor: Actor
    order_id: UUID
    delivery_person_id: UUID
    estimated_delivery_time: Optional[datetime] = None


@dataclass
class ListOrdersQuery:
    """Admin order listing filters."""
    actor: Actor
    status: Optional[str] = None
    page: int = 1
    limit: int = 20


@dataclass
class OrderDTO:
    """DTO for order output."""
    id: UUID
    customer_id: UUID
    delivery_person_id: Optional[UUID]
    items: List[Dict[str, Any]]
    pricing: Dict[str, Decimal]
    status: str
    status_history: List[Dict[str, Any]]
    pickup_address: Dict[str, str]
    delivery_address: Dict[str, str]
    notes: str
    scheduled_pickup_time: Optional[datetime]
    estimated_delivery_time: Optional[datetime]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        """Create DTO from entity."""
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            delivery_person_id=order.delivery_person_id,
            items=[
                {
                    'clothing_item_id': item.clothing_item_id,
                    'clothing_item_name': item.clothing_item_name,
                    'category': item.category.value,
                    'services': [service.value for service in item.services],
                    'quantity': item.quantity,
                    'unit_price': item.unit_price,
                    'subtotal': item.subtotal,
                }
                for item in order.items
            ],
            pricing=order.pricing.to_dict(),
            status=order.status.value,
            status_history=[
                {
                    'status': entry.status.value,
                    'timestamp': entry.timestamp,
                    'note': entry.note,
                    'updated_by': entry.updated_by,
                }
                for entry in order.status_history
            ],
            pickup_address=order.pickup_address.to_dict(),
            delivery_address=order.delivery_address.to_dict(),
            notes=order.notes,
            scheduled_pickup_time=order.scheduled_pickup_time,
            estimated_delivery_time=order.estimated_delivery_time,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


@dataclass
class OrderPageDTO:
    """One page of the admin order listing."""
    orders: List[OrderDTO] = field(default_factory=list)
    total: int = 0
    page: int = 1
    total_pages: int = 0
