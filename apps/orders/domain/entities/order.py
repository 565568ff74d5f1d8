"""
Order entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from shared.domain import AggregateRoot, utc_now
from ..value_objects.address import Address
from ..value_objects.order_pricing import OrderPricing
from ..value_objects.order_status import OrderStatus, can_transition
from ..value_objects.status_history_entry import StatusHistoryEntry
from ..events.delivery_person_assigned import DeliveryPersonAssigned
from ..events.order_placed import OrderPlaced
from ..events.order_status_changed import OrderStatusChanged
from ..exceptions import InvalidOrderError, InvalidStatusTransitionError
from .order_item import OrderItem

ORDER_PLACED_NOTE = "Order placed"


@dataclass(eq=False)
class Order(AggregateRoot):
    """Laundry order.

    ``status_history`` is append-only and its last entry always mirrors
    ``status``. ``version`` is the persistence concurrency token; 0 means
    the order has not been stored yet.
    """
    customer_id: UUID
    items: List[OrderItem]
    pricing: OrderPricing
    pickup_address: Address
    delivery_address: Address
    status: OrderStatus = OrderStatus.REQUESTED
    status_history: List[StatusHistoryEntry] = field(default_factory=list)
    delivery_person_id: Optional[UUID] = None
    notes: str = ""
    scheduled_pickup_time: Optional[datetime] = None
    estimated_delivery_time: Optional[datetime] = None
    version: int = 0

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        if not self.items:
            raise InvalidOrderError("An order needs at least one item", field="items")
        items_total = sum((item.subtotal for item in self.items), Decimal("0"))
        if items_total != self.pricing.items_total:
            raise InvalidOrderError(
                f"Items total {self.pricing.items_total} does not match line subtotals {items_total}",
                field="pricing",
            )
        if not self.status_history:
            raise InvalidOrderError("Status history cannot be empty", field="status_history")
        if self.status_history[-1].status != self.status:
            raise InvalidOrderError(
                "Last status history entry does not match the order status",
                field="status_history",
            )

    @classmethod
    def place(
        cls,
        customer_id: UUID,
        items: List[OrderItem],
        pricing: OrderPricing,
        pickup_address: Address,
        delivery_address: Optional[Address] = None,
        notes: str = "",
        scheduled_pickup_time: Optional[datetime] = None,
    ) -> 'Order':
        """Factory method to create a new order in REQUESTED state."""
        now = utc_now()
        order = cls(
            customer_id=customer_id,
            items=list(items),
            pricing=pricing,
            pickup_address=pickup_address,
            delivery_address=delivery_address or pickup_address,
            status=OrderStatus.REQUESTED,
            status_history=[
                StatusHistoryEntry(
                    status=OrderStatus.REQUESTED,
                    timestamp=now,
                    note=ORDER_PLACED_NOTE,
                    updated_by=customer_id,
                )
            ],
            notes=notes or "",
            scheduled_pickup_time=scheduled_pickup_time,
            created_at=now,
            updated_at=now,
        )
        order.add_domain_event(
            OrderPlaced(
                order_id=order.id,
                customer_id=customer_id,
                item_count=len(order.items),
                grand_total=pricing.grand_total,
            )
        )
        return order

    def change_status(self, new_status: OrderStatus, changed_by: UUID, note: str = "") -> None:
        """Move to ``new_status`` if the transition table allows it and record the change."""
        if not can_transition(self.status, new_status):
            raise InvalidStatusTransitionError(self.status.value, new_status.value)

        old_status = self.status
        self.status = new_status
        self.touch()
        self.status_history.append(
            StatusHistoryEntry(
                status=new_status,
                timestamp=self.updated_at,
                note=note or "",
                updated_by=changed_by,
            )
        )
        self.add_domain_event(
            OrderStatusChanged(
                order_id=self.id,
                old_status=old_status.value,
                new_status=new_status.value,
                changed_by=changed_by,
            )
        )

    def assign_delivery_person(
        self,
        delivery_person_id: UUID,
        assigned_by: UUID,
        estimated_delivery_time: Optional[datetime] = None,
    ) -> None:
        """Put a courier on the order; status and history are left untouched.

        An estimated delivery time, when given, replaces the previous estimate.
        """
        # TODO: decide whether reassigning an order that is already out for delivery should be rejected.
        previous = self.delivery_person_id
        self.delivery_person_id = delivery_person_id
        if estimated_delivery_time is not None:
            self.estimated_delivery_time = estimated_delivery_time
        self.touch()
        self.add_domain_event(
            DeliveryPersonAssigned(
                order_id=self.id,
                delivery_person_id=delivery_person_id,
                previous_delivery_person_id=previous,
                assigned_by=assigned_by,
            )
        )

    def is_customer(self, user_id: UUID) -> bool:
        return self.customer_id == user_id

    def is_assigned_to(self, user_id: UUID) -> bool:
        return self.delivery_person_id is not None and self.delivery_person_id == user_id

    @property
    def is_new(self) -> bool:
        return self.version == 0

    @property
    def item_count(self) -> int:
        """Get the total number of garments."""
        return sum(item.quantity for item in self.items)
