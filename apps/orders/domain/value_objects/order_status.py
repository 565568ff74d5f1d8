"""
Order status value object and the lifecycle transition table.
"""
from enum import Enum
from typing import Dict, FrozenSet


class OrderStatus(str, Enum):
    """Order status enumeration."""
    REQUESTED = 'requested'
    PICKED_UP = 'picked_up'
    IN_LAUNDRY = 'in_laundry'
    OUT_FOR_DELIVERY = 'out_for_delivery'
    DELIVERED = 'delivered'
    CANCELLED = 'cancelled'

    @classmethod
    def choices(cls):
        return [(status.value, status.name.replace('_', ' ').title()) for status in cls]

    @property
    def is_terminal(self) -> bool:
        return not ORDER_STATUS_TRANSITIONS[self]


# Cancellation stops being possible once laundering has started.
ORDER_STATUS_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.REQUESTED: frozenset({OrderStatus.PICKED_UP, OrderStatus.CANCELLED}),
    OrderStatus.PICKED_UP: frozenset({OrderStatus.IN_LAUNDRY, OrderStatus.CANCELLED}),
    OrderStatus.IN_LAUNDRY: frozenset({OrderStatus.OUT_FOR_DELIVERY}),
    OrderStatus.OUT_FOR_DELIVERY: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

TERMINAL_STATUSES: FrozenSet[OrderStatus] = frozenset(
    status for status, targets in ORDER_STATUS_TRANSITIONS.items() if not targets
)

IN_PROGRESS_STATUSES: FrozenSet[OrderStatus] = frozenset({
    OrderStatus.PICKED_UP,
    OrderStatus.IN_LAUNDRY,
    OrderStatus.OUT_FOR_DELIVERY,
})


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """Whether ``target`` may directly follow ``current``."""
    return target in ORDER_STATUS_TRANSITIONS.get(current, frozenset())


def allowed_transitions(current: OrderStatus) -> FrozenSet[OrderStatus]:
    return ORDER_STATUS_TRANSITIONS.get(current, frozenset())
