# Value objects
from .address import Address
from .order_pricing import MAX_ORDER_AMOUNT, OrderPricing
from .order_status import (
    IN_PROGRESS_STATUSES,
    ORDER_STATUS_TRANSITIONS,
    TERMINAL_STATUSES,
    OrderStatus,
    allowed_transitions,
    can_transition,
)
from .status_history_entry import StatusHistoryEntry

__all__ = [
    'Address',
    'MAX_ORDER_AMOUNT',
    'OrderPricing',
    'OrderStatus',
    'ORDER_STATUS_TRANSITIONS',
    'TERMINAL_STATUSES',
    'IN_PROGRESS_STATUSES',
    'allowed_transitions',
    'can_transition',
    'StatusHistoryEntry',
]
