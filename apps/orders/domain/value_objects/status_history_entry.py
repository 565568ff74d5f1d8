"""
Status history entry value object.
"""
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from shared.domain import ValueObject
from .order_status import OrderStatus


@dataclass(frozen=True)
class StatusHistoryEntry(ValueObject):
    """One immutable row of an order's status audit trail."""
    status: OrderStatus
    timestamp: datetime
    note: str
    updated_by: UUID
