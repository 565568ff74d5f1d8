"""
Order repository interface.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from ..entities.order import Order
from ..value_objects.order_status import OrderStatus


class OrderRepository(ABC):
    """Abstract repository for Order aggregate."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Insert a new order or write back a loaded one.

        Updates are conditional on ``order.version``; a stale version raises
        ConcurrentOrderUpdateError.
        """
        pass

    @abstractmethod
    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID."""
        pass

    @abstractmethod
    def find_by_customer(self, customer_id: UUID) -> List[Order]:
        """Orders placed by a customer, newest first."""
        pass

    @abstractmethod
    def find_active_by_delivery_person(self, delivery_person_id: UUID) -> List[Order]:
        """Non-terminal orders assigned to a courier, newest first."""
        pass

    @abstractmethod
    def find_finished_by_delivery_person(self, delivery_person_id: UUID) -> List[Order]:
        """Delivered or cancelled orders of a courier, newest first."""
        pass

    @abstractmethod
    def find_unassigned(self) -> List[Order]:
        """REQUESTED orders without a courier, oldest first."""
        pass

    @abstractmethod
    def find_all(
        self,
        status: Optional[OrderStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Order]:
        """All orders, newest first."""
        pass

    @abstractmethod
    def count(self, status: Optional[OrderStatus] = None) -> int:
        pass

    # Aggregation queries

    @abstractmethod
    def count_by_status(self, delivery_person_id: Optional[UUID] = None) -> Dict[OrderStatus, int]:
        """Order counts per status, optionally scoped to one courier."""
        pass

    @abstractmethod
    def created_since(self, since: datetime) -> Tuple[int, Decimal]:
        """(order count, summed grand total) for orders created at or after ``since``."""
        pass

    @abstractmethod
    def count_delivered_since(self, delivery_person_id: UUID, since: datetime) -> int:
        """DELIVERED orders of a courier last modified at or after ``since``."""
        pass

    @abstractmethod
    def delivered_revenue(self, delivery_person_id: UUID) -> Decimal:
        pass

    @abstractmethod
    def delivered_timings(self, delivery_person_id: UUID) -> List[Tuple[datetime, datetime]]:
        """(created_at, updated_at) of every DELIVERED order of a courier."""
        pass
