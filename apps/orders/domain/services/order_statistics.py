"""
Order statistics roll-ups.
"""
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterable, Mapping, Tuple

from dateutil.relativedelta import relativedelta

from ..value_objects.order_status import IN_PROGRESS_STATUSES, OrderStatus


@dataclass(frozen=True)
class StatsWindows:
    """Lower bounds of the reporting windows."""
    start_of_today: datetime
    week_ago: datetime
    month_ago: datetime

    @classmethod
    def ending_at(cls, now: datetime) -> 'StatsWindows':
        """Windows for a local ``now``: calendar today, rolling 7 days, rolling 1 month."""
        return cls(
            start_of_today=now.replace(hour=0, minute=0, second=0, microsecond=0),
            week_ago=now - timedelta(days=7),
            month_ago=now - relativedelta(months=1),
        )


@dataclass(frozen=True)
class OrderStats:
    """Fleet-wide dashboard numbers."""
    total_orders: int
    pending_orders: int
    in_progress_orders: int
    completed_orders: int
    cancelled_orders: int
    today_orders: int
    today_revenue: Decimal

    @classmethod
    def from_counts(
        cls,
        status_counts: Mapping[OrderStatus, int],
        today_orders: int,
        today_revenue,
    ) -> 'OrderStats':
        return cls(
            total_orders=sum(status_counts.values()),
            pending_orders=status_counts.get(OrderStatus.REQUESTED, 0),
            in_progress_orders=sum(status_counts.get(status, 0) for status in IN_PROGRESS_STATUSES),
            completed_orders=status_counts.get(OrderStatus.DELIVERED, 0),
            cancelled_orders=status_counts.get(OrderStatus.CANCELLED, 0),
            today_orders=today_orders or 0,
            today_revenue=Decimal(str(today_revenue or 0)),
        )

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class DeliveryStats:
    """Performance numbers for one delivery person."""
    total_deliveries: int
    completed_deliveries: int
    cancelled_deliveries: int
    today_deliveries: int
    this_week_deliveries: int
    this_month_deliveries: int
    total_revenue: Decimal
    average_delivery_time: float

    @classmethod
    def from_aggregates(
        cls,
        status_counts: Mapping[OrderStatus, int],
        today_deliveries: int,
        this_week_deliveries: int,
        this_month_deliveries: int,
        total_revenue,
        delivered_timings: Iterable[Tuple[datetime, datetime]],
    ) -> 'DeliveryStats':
        return cls(
            total_deliveries=sum(status_counts.values()),
            completed_deliveries=status_counts.get(OrderStatus.DELIVERED, 0),
            cancelled_deliveries=status_counts.get(OrderStatus.CANCELLED, 0),
            today_deliveries=today_deliveries or 0,
            this_week_deliveries=this_week_deliveries or 0,
            this_month_deliveries=this_month_deliveries or 0,
            total_revenue=Decimal(str(total_revenue or 0)),
            average_delivery_time=average_delivery_hours(delivered_timings),
        )

    def to_dict(self):
        return asdict(self)


def average_delivery_hours(timings: Iterable[Tuple[datetime, datetime]]) -> float:
    """Mean of (updated_at - created_at) in hours, rounded to 2 places; 0 when empty."""
    durations = [
        (updated_at - created_at).total_seconds() / 3600
        for created_at, updated_at in timings
    ]
    if not durations:
        return 0.0
    return round(sum(durations) / len(durations), 2)
