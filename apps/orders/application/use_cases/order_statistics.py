"""
Order statistics use cases.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable
from uuid import UUID

from django.utils import timezone

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.order_repository import OrderRepository
from ...domain.services.order_access_policy import Actor, OrderAccessPolicy
from ...domain.services.order_statistics import DeliveryStats, OrderStats, StatsWindows


@dataclass
class GetOrderStatsUseCase(UseCase[Actor, OrderStats]):
    """Fleet-wide dashboard numbers."""

    order_repository: OrderRepository
    clock: Callable[[], datetime] = timezone.localtime
    access_policy: OrderAccessPolicy = field(default_factory=OrderAccessPolicy)

    def execute(self, input_dto: Actor) -> UseCaseResult[OrderStats]:
        self.access_policy.ensure_can_view_fleet(input_dto)
        windows = StatsWindows.ending_at(self.clock())

        today_orders, today_revenue = self.order_repository.created_since(windows.start_of_today)
        return UseCaseResult.ok(
            OrderStats.from_counts(
                status_counts=self.order_repository.count_by_status(),
                today_orders=today_orders,
                today_revenue=today_revenue,
            )
        )


@dataclass
class GetDeliveryStatsUseCase(UseCase[UUID, DeliveryStats]):
    """Performance numbers for one delivery person."""

    order_repository: OrderRepository
    clock: Callable[[], datetime] = timezone.localtime

    def execute(self, input_dto: UUID) -> UseCaseResult[DeliveryStats]:
        repository = self.order_repository
        windows = StatsWindows.ending_at(self.clock())

        return UseCaseResult.ok(
            DeliveryStats.from_aggregates(
                status_counts=repository.count_by_status(delivery_person_id=input_dto),
                today_deliveries=repository.count_delivered_since(input_dto, windows.start_of_today),
                this_week_deliveries=repository.count_delivered_since(input_dto, windows.week_ago),
                this_month_deliveries=repository.count_delivered_since(input_dto, windows.month_ago),
                total_revenue=repository.delivered_revenue(input_dto),
                delivered_timings=repository.delivered_timings(input_dto),
            )
        )
