"""
Tests for the order statistics roll-ups.
"""
from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.orders.application.use_cases import GetDeliveryStatsUseCase, GetOrderStatsUseCase
from apps.orders.domain.services.order_statistics import (
    DeliveryStats,
    OrderStats,
    StatsWindows,
    average_delivery_hours,
)
from apps.orders.domain.value_objects.order_status import OrderStatus
from apps.orders.infrastructure.models import OrderModel
from apps.orders.infrastructure.repositories import DjangoOrderRepository
from shared.domain import PermissionDeniedError

S = OrderStatus


class TestRollUps:

    def test_fleet_counts(self):
        stats = OrderStats.from_counts(
            {S.REQUESTED: 3, S.DELIVERED: 2, S.CANCELLED: 1},
            today_orders=0,
            today_revenue=None,
        )

        assert stats.total_orders == 6
        assert stats.pending_orders == 3
        assert stats.completed_orders == 2
        assert stats.cancelled_orders == 1
        assert stats.in_progress_orders == 0
        assert stats.today_revenue == Decimal('0')

    def test_in_progress_sums_three_statuses(self):
        stats = OrderStats.from_counts(
            {S.PICKED_UP: 1, S.IN_LAUNDRY: 2, S.OUT_FOR_DELIVERY: 4},
            today_orders=7,
            today_revenue=Decimal('1330'),
        )
        assert stats.in_progress_orders == 7
        assert stats.pending_orders == 0

    def test_average_delivery_hours(self):
        start = datetime(2024, 5, 1, 8, 0)
        timings = [
            (start, start + timedelta(hours=2)),
            (start, start + timedelta(hours=3, minutes=20)),
        ]
        assert average_delivery_hours(timings) == 2.67

    def test_average_without_deliveries_is_zero(self):
        assert average_delivery_hours([]) == 0.0

    def test_delivery_stats_without_history(self):
        stats = DeliveryStats.from_aggregates(
            status_counts={},
            today_deliveries=0,
            this_week_deliveries=0,
            this_month_deliveries=0,
            total_revenue=None,
            delivered_timings=[],
        )
        assert stats.total_deliveries == 0
        assert stats.total_revenue == Decimal('0')
        assert stats.average_delivery_time == 0.0

    def test_windows(self):
        now = datetime(2024, 3, 31, 15, 45)
        windows = StatsWindows.ending_at(now)

        assert windows.start_of_today == datetime(2024, 3, 31)
        assert windows.week_ago == datetime(2024, 3, 24, 15, 45)
        # Calendar month, clamped to the shorter February.
        assert windows.month_ago == datetime(2024, 2, 29, 15, 45)


def _noon_today():
    return timezone.localtime().replace(hour=12, minute=0, second=0, microsecond=0)


def _backdate(order_id, created_at, updated_at):
    OrderModel.objects.filter(id=order_id).update(created_at=created_at, updated_at=updated_at)


@pytest.mark.django_db
class TestStatsUseCases:

    def test_fleet_stats(self, customer, courier, admin_user, place_order, advance_order, actor_for):
        now = _noon_today()
        orders = [place_order(customer) for _ in range(6)]
        advance_order(orders[3].id, courier, S.PICKED_UP, S.IN_LAUNDRY, S.OUT_FOR_DELIVERY, S.DELIVERED)
        advance_order(orders[4].id, courier, S.PICKED_UP, S.IN_LAUNDRY, S.OUT_FOR_DELIVERY, S.DELIVERED)
        advance_order(orders[5].id, courier, S.CANCELLED)
        # One of them was placed yesterday.
        _backdate(orders[0].id, now - timedelta(days=1), now - timedelta(days=1))

        use_case = GetOrderStatsUseCase(order_repository=DjangoOrderRepository(), clock=lambda: now)
        stats = use_case.execute(actor_for(admin_user)).data

        assert stats.total_orders == 6
        assert stats.pending_orders == 3
        assert stats.completed_orders == 2
        assert stats.cancelled_orders == 1
        assert stats.in_progress_orders == 0
        assert stats.today_orders == 5
        assert stats.today_revenue == Decimal('950')

    def test_fleet_stats_are_admin_only(self, courier, actor_for):
        use_case = GetOrderStatsUseCase(order_repository=DjangoOrderRepository())
        with pytest.raises(PermissionDeniedError):
            use_case.execute(actor_for(courier))

    def test_delivery_stats(self, customer, courier, other_courier, place_order, advance_order):
        now = _noon_today()
        delivered = []
        for hours_ago, took_hours in ((1, 2), (3 * 24, 4), (20 * 24, 6)):
            order = place_order(customer)
            advance_order(order.id, courier, S.PICKED_UP, S.IN_LAUNDRY, S.OUT_FOR_DELIVERY, S.DELIVERED)
            finished = now - timedelta(hours=hours_ago)
            _backdate(order.id, finished - timedelta(hours=took_hours), finished)
            delivered.append(order)

        cancelled = place_order(customer)
        advance_order(cancelled.id, courier, S.CANCELLED)
        active = place_order(customer)
        advance_order(active.id, courier, S.PICKED_UP)
        someone_else = place_order(customer)
        advance_order(someone_else.id, other_courier, S.PICKED_UP, S.IN_LAUNDRY, S.OUT_FOR_DELIVERY, S.DELIVERED)

        use_case = GetDeliveryStatsUseCase(order_repository=DjangoOrderRepository(), clock=lambda: now)
        stats = use_case.execute(courier.id).data

        assert stats.total_deliveries == 5
        assert stats.completed_deliveries == 3
        assert stats.cancelled_deliveries == 1
        assert stats.today_deliveries == 1
        assert stats.this_week_deliveries == 2
        assert stats.this_month_deliveries == 3
        assert stats.total_revenue == Decimal('570')
        assert stats.average_delivery_time == 4.0
