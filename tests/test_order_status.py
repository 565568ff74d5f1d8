"""
Tests for the order lifecycle transition table.
"""
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.catalog.domain.value_objects import ClothingCategory, ServiceType
from apps.orders.domain.entities.order import Order
from apps.orders.domain.entities.order_item import OrderItem
from apps.orders.domain.exceptions import InvalidOrderError, InvalidStatusTransitionError
from apps.orders.domain.value_objects.address import Address
from apps.orders.domain.value_objects.order_pricing import OrderPricing
from apps.orders.domain.value_objects.order_status import (
    IN_PROGRESS_STATUSES,
    TERMINAL_STATUSES,
    OrderStatus,
    allowed_transitions,
    can_transition,
)

S = OrderStatus

ALLOWED = {
    (S.REQUESTED, S.PICKED_UP),
    (S.REQUESTED, S.CANCELLED),
    (S.PICKED_UP, S.IN_LAUNDRY),
    (S.PICKED_UP, S.CANCELLED),
    (S.IN_LAUNDRY, S.OUT_FOR_DELIVERY),
    (S.OUT_FOR_DELIVERY, S.DELIVERED),
}


@pytest.mark.parametrize('current', list(S))
@pytest.mark.parametrize('target', list(S))
def test_transition_table(current, target):
    assert can_transition(current, target) == ((current, target) in ALLOWED)


def test_terminal_statuses():
    assert TERMINAL_STATUSES == {S.DELIVERED, S.CANCELLED}
    assert S.DELIVERED.is_terminal
    assert not S.REQUESTED.is_terminal


def test_in_progress_statuses():
    assert IN_PROGRESS_STATUSES == {S.PICKED_UP, S.IN_LAUNDRY, S.OUT_FOR_DELIVERY}


def test_cancellation_closes_once_in_laundry():
    assert S.CANCELLED not in allowed_transitions(S.IN_LAUNDRY)
    assert S.CANCELLED not in allowed_transitions(S.OUT_FOR_DELIVERY)


def _order():
    item = OrderItem.priced(
        clothing_item_id=uuid4(),
        clothing_item_name='Shirt',
        category=ClothingCategory.MEN,
        services=(ServiceType.WASHING, ServiceType.IRONING),
        quantity=2,
        unit_price=Decimal('65'),
    )
    return Order.place(
        customer_id=uuid4(),
        items=[item],
        pricing=OrderPricing.compose(Decimal('130'), Decimal('60')),
        pickup_address=Address(full_address='House 1, Road 2, Gulshan'),
    )


class TestOrderLifecycle:

    def test_placed_order_starts_requested_with_one_history_entry(self):
        order = _order()

        assert order.status == S.REQUESTED
        assert len(order.status_history) == 1
        assert order.status_history[0].updated_by == order.customer_id
        assert order.delivery_address == order.pickup_address
        assert [event.event_type for event in order.domain_events] == ['OrderPlaced']

    def test_change_status_appends_history(self):
        order = _order()
        courier_id = uuid4()

        order.change_status(S.PICKED_UP, changed_by=courier_id, note='Collected 2 shirts')

        assert order.status == S.PICKED_UP
        assert len(order.status_history) == 2
        entry = order.status_history[-1]
        assert entry.status == S.PICKED_UP
        assert entry.updated_by == courier_id
        assert entry.note == 'Collected 2 shirts'

    def test_missing_note_is_recorded_empty(self):
        order = _order()
        order.change_status(S.CANCELLED, changed_by=uuid4())
        assert order.status_history[-1].note == ''

    def test_in_laundry_cannot_be_cancelled(self):
        order = _order()
        order.change_status(S.PICKED_UP, changed_by=uuid4())
        order.change_status(S.IN_LAUNDRY, changed_by=uuid4())

        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            order.change_status(S.CANCELLED, changed_by=uuid4())

        assert exc_info.value.from_status == 'in_laundry'
        assert exc_info.value.to_status == 'cancelled'
        assert order.status == S.IN_LAUNDRY
        assert len(order.status_history) == 3

    def test_terminal_orders_do_not_move(self):
        order = _order()
        order.change_status(S.CANCELLED, changed_by=uuid4())

        with pytest.raises(InvalidStatusTransitionError):
            order.change_status(S.PICKED_UP, changed_by=uuid4())

    def test_assignment_leaves_status_and_history(self):
        order = _order()
        order.assign_delivery_person(uuid4(), assigned_by=uuid4())

        assert order.status == S.REQUESTED
        assert len(order.status_history) == 1

    def test_order_without_items_is_rejected(self):
        with pytest.raises(InvalidOrderError):
            Order.place(
                customer_id=uuid4(),
                items=[],
                pricing=OrderPricing.compose(Decimal('0'), Decimal('60')),
                pickup_address=Address(full_address='House 1, Road 2, Gulshan'),
            )
