"""
Tests for order role and ownership checks.
"""
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.catalog.domain.value_objects import ClothingCategory, ServiceType
from apps.orders.domain.entities.order import Order
from apps.orders.domain.entities.order_item import OrderItem
from apps.orders.domain.exceptions import OrderAccessDeniedError
from apps.orders.domain.services.order_access_policy import Actor, OrderAccessPolicy
from apps.orders.domain.value_objects.address import Address
from apps.orders.domain.value_objects.order_pricing import OrderPricing
from apps.users.domain.value_objects import UserRole

policy = OrderAccessPolicy()


@pytest.fixture
def customer():
    return Actor(user_id=uuid4(), role=UserRole.CUSTOMER)


@pytest.fixture
def courier():
    return Actor(user_id=uuid4(), role=UserRole.DELIVERY)


@pytest.fixture
def admin():
    return Actor(user_id=uuid4(), role=UserRole.ADMIN)


@pytest.fixture
def order(customer, courier):
    item = OrderItem.priced(
        clothing_item_id=uuid4(),
        clothing_item_name='Saree',
        category=ClothingCategory.WOMEN,
        services=(ServiceType.WASHING,),
        quantity=1,
        unit_price=Decimal('80'),
    )
    order = Order.place(
        customer_id=customer.user_id,
        items=[item],
        pricing=OrderPricing.compose(Decimal('80'), Decimal('60')),
        pickup_address=Address(full_address='Flat 3B, Banani'),
    )
    order.assign_delivery_person(courier.user_id, assigned_by=uuid4())
    return order


def test_only_customers_create(customer, courier, admin):
    assert policy.can_create(customer)
    assert not policy.can_create(courier)
    assert not policy.can_create(admin)


def test_read_access(order, customer, courier, admin):
    assert policy.can_read(customer, order)
    assert policy.can_read(courier, order)
    assert policy.can_read(admin, order)
    assert not policy.can_read(Actor(user_id=uuid4(), role=UserRole.CUSTOMER), order)
    assert not policy.can_read(Actor(user_id=uuid4(), role=UserRole.DELIVERY), order)


def test_status_updates_need_assignment_or_admin(order, customer, courier, admin):
    assert policy.can_update_status(courier, order)
    assert policy.can_update_status(admin, order)
    # Owning the order does not allow moving it.
    assert not policy.can_update_status(customer, order)

    with pytest.raises(OrderAccessDeniedError):
        policy.ensure_can_update_status(Actor(user_id=uuid4(), role=UserRole.DELIVERY), order)


def test_assign_and_fleet_views_are_admin_only(customer, courier, admin):
    for actor in (customer, courier):
        assert not policy.can_assign(actor)
        assert not policy.can_view_fleet(actor)
    assert policy.can_assign(admin)
    assert policy.can_view_fleet(admin)
