"""
Tests for order use cases against the Django repositories.
"""
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.catalog.infrastructure.models import PricingModel
from apps.orders.application.dtos.order_dto import (
    AddressDTO,
    AssignDeliveryPersonDTO,
    CreateOrderDTO,
    ListOrdersQuery,
    OrderLineDTO,
    UpdateOrderStatusDTO,
)
from apps.orders.application.use_cases import (
    AssignDeliveryPersonUseCase,
    CreateOrderUseCase,
    GetOrderUseCase,
    ListAllOrdersUseCase,
    ListAssignedOrdersUseCase,
    ListDeliveryHistoryUseCase,
    ListMyOrdersUseCase,
    ListUnassignedOrdersUseCase,
    UpdateOrderStatusUseCase,
)
from apps.orders.domain.exceptions import (
    ConcurrentOrderUpdateError,
    InvalidOrderError,
    InvalidStatusTransitionError,
    NotADeliveryPersonError,
    OrderAccessDeniedError,
    OrderNotFoundError,
    PricingUnavailableError,
)
from apps.orders.domain.services.pricing_calculator import MAX_LINE_QUANTITY
from apps.orders.domain.value_objects.order_status import OrderStatus
from apps.orders.infrastructure.adapters import CatalogPriceResolver, DjangoUserDirectory
from apps.orders.infrastructure.models import OrderModel
from apps.orders.infrastructure.repositories import DjangoOrderRepository
from apps.users.domain.exceptions import UserNotFoundError
from shared.domain import PermissionDeniedError, ValidationError

S = OrderStatus

pytestmark = pytest.mark.django_db


def _assign(admin, order_id, delivery_person_id, actor_for):
    use_case = AssignDeliveryPersonUseCase(
        order_repository=DjangoOrderRepository(),
        user_directory=DjangoUserDirectory(),
    )
    return use_case.execute(
        AssignDeliveryPersonDTO(
            actor=actor_for(admin),
            order_id=order_id,
            delivery_person_id=delivery_person_id,
        )
    ).data


def _update_status(user, order_id, status, actor_for, note=''):
    use_case = UpdateOrderStatusUseCase(order_repository=DjangoOrderRepository())
    return use_case.execute(
        UpdateOrderStatusDTO(actor=actor_for(user), order_id=order_id, status=status, note=note)
    ).data


class TestCreateOrder:

    def test_prices_and_persists_order(self, customer, place_order):
        order = place_order(customer, quantity=2)

        assert order.status == 'requested'
        assert order.pricing == {
            'items_total': Decimal('130'),
            'delivery_charge': Decimal('60'),
            'grand_total': Decimal('190'),
        }
        assert len(order.status_history) == 1
        assert order.items[0]['clothing_item_name'] == 'Shirt'
        assert order.items[0]['unit_price'] == Decimal('65')

        stored = OrderModel.objects.get(id=order.id)
        assert stored.grand_total == Decimal('190')
        assert stored.version == 1

    def test_unpriced_service_persists_nothing(self, customer, mens_shirt, actor_for):
        PricingModel.objects.filter(clothing_item=mens_shirt, service_type='ironing').update(is_active=False)
        use_case = CreateOrderUseCase(
            order_repository=DjangoOrderRepository(),
            price_resolver=CatalogPriceResolver(),
            delivery_charge=Decimal('60'),
        )

        with pytest.raises(PricingUnavailableError):
            use_case.execute(
                CreateOrderDTO(
                    actor=actor_for(customer),
                    items=[
                        OrderLineDTO(clothing_item_id=mens_shirt.id, category='men', services=['washing']),
                        OrderLineDTO(clothing_item_id=mens_shirt.id, category='men', services=['ironing']),
                    ],
                    pickup_address=AddressDTO(full_address='House 12, Road 5, Dhanmondi'),
                )
            )

        assert OrderModel.objects.count() == 0

    def test_total_too_large_to_store_persists_nothing(self, customer, mens_shirt, actor_for):
        PricingModel.objects.filter(clothing_item=mens_shirt, service_type='washing').update(
            price=Decimal('99999999.99')
        )
        use_case = CreateOrderUseCase(
            order_repository=DjangoOrderRepository(),
            price_resolver=CatalogPriceResolver(),
            delivery_charge=Decimal('60'),
        )

        with pytest.raises(InvalidOrderError):
            use_case.execute(
                CreateOrderDTO(
                    actor=actor_for(customer),
                    items=[
                        OrderLineDTO(
                            clothing_item_id=mens_shirt.id,
                            category='men',
                            services=['washing'],
                            quantity=MAX_LINE_QUANTITY,
                        ),
                    ],
                    pickup_address=AddressDTO(full_address='House 12, Road 5, Dhanmondi'),
                )
            )

        assert OrderModel.objects.count() == 0

    def test_delivery_charge_comes_from_settings(self, customer, mens_shirt, actor_for, settings):
        settings.DEFAULT_DELIVERY_CHARGE = Decimal('80')
        use_case = CreateOrderUseCase(
            order_repository=DjangoOrderRepository(),
            price_resolver=CatalogPriceResolver(),
        )

        order = use_case.execute(
            CreateOrderDTO(
                actor=actor_for(customer),
                items=[OrderLineDTO(clothing_item_id=mens_shirt.id, category='men', services=['washing'])],
                pickup_address=AddressDTO(full_address='House 12, Road 5, Dhanmondi'),
            )
        ).data

        assert order.pricing['grand_total'] == Decimal('120')

    def test_unknown_category_is_a_validation_error(self, customer, mens_shirt, actor_for):
        use_case = CreateOrderUseCase(
            order_repository=DjangoOrderRepository(),
            price_resolver=CatalogPriceResolver(),
        )
        with pytest.raises(ValidationError):
            use_case.execute(
                CreateOrderDTO(
                    actor=actor_for(customer),
                    items=[OrderLineDTO(clothing_item_id=mens_shirt.id, category='pets', services=['washing'])],
                    pickup_address=AddressDTO(full_address='House 12, Road 5, Dhanmondi'),
                )
            )

    def test_couriers_cannot_place_orders(self, courier, mens_shirt, actor_for):
        use_case = CreateOrderUseCase(
            order_repository=DjangoOrderRepository(),
            price_resolver=CatalogPriceResolver(),
        )
        with pytest.raises(PermissionDeniedError):
            use_case.execute(
                CreateOrderDTO(
                    actor=actor_for(courier),
                    items=[OrderLineDTO(clothing_item_id=mens_shirt.id, category='men', services=['washing'])],
                    pickup_address=AddressDTO(full_address='House 12, Road 5, Dhanmondi'),
                )
            )


class TestUpdateStatus:

    def test_assigned_courier_moves_order(self, customer, courier, admin_user, place_order, actor_for):
        order = place_order(customer)
        _assign(admin_user, order.id, courier.id, actor_for)

        updated = _update_status(courier, order.id, 'picked_up', actor_for, note='Collected')

        assert updated.status == 'picked_up'
        assert [entry['status'] for entry in updated.status_history] == ['requested', 'picked_up']
        assert updated.status_history[-1]['updated_by'] == courier.id
        assert updated.status_history[-1]['note'] == 'Collected'

    def test_admin_may_move_any_order(self, customer, admin_user, place_order, actor_for):
        order = place_order(customer)
        updated = _update_status(admin_user, order.id, 'cancelled', actor_for)
        assert updated.status == 'cancelled'

    def test_unassigned_courier_is_forbidden(self, customer, courier, other_courier, admin_user,
                                             place_order, actor_for):
        order = place_order(customer)
        _assign(admin_user, order.id, courier.id, actor_for)

        with pytest.raises(OrderAccessDeniedError):
            _update_status(other_courier, order.id, 'picked_up', actor_for)

    def test_permission_is_checked_before_transition(self, customer, other_courier, place_order, actor_for):
        order = place_order(customer)
        # DELIVERED is not reachable from REQUESTED, but the caller is not allowed at all.
        with pytest.raises(OrderAccessDeniedError):
            _update_status(other_courier, order.id, 'delivered', actor_for)

    def test_invalid_transition_is_rejected(self, customer, courier, place_order, advance_order, actor_for):
        order = place_order(customer)
        advance_order(order.id, courier, S.PICKED_UP, S.IN_LAUNDRY)

        with pytest.raises(InvalidStatusTransitionError):
            _update_status(courier, order.id, 'cancelled', actor_for)

        assert OrderModel.objects.get(id=order.id).status == 'in_laundry'

    def test_missing_order_is_not_found(self, admin_user, actor_for):
        with pytest.raises(OrderNotFoundError):
            _update_status(admin_user, uuid4(), 'picked_up', actor_for)

    def test_stale_write_is_a_conflict(self, customer, courier, place_order):
        order = place_order(customer)
        repository = DjangoOrderRepository()
        first = repository.find_by_id(order.id)
        second = repository.find_by_id(order.id)

        first.change_status(S.PICKED_UP, changed_by=courier.id)
        repository.save(first)

        second.change_status(S.CANCELLED, changed_by=courier.id)
        with pytest.raises(ConcurrentOrderUpdateError):
            repository.save(second)

        stored = repository.find_by_id(order.id)
        assert stored.status == S.PICKED_UP
        assert len(stored.status_history) == 2
        assert stored.version == 2


class TestAssignDeliveryPerson:

    def test_assigns_courier(self, customer, courier, admin_user, place_order, actor_for):
        order = place_order(customer)

        assigned = _assign(admin_user, order.id, courier.id, actor_for)

        assert assigned.delivery_person_id == courier.id
        assert assigned.status == 'requested'
        assert len(assigned.status_history) == 1

    def test_customer_target_is_a_validation_error(self, customer, other_customer, admin_user,
                                                   place_order, actor_for):
        order = place_order(customer)
        with pytest.raises(NotADeliveryPersonError):
            _assign(admin_user, order.id, other_customer.id, actor_for)

    def test_unknown_user_is_not_found(self, customer, admin_user, place_order, actor_for):
        order = place_order(customer)
        with pytest.raises(UserNotFoundError):
            _assign(admin_user, order.id, uuid4(), actor_for)

    def test_unknown_order_is_not_found(self, courier, admin_user, actor_for):
        with pytest.raises(OrderNotFoundError):
            _assign(admin_user, uuid4(), courier.id, actor_for)

    def test_only_admins_assign(self, customer, courier, place_order, actor_for):
        order = place_order(customer)
        with pytest.raises(PermissionDeniedError):
            _assign(courier, order.id, courier.id, actor_for)

    def test_reassignment_replaces_courier(self, customer, courier, other_courier, admin_user,
                                           place_order, actor_for):
        order = place_order(customer)
        _assign(admin_user, order.id, courier.id, actor_for)

        reassigned = _assign(admin_user, order.id, other_courier.id, actor_for)

        assert reassigned.delivery_person_id == other_courier.id


class TestOrderQueries:

    def test_get_order_visibility(self, customer, other_customer, courier, other_courier, admin_user,
                                  place_order, actor_for):
        order = place_order(customer)
        _assign(admin_user, order.id, courier.id, actor_for)
        repository = DjangoOrderRepository()

        for user in (customer, courier, admin_user):
            result = GetOrderUseCase(order_repository=repository, actor=actor_for(user)).execute(order.id)
            assert result.data.id == order.id

        for user in (other_customer, other_courier):
            with pytest.raises(OrderAccessDeniedError):
                GetOrderUseCase(order_repository=repository, actor=actor_for(user)).execute(order.id)

    def test_courier_lists(self, customer, courier, place_order, advance_order, actor_for):
        active = place_order(customer)
        delivered = place_order(customer)
        cancelled = place_order(customer)
        advance_order(active.id, courier, S.PICKED_UP)
        advance_order(delivered.id, courier, S.PICKED_UP, S.IN_LAUNDRY, S.OUT_FOR_DELIVERY, S.DELIVERED)
        advance_order(cancelled.id, courier, S.CANCELLED)
        repository = DjangoOrderRepository()

        assigned = ListAssignedOrdersUseCase(order_repository=repository).execute(actor_for(courier)).data
        history = ListDeliveryHistoryUseCase(order_repository=repository).execute(actor_for(courier)).data

        assert [order.id for order in assigned] == [active.id]
        assert {order.id for order in history} == {delivered.id, cancelled.id}

    def test_unassigned_oldest_first(self, customer, courier, place_order, advance_order):
        first = place_order(customer)
        second = place_order(customer)
        taken = place_order(customer)
        advance_order(taken.id, courier)

        result = ListUnassignedOrdersUseCase(order_repository=DjangoOrderRepository()).execute().data

        assert [order.id for order in result] == [first.id, second.id]

    def test_my_orders_newest_first(self, customer, other_customer, place_order, actor_for):
        older = place_order(customer)
        newer = place_order(customer)
        place_order(other_customer)

        result = ListMyOrdersUseCase(order_repository=DjangoOrderRepository()).execute(actor_for(customer)).data

        assert [order.id for order in result] == [newer.id, older.id]

    def test_admin_listing_paginates(self, customer, admin_user, place_order, actor_for):
        for _ in range(5):
            place_order(customer)
        use_case = ListAllOrdersUseCase(order_repository=DjangoOrderRepository())

        page = use_case.execute(ListOrdersQuery(actor=actor_for(admin_user), page=2, limit=2)).data

        assert page.total == 5
        assert page.page == 2
        assert page.total_pages == 3
        assert len(page.orders) == 2

    def test_admin_listing_filters_by_status(self, customer, courier, admin_user, place_order,
                                             advance_order, actor_for):
        place_order(customer)
        cancelled = place_order(customer)
        advance_order(cancelled.id, courier, S.CANCELLED)
        use_case = ListAllOrdersUseCase(order_repository=DjangoOrderRepository())

        page = use_case.execute(ListOrdersQuery(actor=actor_for(admin_user), status='cancelled')).data

        assert [order.id for order in page.orders] == [cancelled.id]
        assert page.total == 1
