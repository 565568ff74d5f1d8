"""
Tests for the orders HTTP API.
"""
from datetime import datetime, timezone as dt_timezone
from uuid import uuid4

import pytest

from apps.orders.domain.value_objects.order_status import OrderStatus
from apps.orders.infrastructure.models import OrderModel

S = OrderStatus

pytestmark = pytest.mark.django_db

ORDERS_URL = '/api/v1/orders/'


def _order_payload(item_id, quantity=2):
    return {
        'items': [
            {
                'clothing_item_id': str(item_id),
                'category': 'men',
                'services': ['washing', 'ironing'],
                'quantity': quantity,
            }
        ],
        'pickup_address': {'full_address': 'House 12, Road 5, Dhanmondi', 'landmark': 'Near the mosque'},
        'notes': 'Please ring twice',
    }


class TestCreateOrderApi:

    def test_customer_places_order(self, customer_client, customer, mens_shirt):
        response = customer_client.post(ORDERS_URL, _order_payload(mens_shirt.id), format='json')

        assert response.status_code == 201
        body = response.data
        assert body['status'] == 'requested'
        assert body['customer_id'] == str(customer.id)
        assert body['pricing']['items_total'] == '130.00'
        assert body['pricing']['grand_total'] == '190.00'
        assert body['items'][0]['clothing_item_name'] == 'Shirt'
        assert body['delivery_address']['full_address'] == 'House 12, Road 5, Dhanmondi'
        assert len(body['status_history']) == 1

    def test_courier_cannot_place_order(self, courier_client, mens_shirt):
        response = courier_client.post(ORDERS_URL, _order_payload(mens_shirt.id), format='json')
        assert response.status_code == 403

    def test_unpriced_combination(self, customer_client, mens_shirt):
        payload = _order_payload(mens_shirt.id)
        # The seeded men's shirt is priced for the men category only.
        payload['items'][0]['category'] = 'women'

        response = customer_client.post(ORDERS_URL, payload, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'PRICING_UNAVAILABLE'

    def test_empty_items_are_rejected(self, customer_client, seeded_catalog):
        payload = _order_payload(uuid4())
        payload['items'] = []

        response = customer_client.post(ORDERS_URL, payload, format='json')

        assert response.status_code == 400

    def test_unknown_item_is_not_found(self, customer_client, seeded_catalog):
        response = customer_client.post(ORDERS_URL, _order_payload(uuid4()), format='json')
        assert response.status_code == 404

    @pytest.mark.parametrize('quantity', [1001, 10 ** 12])
    def test_oversized_quantity_is_rejected(self, customer_client, mens_shirt, quantity):
        response = customer_client.post(ORDERS_URL, _order_payload(mens_shirt.id, quantity), format='json')

        assert response.status_code == 400
        assert OrderModel.objects.count() == 0

    def test_anonymous_requests_are_rejected(self, api_client, mens_shirt):
        response = api_client.post(ORDERS_URL, _order_payload(mens_shirt.id), format='json')
        assert response.status_code == 401


class TestOrderLifecycleApi:

    def test_full_delivery_flow(self, customer, courier, customer_client, courier_client, admin_client,
                                place_order):
        order = place_order(customer)

        response = admin_client.patch(
            f'{ORDERS_URL}{order.id}/assign/',
            {'delivery_person_id': str(courier.id)},
            format='json',
        )
        assert response.status_code == 200

        for status in ('picked_up', 'in_laundry', 'out_for_delivery', 'delivered'):
            response = courier_client.patch(
                f'{ORDERS_URL}{order.id}/status/',
                {'status': status, 'note': f'now {status}'},
                format='json',
            )
            assert response.status_code == 200
            assert response.data['status'] == status

        response = customer_client.get(f'{ORDERS_URL}{order.id}/')
        assert response.status_code == 200
        assert [entry['status'] for entry in response.data['status_history']] == [
            'requested', 'picked_up', 'in_laundry', 'out_for_delivery', 'delivered',
        ]

    def test_invalid_transition_names_both_statuses(self, customer, courier, courier_client,
                                                    place_order, advance_order):
        order = place_order(customer)
        advance_order(order.id, courier, S.PICKED_UP, S.IN_LAUNDRY)

        response = courier_client.patch(
            f'{ORDERS_URL}{order.id}/status/', {'status': 'cancelled'}, format='json',
        )

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_STATUS_TRANSITION'
        assert response.data['from_status'] == 'in_laundry'
        assert response.data['to_status'] == 'cancelled'

    def test_unassigned_courier_cannot_read_or_move(self, customer, courier, other_courier_client,
                                                     place_order, advance_order):
        order = place_order(customer)
        advance_order(order.id, courier)

        assert other_courier_client.get(f'{ORDERS_URL}{order.id}/').status_code == 403
        response = other_courier_client.patch(
            f'{ORDERS_URL}{order.id}/status/', {'status': 'picked_up'}, format='json',
        )
        assert response.status_code == 403

    def test_assigned_courier_reads_order(self, customer, courier, courier_client, place_order, advance_order):
        order = place_order(customer)
        advance_order(order.id, courier)

        response = courier_client.get(f'{ORDERS_URL}{order.id}/')

        assert response.status_code == 200
        assert response.data['id'] == str(order.id)

    def test_customers_cannot_change_status(self, customer, customer_client, place_order):
        order = place_order(customer)
        response = customer_client.patch(
            f'{ORDERS_URL}{order.id}/status/', {'status': 'cancelled'}, format='json',
        )
        assert response.status_code == 403

    def test_unknown_status_value(self, customer, admin_client, place_order):
        order = place_order(customer)
        response = admin_client.patch(
            f'{ORDERS_URL}{order.id}/status/', {'status': 'lost'}, format='json',
        )
        assert response.status_code == 400

    def test_missing_order(self, admin_client):
        response = admin_client.get(f'{ORDERS_URL}{uuid4()}/')
        assert response.status_code == 404
        assert response.data['code'] == 'ORDER_NOT_FOUND'


class TestAssignApi:

    def test_assigning_a_customer_is_rejected(self, customer, other_customer, admin_client, place_order):
        order = place_order(customer)

        response = admin_client.patch(
            f'{ORDERS_URL}{order.id}/assign/',
            {'delivery_person_id': str(other_customer.id)},
            format='json',
        )

        assert response.status_code == 400
        assert response.data['code'] == 'NOT_A_DELIVERY_PERSON'

    def test_assigning_unknown_user(self, customer, admin_client, place_order):
        order = place_order(customer)

        response = admin_client.patch(
            f'{ORDERS_URL}{order.id}/assign/',
            {'delivery_person_id': str(uuid4())},
            format='json',
        )

        assert response.status_code == 404
        assert response.data['code'] == 'USER_NOT_FOUND'

    def test_assignment_sets_estimated_delivery_time(self, customer, courier, admin_client, place_order):
        order = place_order(customer)
        eta = datetime(2026, 3, 1, 12, 30, tzinfo=dt_timezone.utc)

        response = admin_client.patch(
            f'{ORDERS_URL}{order.id}/assign/',
            {'delivery_person_id': str(courier.id), 'estimated_delivery_time': eta.isoformat()},
            format='json',
        )

        assert response.status_code == 200
        assert response.data['delivery_person_id'] == str(courier.id)
        assert response.data['estimated_delivery_time'] is not None
        assert OrderModel.objects.get(id=order.id).estimated_delivery_time == eta

    def test_reassignment_keeps_estimate_when_omitted(self, customer, courier, other_courier, admin_client,
                                                      place_order):
        order = place_order(customer)
        eta = datetime(2026, 3, 1, 12, 30, tzinfo=dt_timezone.utc)
        admin_client.patch(
            f'{ORDERS_URL}{order.id}/assign/',
            {'delivery_person_id': str(courier.id), 'estimated_delivery_time': eta.isoformat()},
            format='json',
        )

        admin_client.patch(
            f'{ORDERS_URL}{order.id}/assign/',
            {'delivery_person_id': str(other_courier.id)},
            format='json',
        )

        stored = OrderModel.objects.get(id=order.id)
        assert stored.delivery_person_id == other_courier.id
        assert stored.estimated_delivery_time == eta

    def test_courier_cannot_assign(self, customer, courier, courier_client, place_order):
        order = place_order(customer)
        response = courier_client.patch(
            f'{ORDERS_URL}{order.id}/assign/',
            {'delivery_person_id': str(courier.id)},
            format='json',
        )
        assert response.status_code == 403


class TestListingApi:

    def test_my_orders(self, customer, other_customer, customer_client, place_order):
        mine = place_order(customer)
        place_order(other_customer)

        response = customer_client.get(f'{ORDERS_URL}my/')

        assert response.status_code == 200
        assert [row['id'] for row in response.data] == [str(mine.id)]

    def test_my_orders_is_customer_only(self, courier_client, admin_client):
        assert courier_client.get(f'{ORDERS_URL}my/').status_code == 403
        assert admin_client.get(f'{ORDERS_URL}my/').status_code == 403

    def test_assigned_and_history(self, customer, courier, courier_client, place_order, advance_order):
        active = place_order(customer)
        done = place_order(customer)
        advance_order(active.id, courier, S.PICKED_UP)
        advance_order(done.id, courier, S.PICKED_UP, S.IN_LAUNDRY, S.OUT_FOR_DELIVERY, S.DELIVERED)

        assigned = courier_client.get(f'{ORDERS_URL}assigned/')
        history = courier_client.get(f'{ORDERS_URL}delivery/history/')

        assert [row['id'] for row in assigned.data] == [str(active.id)]
        assert [row['id'] for row in history.data] == [str(done.id)]

    def test_customer_cannot_see_assigned_list(self, customer_client):
        assert customer_client.get(f'{ORDERS_URL}assigned/').status_code == 403

    def test_unassigned_is_admin_only(self, customer, admin_client, courier_client, place_order):
        order = place_order(customer)

        assert courier_client.get(f'{ORDERS_URL}unassigned/').status_code == 403
        response = admin_client.get(f'{ORDERS_URL}unassigned/')
        assert response.status_code == 200
        assert [row['id'] for row in response.data] == [str(order.id)]

    def test_admin_listing(self, customer, admin_client, place_order):
        for _ in range(3):
            place_order(customer)

        response = admin_client.get(ORDERS_URL, {'page': 1, 'limit': 2})

        assert response.status_code == 200
        assert response.data['total'] == 3
        assert response.data['total_pages'] == 2
        assert len(response.data['orders']) == 2

    def test_admin_listing_rejects_bad_status(self, admin_client):
        response = admin_client.get(ORDERS_URL, {'status': 'lost'})
        assert response.status_code == 400

    def test_customer_cannot_list_everything(self, customer_client):
        assert customer_client.get(ORDERS_URL).status_code == 403


class TestStatsApi:

    def test_fleet_stats(self, customer, courier, admin_client, place_order, advance_order):
        place_order(customer)
        cancelled = place_order(customer)
        advance_order(cancelled.id, courier, S.CANCELLED)

        response = admin_client.get(f'{ORDERS_URL}stats/')

        assert response.status_code == 200
        assert response.data['total_orders'] == 2
        assert response.data['pending_orders'] == 1
        assert response.data['cancelled_orders'] == 1
        assert response.data['today_orders'] == 2
        assert response.data['today_revenue'] == '380.00'

    def test_fleet_stats_are_admin_only(self, courier_client):
        assert courier_client.get(f'{ORDERS_URL}stats/').status_code == 403

    def test_delivery_stats(self, customer, courier, courier_client, place_order, advance_order):
        order = place_order(customer)
        advance_order(order.id, courier, S.PICKED_UP, S.IN_LAUNDRY, S.OUT_FOR_DELIVERY, S.DELIVERED)

        response = courier_client.get(f'{ORDERS_URL}delivery/stats/')

        assert response.status_code == 200
        assert response.data['total_deliveries'] == 1
        assert response.data['completed_deliveries'] == 1
        assert response.data['total_revenue'] == '190.00'
