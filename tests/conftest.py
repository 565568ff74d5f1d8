"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest

from apps.users.domain.value_objects import UserRole


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture(autouse=True)
def clear_throttle_cache():
    """Rate-limit counters live in the cache; start every test with none."""
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


def _make_user(django_user_model, phone_number, role, full_name):
    return django_user_model.objects.create_user(
        phone_number=phone_number,
        full_name=full_name,
        address='House 12, Road 5, Dhanmondi, Dhaka',
        role=role.value,
        is_verified=True,
    )


@pytest.fixture
def customer(django_user_model):
    return _make_user(django_user_model, '01711000001', UserRole.CUSTOMER, 'Rahim Uddin')


@pytest.fixture
def other_customer(django_user_model):
    return _make_user(django_user_model, '01711000002', UserRole.CUSTOMER, 'Karim Ahmed')


@pytest.fixture
def courier(django_user_model):
    return _make_user(django_user_model, '01811000001', UserRole.DELIVERY, 'Jamal Hossain')


@pytest.fixture
def other_courier(django_user_model):
    return _make_user(django_user_model, '01811000002', UserRole.DELIVERY, 'Kamal Hossain')


@pytest.fixture
def admin_user(django_user_model):
    return _make_user(django_user_model, '01911000001', UserRole.ADMIN, 'Admin')


def _client_for(user):
    from rest_framework.test import APIClient
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def customer_client(customer):
    return _client_for(customer)


@pytest.fixture
def courier_client(courier):
    return _client_for(courier)


@pytest.fixture
def other_courier_client(other_courier):
    return _client_for(other_courier)


@pytest.fixture
def admin_client(admin_user):
    return _client_for(admin_user)


@pytest.fixture
def seeded_catalog(db):
    """Default services, items and prices."""
    from apps.catalog.infrastructure.factories import build_seed_use_case
    return build_seed_use_case().execute().data


@pytest.fixture
def mens_shirt(seeded_catalog):
    """Men's shirt: washing 40, ironing 25."""
    from apps.catalog.infrastructure.models import ClothingItemModel
    return ClothingItemModel.objects.get(name_en='Shirt', category='men')


@pytest.fixture
def actor_for():
    from apps.orders.domain.services.order_access_policy import Actor

    def build(user):
        return Actor(user_id=user.id, role=UserRole(user.role))
    return build


@pytest.fixture
def place_order(mens_shirt, actor_for):
    """Place a shirt order (wash + iron) for a customer through the use case."""
    from apps.orders.application.dtos.order_dto import AddressDTO, CreateOrderDTO, OrderLineDTO
    from apps.orders.application.use_cases import CreateOrderUseCase
    from apps.orders.infrastructure.adapters import CatalogPriceResolver
    from apps.orders.infrastructure.repositories import DjangoOrderRepository

    def place(customer, quantity=2):
        use_case = CreateOrderUseCase(
            order_repository=DjangoOrderRepository(),
            price_resolver=CatalogPriceResolver(),
            delivery_charge=Decimal('60'),
        )
        return use_case.execute(
            CreateOrderDTO(
                actor=actor_for(customer),
                items=[
                    OrderLineDTO(
                        clothing_item_id=mens_shirt.id,
                        category='men',
                        services=['washing', 'ironing'],
                        quantity=quantity,
                    )
                ],
                pickup_address=AddressDTO(full_address='House 12, Road 5, Dhanmondi'),
            )
        ).data
    return place


@pytest.fixture
def advance_order():
    """Assign a courier and walk the order through the given statuses."""
    from apps.orders.infrastructure.repositories import DjangoOrderRepository

    def advance(order_id, courier, *statuses):
        repository = DjangoOrderRepository()
        order = repository.find_by_id(order_id)
        order.assign_delivery_person(courier.id, assigned_by=courier.id)
        for status in statuses:
            order.change_status(status, changed_by=courier.id)
        return repository.save(order)
    return advance
