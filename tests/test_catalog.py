"""
Tests for the catalog context.
"""
from decimal import Decimal
from io import StringIO
from uuid import uuid4

import pytest
from django.core.management import call_command

from apps.catalog.domain.entities.pricing_entry import PricingEntry
from apps.catalog.domain.exceptions import ClothingItemNotFoundError, InvalidPriceError
from apps.catalog.domain.value_objects import ClothingCategory, ServiceType
from apps.catalog.infrastructure.factories import build_seed_use_case
from apps.catalog.infrastructure.models import ClothingItemModel, LaundryServiceModel, PricingModel
from apps.orders.infrastructure.adapters import CatalogPriceResolver

CATALOG_URL = '/api/v1/catalog/'


def test_negative_price_is_rejected():
    with pytest.raises(InvalidPriceError):
        PricingEntry(
            clothing_item_id=uuid4(),
            service_type=ServiceType.WASHING,
            category=ClothingCategory.MEN,
            price=Decimal('-5'),
        )


@pytest.mark.django_db
class TestSeedCatalog:

    def test_seeds_defaults(self, seeded_catalog):
        assert seeded_catalog.seeded
        assert seeded_catalog.services == 2
        assert seeded_catalog.clothing_items == 16
        assert seeded_catalog.pricing_entries == 32
        assert LaundryServiceModel.objects.count() == 2
        assert PricingModel.objects.count() == 32

    def test_second_run_is_a_no_op(self, seeded_catalog):
        result = build_seed_use_case().execute().data

        assert not result.seeded
        assert ClothingItemModel.objects.count() == 16

    def test_management_command(self):
        out = StringIO()
        call_command('seed_catalog', stdout=out)

        assert 'Seeded 2 services, 16 clothing items and 32 prices' in out.getvalue()


@pytest.mark.django_db
class TestCatalogPriceResolver:

    def test_resolves_active_price(self, mens_shirt):
        resolver = CatalogPriceResolver()

        assert resolver.resolve_price(mens_shirt.id, ServiceType.WASHING, ClothingCategory.MEN) == Decimal('40')
        assert resolver.resolve_price(mens_shirt.id, ServiceType.IRONING, ClothingCategory.MEN) == Decimal('25')
        assert resolver.get_item_display_name(mens_shirt.id) == 'Shirt'

    def test_inactive_or_missing_price_is_none(self, mens_shirt):
        PricingModel.objects.filter(clothing_item=mens_shirt, service_type='washing').update(is_active=False)
        resolver = CatalogPriceResolver()

        assert resolver.resolve_price(mens_shirt.id, ServiceType.WASHING, ClothingCategory.MEN) is None
        assert resolver.resolve_price(mens_shirt.id, ServiceType.IRONING, ClothingCategory.WOMEN) is None

    def test_unknown_item(self, seeded_catalog):
        with pytest.raises(ClothingItemNotFoundError):
            CatalogPriceResolver().get_item_display_name(uuid4())


@pytest.mark.django_db
class TestCatalogApi:

    def test_items_are_public_and_sorted(self, api_client, seeded_catalog):
        response = api_client.get(f'{CATALOG_URL}clothing-items/', {'category': 'women'})

        assert response.status_code == 200
        names = [row['name']['en'] for row in response.data]
        assert names == sorted(names)
        assert len(names) == 6
        assert {row['category'] for row in response.data} == {'women'}

    def test_unknown_category_filter(self, api_client, seeded_catalog):
        response = api_client.get(f'{CATALOG_URL}clothing-items/', {'category': 'pets'})
        assert response.status_code == 400

    def test_item_detail_not_found(self, api_client, seeded_catalog):
        response = api_client.get(f'{CATALOG_URL}clothing-items/{uuid4()}/')
        assert response.status_code == 404

    def test_admin_creates_and_updates_item(self, admin_client):
        response = admin_client.post(
            f'{CATALOG_URL}clothing-items/',
            {'name': {'en': 'Lungi', 'bn': 'লুঙ্গি'}, 'category': 'men', 'available_services': ['washing']},
            format='json',
        )
        assert response.status_code == 201
        item_id = response.data['id']

        response = admin_client.patch(
            f'{CATALOG_URL}clothing-items/{item_id}/', {'is_active': False}, format='json',
        )
        assert response.status_code == 200
        assert response.data['is_active'] is False
        assert response.data['name']['en'] == 'Lungi'

    def test_customers_cannot_create_items(self, customer_client):
        response = customer_client.post(
            f'{CATALOG_URL}clothing-items/',
            {'name': {'en': 'Lungi', 'bn': 'লুঙ্গি'}, 'category': 'men'},
            format='json',
        )
        assert response.status_code == 403

    def test_duplicate_service_type_conflicts(self, admin_client, seeded_catalog):
        response = admin_client.post(
            f'{CATALOG_URL}services/',
            {'name': {'en': 'Washing', 'bn': 'ধোয়া'}, 'type': 'washing'},
            format='json',
        )
        assert response.status_code == 409

    def test_pricing_filters(self, api_client, seeded_catalog):
        response = api_client.get(f'{CATALOG_URL}pricing/', {'category': 'children', 'service_type': 'ironing'})

        assert response.status_code == 200
        assert len(response.data) == 4
        assert {row['service_type'] for row in response.data} == {'ironing'}

    def test_admin_upserts_price(self, admin_client, mens_shirt):
        response = admin_client.post(
            f'{CATALOG_URL}pricing/',
            {
                'clothing_item_id': str(mens_shirt.id),
                'service_type': 'washing',
                'category': 'men',
                'price': '45.00',
            },
            format='json',
        )

        assert response.status_code == 200
        assert response.data['price'] == '45.00'
        assert PricingModel.objects.filter(clothing_item=mens_shirt, service_type='washing').count() == 1
        assert CatalogPriceResolver().resolve_price(
            mens_shirt.id, ServiceType.WASHING, ClothingCategory.MEN,
        ) == Decimal('45')

    def test_seed_endpoint_is_admin_only(self, customer_client, admin_client):
        assert customer_client.post(f'{CATALOG_URL}seed/').status_code == 403

        response = admin_client.post(f'{CATALOG_URL}seed/')
        assert response.status_code == 200
        assert response.data['seeded'] is True
