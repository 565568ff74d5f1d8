"""
Seed catalog use case.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal

from django.db import transaction

from shared.application import UseCase, UseCaseResult
from ...domain.entities.clothing_item import ClothingItem
from ...domain.entities.laundry_service import LaundryService
from ...domain.entities.pricing_entry import PricingEntry
from ...domain.events.catalog_seeded import CatalogSeeded
from ...domain.repositories.clothing_item_repository import ClothingItemRepository
from ...domain.repositories.laundry_service_repository import LaundryServiceRepository
from ...domain.repositories.pricing_repository import PricingRepository
from ...domain.value_objects.clothing_category import ClothingCategory
from ...domain.value_objects.localized_name import LocalizedName
from ...domain.value_objects.service_type import ServiceType
from ..dtos.catalog_dto import SeedResultDTO

logger = logging.getLogger(__name__)

MEN = ClothingCategory.MEN
WOMEN = ClothingCategory.WOMEN
CHILDREN = ClothingCategory.CHILDREN

DEFAULT_SERVICES = [
    (ServiceType.WASHING, 'Washing', 'ধোয়া', 'Professional machine washing', 'washing-machine'),
    (ServiceType.IRONING, 'Ironing', 'ইস্ত্রি', 'Steam ironing service', 'iron'),
]

DEFAULT_ITEMS = [
    ('Shirt', 'শার্ট', MEN, 'shirt'),
    ('Pant', 'প্যান্ট', MEN, 'pants'),
    ('T-Shirt', 'টি-শার্ট', MEN, 'tshirt'),
    ('Suit', 'স্যুট', MEN, 'suit'),
    ('Panjabi', 'পাঞ্জাবি', MEN, 'panjabi'),
    ('Jacket', 'জ্যাকেট', MEN, 'jacket'),
    ('Shirt', 'শার্ট', WOMEN, 'shirt'),
    ('Pant', 'প্যান্ট', WOMEN, 'pants'),
    ('Kameez', 'কামিজ', WOMEN, 'kameez'),
    ('Saree', 'শাড়ি', WOMEN, 'saree'),
    ('Salwar', 'সালোয়ার', WOMEN, 'salwar'),
    ('Orna', 'ওড়না', WOMEN, 'orna'),
    ('Shirt', 'শার্ট', CHILDREN, 'shirt'),
    ('Pant', 'প্যান্ট', CHILDREN, 'pants'),
    ('Dress', 'ড্রেস', CHILDREN, 'dress'),
    ('T-Shirt', 'টি-শার্ট', CHILDREN, 'tshirt'),
]

# BDT (washing, ironing) per item name and category.
DEFAULT_PRICES = {
    'Shirt': {MEN: (40, 25), WOMEN: (40, 25), CHILDREN: (30, 20)},
    'Pant': {MEN: (50, 30), WOMEN: (50, 30), CHILDREN: (35, 25)},
    'T-Shirt': {MEN: (35, 20), WOMEN: (35, 20), CHILDREN: (25, 15)},
    'Suit': {MEN: (150, 80), WOMEN: (150, 80), CHILDREN: (100, 60)},
    'Panjabi': {MEN: (60, 40), WOMEN: (60, 40), CHILDREN: (45, 30)},
    'Jacket': {MEN: (100, 50), WOMEN: (100, 50), CHILDREN: (70, 40)},
    'Kameez': {MEN: (50, 30), WOMEN: (50, 30), CHILDREN: (35, 25)},
    'Saree': {MEN: (80, 50), WOMEN: (80, 50), CHILDREN: (60, 40)},
    'Salwar': {MEN: (45, 30), WOMEN: (45, 30), CHILDREN: (35, 25)},
    'Orna': {MEN: (30, 20), WOMEN: (30, 20), CHILDREN: (25, 15)},
    'Dress': {MEN: (60, 35), WOMEN: (60, 35), CHILDREN: (45, 25)},
}


@dataclass
class SeedCatalogUseCase(UseCase[None, SeedResultDTO]):
    """Load the default services, clothing items and price table once."""

    item_repository: ClothingItemRepository
    service_repository: LaundryServiceRepository
    pricing_repository: PricingRepository

    def execute(self, input_dto=None) -> UseCaseResult[SeedResultDTO]:
        if self.item_repository.count() > 0:
            logger.info("Catalog already seeded, skipping")
            return UseCaseResult.ok(
                SeedResultDTO(seeded=False, skipped_reason="Catalog already contains clothing items")
            )

        services = items = prices = 0
        with transaction.atomic():
            for service_type, name_en, name_bn, description, icon in DEFAULT_SERVICES:
                if self.service_repository.find_by_type(service_type) is not None:
                    continue
                self.service_repository.save(
                    LaundryService(
                        name=LocalizedName(en=name_en, bn=name_bn),
                        service_type=service_type,
                        description=description,
                        icon=icon,
                    )
                )
                services += 1

            for name_en, name_bn, category, icon in DEFAULT_ITEMS:
                item = self.item_repository.save(
                    ClothingItem.create(name_en=name_en, name_bn=name_bn, category=category, icon=icon)
                )
                items += 1

                washing, ironing = DEFAULT_PRICES[name_en][category]
                for service_type, price in ((ServiceType.WASHING, washing), (ServiceType.IRONING, ironing)):
                    self.pricing_repository.save(
                        PricingEntry(
                            clothing_item_id=item.id,
                            service_type=service_type,
                            category=category,
                            price=Decimal(price),
                        )
                    )
                    prices += 1

        event = CatalogSeeded(services=services, clothing_items=items, pricing_entries=prices)
        logger.info(
            "%s: %d services, %d clothing items, %d prices",
            event.event_type, services, items, prices,
        )
        return UseCaseResult.ok(
            SeedResultDTO(seeded=True, services=services, clothing_items=items, pricing_entries=prices)
        )
