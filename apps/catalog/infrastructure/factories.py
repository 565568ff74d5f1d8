"""
Wiring of catalog use cases to their Django repositories.
"""
from ..application.use_cases import SeedCatalogUseCase
from .repositories import (
    DjangoClothingItemRepository,
    DjangoLaundryServiceRepository,
    DjangoPricingRepository,
)


def build_seed_use_case() -> SeedCatalogUseCase:
    return SeedCatalogUseCase(
        item_repository=DjangoClothingItemRepository(),
        service_repository=DjangoLaundryServiceRepository(),
        pricing_repository=DjangoPricingRepository(),
    )
