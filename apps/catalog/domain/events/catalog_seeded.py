"""
Catalog seeded domain event.
"""
from dataclasses import dataclass

from shared.domain import DomainEvent


@dataclass(frozen=True)
class CatalogSeeded(DomainEvent):
    """Event raised when the default catalog has been loaded."""
    services: int
    clothing_items: int
    pricing_entries: int
