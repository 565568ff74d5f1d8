# Domain events
from .catalog_seeded import CatalogSeeded
from .pricing_changed import PricingChanged

__all__ = ['CatalogSeeded', 'PricingChanged']
