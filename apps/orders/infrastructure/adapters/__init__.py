from .catalog_price_resolver import CatalogPriceResolver
from .user_directory import DjangoUserDirectory

__all__ = ['CatalogPriceResolver', 'DjangoUserDirectory']
