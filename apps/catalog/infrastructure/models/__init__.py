from .catalog_models import ClothingItemModel, LaundryServiceModel, PricingModel

__all__ = ['ClothingItemModel', 'LaundryServiceModel', 'PricingModel']
