# Domain services
from .order_access_policy import Actor, OrderAccessPolicy
from .order_statistics import DeliveryStats, OrderStats, StatsWindows, average_delivery_hours
from .pricing_calculator import (
    MAX_LINE_QUANTITY,
    PricedOrder,
    PriceResolver,
    PricingCalculator,
    PricingLine,
)
from .user_directory import UserDirectory

__all__ = [
    'Actor',
    'OrderAccessPolicy',
    'DeliveryStats',
    'OrderStats',
    'StatsWindows',
    'average_delivery_hours',
    'MAX_LINE_QUANTITY',
    'PricedOrder',
    'PriceResolver',
    'PricingCalculator',
    'PricingLine',
    'UserDirectory',
]
