# Serializers
from .order_serializer import (
    AddressSerializer,
    AssignDeliverySerializer,
    DeliveryStatsSerializer,
    OrderCreateSerializer,
    OrderLineSerializer,
    OrderListQuerySerializer,
    OrderPageSerializer,
    OrderSerializer,
    OrderStatsSerializer,
    OrderStatusUpdateSerializer,
)

__all__ = [
    'AddressSerializer',
    'AssignDeliverySerializer',
    'DeliveryStatsSerializer',
    'OrderCreateSerializer',
    'OrderLineSerializer',
    'OrderListQuerySerializer',
    'OrderPageSerializer',
    'OrderSerializer',
    'OrderStatsSerializer',
    'OrderStatusUpdateSerializer',
]
