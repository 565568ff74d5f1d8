# Use cases
from .assign_delivery_person import AssignDeliveryPersonUseCase
from .create_order import CreateOrderUseCase, configured_delivery_charge
from .order_queries import (
    GetOrderUseCase,
    ListAllOrdersUseCase,
    ListAssignedOrdersUseCase,
    ListDeliveryHistoryUseCase,
    ListMyOrdersUseCase,
    ListUnassignedOrdersUseCase,
)
from .order_statistics import GetDeliveryStatsUseCase, GetOrderStatsUseCase
from .update_order_status import UpdateOrderStatusUseCase

__all__ = [
    'AssignDeliveryPersonUseCase',
    'CreateOrderUseCase',
    'configured_delivery_charge',
    'GetOrderUseCase',
    'ListAllOrdersUseCase',
    'ListAssignedOrdersUseCase',
    'ListDeliveryHistoryUseCase',
    'ListMyOrdersUseCase',
    'ListUnassignedOrdersUseCase',
    'GetDeliveryStatsUseCase',
    'GetOrderStatsUseCase',
    'UpdateOrderStatusUseCase',
]
