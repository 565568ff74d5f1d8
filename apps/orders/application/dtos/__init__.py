# DTOs
from .order_dto import (
    AddressDTO,
    AssignDeliveryPersonDTO,
    CreateOrderDTO,
    ListOrdersQuery,
    OrderDTO,
    OrderLineDTO,
    OrderPageDTO,
    UpdateOrderStatusDTO,
)

__all__ = [
    'AddressDTO',
    'AssignDeliveryPersonDTO',
    'CreateOrderDTO',
    'ListOrdersQuery',
    'OrderDTO',
    'OrderLineDTO',
    'OrderPageDTO',
    'UpdateOrderStatusDTO',
]
