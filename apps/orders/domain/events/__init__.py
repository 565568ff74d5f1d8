# Domain events
from .delivery_person_assigned import DeliveryPersonAssigned
from .order_placed import OrderPlaced
from .order_status_changed import OrderStatusChanged

__all__ = ['DeliveryPersonAssigned', 'OrderPlaced', 'OrderStatusChanged']
