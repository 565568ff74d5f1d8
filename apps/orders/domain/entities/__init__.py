# Domain entities
from .order import Order, ORDER_PLACED_NOTE
from .order_item import OrderItem

__all__ = ['Order', 'ORDER_PLACED_NOTE', 'OrderItem']
