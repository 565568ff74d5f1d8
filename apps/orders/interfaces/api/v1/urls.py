"""
Orders API v1 URLs.
"""
from django.urls import path

from .views import (
    AssignDeliveryPersonView,
    AssignedOrdersView,
    DeliveryHistoryView,
    DeliveryStatsView,
    MyOrdersView,
    OrderDetailView,
    OrderListCreateView,
    OrderStatsView,
    OrderStatusView,
    UnassignedOrdersView,
)

urlpatterns = [
    path('', OrderListCreateView.as_view(), name='order-list-create'),
    path('my/', MyOrdersView.as_view(), name='order-my'),
    path('assigned/', AssignedOrdersView.as_view(), name='order-assigned'),
    path('unassigned/', UnassignedOrdersView.as_view(), name='order-unassigned'),
    path('stats/', OrderStatsView.as_view(), name='order-stats'),

    # Delivery person
    path('delivery/history/', DeliveryHistoryView.as_view(), name='delivery-history'),
    path('delivery/stats/', DeliveryStatsView.as_view(), name='delivery-stats'),

    path('<uuid:order_id>/', OrderDetailView.as_view(), name='order-detail'),
    path('<uuid:order_id>/status/', OrderStatusView.as_view(), name='order-status'),
    path('<uuid:order_id>/assign/', AssignDeliveryPersonView.as_view(), name='order-assign'),
]
