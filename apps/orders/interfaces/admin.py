"""
Orders admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.order_model import OrderModel


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """Read-mostly view of orders; lifecycle changes go through the API."""
    list_display = ('id', 'customer', 'delivery_person', 'status', 'grand_total', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('id', 'customer__phone_number', 'delivery_person__phone_number')
    ordering = ('-created_at',)
    raw_id_fields = ('customer', 'delivery_person')
    readonly_fields = (
        'id', 'status', 'items', 'status_history',
        'items_total', 'delivery_charge', 'grand_total',
        'version', 'created_at', 'updated_at',
    )
