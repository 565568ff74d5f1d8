"""
Order serializers.
"""
from rest_framework import serializers

from apps.catalog.domain.value_objects import ClothingCategory, ServiceType
from ...domain.services.pricing_calculator import MAX_LINE_QUANTITY
from ...domain.value_objects.order_status import OrderStatus


class AddressSerializer(serializers.Serializer):
    """Serializer for pickup and delivery addresses."""
    full_address = serializers.CharField(max_length=500)
    landmark = serializers.CharField(max_length=200, required=False, allow_blank=True, default="")
    contact_phone = serializers.CharField(max_length=20, required=False, allow_blank=True, default="")


class OrderLineSerializer(serializers.Serializer):
    """Serializer for a requested order line."""
    clothing_item_id = serializers.UUIDField()
    category = serializers.ChoiceField(choices=[category.value for category in ClothingCategory])
    services = serializers.ListField(
        child=serializers.ChoiceField(choices=[service.value for service in ServiceType]),
        allow_empty=False,
    )
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_LINE_QUANTITY, default=1)


class OrderItemSerializer(serializers.Serializer):
    """Serializer for order item output."""
    clothing_item_id = serializers.UUIDField(read_only=True)
    clothing_item_name = serializers.CharField(read_only=True)
    category = serializers.CharField(read_only=True)
    services = serializers.ListField(child=serializers.CharField(), read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class OrderPricingSerializer(serializers.Serializer):
    items_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    delivery_charge = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    grand_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class StatusHistoryEntrySerializer(serializers.Serializer):
    status = serializers.CharField(read_only=True)
    timestamp = serializers.DateTimeField(read_only=True)
    note = serializers.CharField(read_only=True)
    updated_by = serializers.UUIDField(read_only=True)


class OrderSerializer(serializers.Serializer):
    """Serializer for order output."""
    id = serializers.UUIDField(read_only=True)
    customer_id = serializers.UUIDField(read_only=True)
    delivery_person_id = serializers.UUIDField(read_only=True, allow_null=True)
    status = serializers.CharField(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    pricing = OrderPricingSerializer(read_only=True)
    status_history = StatusHistoryEntrySerializer(many=True, read_only=True)
    pickup_address = AddressSerializer(read_only=True)
    delivery_address = AddressSerializer(read_only=True)
    notes = serializers.CharField(read_only=True)
    scheduled_pickup_time = serializers.DateTimeField(read_only=True, allow_null=True)
    estimated_delivery_time = serializers.DateTimeField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class OrderCreateSerializer(serializers.Serializer):
    """Serializer for creating an order."""
    items = OrderLineSerializer(many=True, allow_empty=False)
    pickup_address = AddressSerializer()
    delivery_address = AddressSerializer(required=False)
    notes = serializers.CharField(required=False, allow_blank=True, default="")
    scheduled_pickup_time = serializers.DateTimeField(required=False)


class OrderStatusUpdateSerializer(serializers.Serializer):
    """Serializer for a status change request."""
    status = serializers.ChoiceField(choices=[status.value for status in OrderStatus])
    note = serializers.CharField(required=False, allow_blank=True, default="")


class AssignDeliverySerializer(serializers.Serializer):
    """Serializer for a courier assignment request."""
    delivery_person_id = serializers.UUIDField()
    estimated_delivery_time = serializers.DateTimeField(allow_null=True, default=None)


class OrderPageSerializer(serializers.Serializer):
    orders = OrderSerializer(many=True, read_only=True)
    total = serializers.IntegerField(read_only=True)
    page = serializers.IntegerField(read_only=True)
    total_pages = serializers.IntegerField(read_only=True)


class OrderStatsSerializer(serializers.Serializer):
    """Fleet-wide dashboard numbers."""
    total_orders = serializers.IntegerField(read_only=True)
    pending_orders = serializers.IntegerField(read_only=True)
    in_progress_orders = serializers.IntegerField(read_only=True)
    completed_orders = serializers.IntegerField(read_only=True)
    cancelled_orders = serializers.IntegerField(read_only=True)
    today_orders = serializers.IntegerField(read_only=True)
    today_revenue = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)


class DeliveryStatsSerializer(serializers.Serializer):
    """Per-courier performance numbers."""
    total_deliveries = serializers.IntegerField(read_only=True)
    completed_deliveries = serializers.IntegerField(read_only=True)
    cancelled_deliveries = serializers.IntegerField(read_only=True)
    today_deliveries = serializers.IntegerField(read_only=True)
    this_week_deliveries = serializers.IntegerField(read_only=True)
    this_month_deliveries = serializers.IntegerField(read_only=True)
    total_revenue = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    average_delivery_time = serializers.FloatField(read_only=True)


class OrderListQuerySerializer(serializers.Serializer):
    """Query parameters of the admin order listing."""
    status = serializers.ChoiceField(
        choices=[status.value for status in OrderStatus], required=False,
    )
    page = serializers.IntegerField(min_value=1, required=False, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=100, required=False, default=20)
