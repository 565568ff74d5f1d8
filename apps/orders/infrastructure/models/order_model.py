"""
Order Django ORM models.
"""
import uuid

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils import timezone

from ...domain.value_objects.order_status import OrderStatus


class OrderModel(models.Model):
    """Order model; items, history and addresses are embedded JSON documents."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='orders',
    )
    delivery_person = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='deliveries',
        null=True,
        blank=True,
    )
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices(),
        default=OrderStatus.REQUESTED.value,
        db_index=True,
    )

    items = models.JSONField(encoder=DjangoJSONEncoder)
    status_history = models.JSONField(encoder=DjangoJSONEncoder)
    pickup_address = models.JSONField(encoder=DjangoJSONEncoder)
    delivery_address = models.JSONField(encoder=DjangoJSONEncoder)

    items_total = models.DecimalField(max_digits=12, decimal_places=2)
    delivery_charge = models.DecimalField(max_digits=12, decimal_places=2)
    grand_total = models.DecimalField(max_digits=12, decimal_places=2)

    notes = models.TextField(blank=True)
    scheduled_pickup_time = models.DateTimeField(null=True, blank=True)
    estimated_delivery_time = models.DateTimeField(null=True, blank=True)

    version = models.PositiveIntegerField(default=1)

    # Written from the domain entity; updated_at of a DELIVERED order is its delivery time.
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['customer', '-created_at'], name='orders_customer_created_idx'),
            models.Index(fields=['delivery_person', 'status'], name='orders_courier_status_idx'),
        ]

    def __str__(self):
        return f"Order {self.id} ({self.status})"
