"""
Catalog Django ORM models.
"""
import uuid

from django.core.validators import MinValueValidator
from django.db import models

from ...domain.value_objects.clothing_category import ClothingCategory
from ...domain.value_objects.service_type import ServiceType


def default_services():
    return [service.value for service in ServiceType]


class ClothingItemModel(models.Model):
    """Clothing item model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name_en = models.CharField(max_length=100)
    name_bn = models.CharField(max_length=100)
    category = models.CharField(max_length=20, choices=ClothingCategory.choices(), db_index=True)
    icon = models.CharField(max_length=50, blank=True)
    available_services = models.JSONField(default=default_services)
    is_active = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'clothing_items'
        ordering = ['category', 'name_en']

    def __str__(self):
        return f"{self.name_en} ({self.category})"


class LaundryServiceModel(models.Model):
    """Laundry service model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name_en = models.CharField(max_length=100)
    name_bn = models.CharField(max_length=100)
    service_type = models.CharField(max_length=20, choices=ServiceType.choices(), unique=True)
    description = models.TextField(blank=True)
    icon = models.CharField(max_length=50, blank=True)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'laundry_services'

    def __str__(self):
        return self.name_en


class PricingModel(models.Model):
    """Price of a service for a clothing item in a category."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    clothing_item = models.ForeignKey(
        ClothingItemModel,
        on_delete=models.CASCADE,
        related_name='prices',
    )
    service_type = models.CharField(max_length=20, choices=ServiceType.choices())
    category = models.CharField(max_length=20, choices=ClothingCategory.choices())
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'pricing'
        constraints = [
            models.UniqueConstraint(
                fields=['clothing_item', 'service_type', 'category'],
                name='unique_price_per_item_service_category',
            ),
        ]

    def __str__(self):
        return f"{self.clothing_item_id} {self.service_type}/{self.category}: {self.price}"
