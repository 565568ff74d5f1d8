"""
Catalog serializers.
"""
from rest_framework import serializers

from ...domain.value_objects.clothing_category import ClothingCategory
from ...domain.value_objects.service_type import ServiceType

CATEGORY_CHOICES = [category.value for category in ClothingCategory]
SERVICE_CHOICES = [service.value for service in ServiceType]


class LocalizedNameSerializer(serializers.Serializer):
    """English and Bangla names."""
    en = serializers.CharField(max_length=100)
    bn = serializers.CharField(max_length=100)


class ClothingItemSerializer(serializers.Serializer):
    """Serializer for clothing item output."""
    id = serializers.UUIDField(read_only=True)
    name = LocalizedNameSerializer(read_only=True)
    category = serializers.CharField(read_only=True)
    icon = serializers.CharField(read_only=True)
    available_services = serializers.ListField(child=serializers.CharField(), read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class ClothingItemCreateSerializer(serializers.Serializer):
    """Serializer for clothing item creation."""
    name = LocalizedNameSerializer()
    category = serializers.ChoiceField(choices=CATEGORY_CHOICES)
    icon = serializers.CharField(max_length=50, required=False, allow_blank=True, default="")
    available_services = serializers.ListField(
        child=serializers.ChoiceField(choices=SERVICE_CHOICES),
        required=False,
        allow_empty=False,
    )
    is_active = serializers.BooleanField(required=False, default=True)


class ClothingItemUpdateSerializer(serializers.Serializer):
    """Serializer for clothing item update."""
    name = LocalizedNameSerializer(required=False)
    category = serializers.ChoiceField(choices=CATEGORY_CHOICES, required=False)
    icon = serializers.CharField(max_length=50, required=False, allow_blank=True)
    available_services = serializers.ListField(
        child=serializers.ChoiceField(choices=SERVICE_CHOICES),
        required=False,
        allow_empty=False,
    )
    is_active = serializers.BooleanField(required=False)


class LaundryServiceSerializer(serializers.Serializer):
    """Serializer for laundry service output."""
    id = serializers.UUIDField(read_only=True)
    name = LocalizedNameSerializer(read_only=True)
    type = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    icon = serializers.CharField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)


class LaundryServiceCreateSerializer(serializers.Serializer):
    """Serializer for laundry service creation."""
    name = LocalizedNameSerializer()
    type = serializers.ChoiceField(choices=SERVICE_CHOICES)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    icon = serializers.CharField(max_length=50, required=False, allow_blank=True, default="")
    is_active = serializers.BooleanField(required=False, default=True)


class PricingSerializer(serializers.Serializer):
    """Serializer for pricing output."""
    id = serializers.UUIDField(read_only=True)
    clothing_item_id = serializers.UUIDField(read_only=True)
    clothing_item = ClothingItemSerializer(read_only=True, allow_null=True)
    service_type = serializers.CharField(read_only=True)
    category = serializers.CharField(read_only=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    is_active = serializers.BooleanField(read_only=True)


class PricingUpsertSerializer(serializers.Serializer):
    """Serializer for creating or updating a price."""
    clothing_item_id = serializers.UUIDField()
    service_type = serializers.ChoiceField(choices=SERVICE_CHOICES)
    category = serializers.ChoiceField(choices=CATEGORY_CHOICES)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    is_active = serializers.BooleanField(required=False, default=True)


class SeedResultSerializer(serializers.Serializer):
    """Serializer for seed outcome."""
    seeded = serializers.BooleanField(read_only=True)
    services = serializers.IntegerField(read_only=True)
    clothing_items = serializers.IntegerField(read_only=True)
    pricing_entries = serializers.IntegerField(read_only=True)
    skipped_reason = serializers.CharField(read_only=True)
