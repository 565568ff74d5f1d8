"""
Catalog admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.catalog_models import (
    ClothingItemModel,
    LaundryServiceModel,
    PricingModel,
)


class PricingInline(admin.TabularInline):
    model = PricingModel
    extra = 0


@admin.register(ClothingItemModel)
class ClothingItemAdmin(admin.ModelAdmin):
    """Admin configuration for ClothingItem model."""
    list_display = ('name_en', 'name_bn', 'category', 'is_active', 'updated_at')
    list_filter = ('category', 'is_active')
    search_fields = ('name_en', 'name_bn')
    inlines = [PricingInline]


@admin.register(LaundryServiceModel)
class LaundryServiceAdmin(admin.ModelAdmin):
    """Admin configuration for LaundryService model."""
    list_display = ('name_en', 'service_type', 'is_active')


@admin.register(PricingModel)
class PricingAdmin(admin.ModelAdmin):
    """Admin configuration for Pricing model."""
    list_display = ('clothing_item', 'service_type', 'category', 'price', 'is_active')
    list_filter = ('service_type', 'category', 'is_active')
    search_fields = ('clothing_item__name_en',)
