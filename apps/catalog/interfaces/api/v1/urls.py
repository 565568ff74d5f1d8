"""
Catalog API v1 URLs.
"""
from django.urls import path

from .views import (
    ClothingItemDetailView,
    ClothingItemListCreateView,
    LaundryServiceListCreateView,
    PricingView,
    SeedCatalogView,
)

urlpatterns = [
    path('clothing-items/', ClothingItemListCreateView.as_view(), name='clothing-item-list'),
    path('clothing-items/<uuid:item_id>/', ClothingItemDetailView.as_view(), name='clothing-item-detail'),
    path('services/', LaundryServiceListCreateView.as_view(), name='laundry-service-list'),
    path('pricing/', PricingView.as_view(), name='pricing'),
    path('seed/', SeedCatalogView.as_view(), name='catalog-seed'),
]
