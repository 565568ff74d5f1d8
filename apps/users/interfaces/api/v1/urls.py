"""
Users API v1 URLs.
"""
from django.urls import path

from .views import (
    DeliveryPersonnelView,
    UserListView,
    UserMeView,
)

urlpatterns = [
    path('me/', UserMeView.as_view(), name='user-me'),
    path('delivery-personnel/', DeliveryPersonnelView.as_view(), name='user-delivery-personnel'),
    path('', UserListView.as_view(), name='user-list'),
]
