"""
URL configuration for the LaundryBD backend.
"""
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from apps.users.interfaces.api.urls import auth_urlpatterns
from shared.interfaces.health_views import (
    HealthCheckView,
    LivenessCheckView,
    ReadinessCheckView,
)

urlpatterns = [
    path('admin/', admin.site.urls),

    # API v1
    path('api/v1/auth/', include(auth_urlpatterns)),
    path('api/v1/users/', include('apps.users.interfaces.api.urls')),
    path('api/v1/catalog/', include('apps.catalog.interfaces.api.urls')),
    path('api/v1/orders/', include('apps.orders.interfaces.api.urls')),

    # Schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    # Health
    path('health/', HealthCheckView.as_view(), name='health'),
    path('health/ready/', ReadinessCheckView.as_view(), name='health-ready'),
    path('health/live/', LivenessCheckView.as_view(), name='health-live'),
]
