"""
Auth API v1 URLs.
"""
from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import (
    CompleteSignupView,
    RequestOtpView,
    VerifyOtpView,
)

urlpatterns = [
    path('otp/request/', RequestOtpView.as_view(), name='auth-otp-request'),
    path('otp/verify/', VerifyOtpView.as_view(), name='auth-otp-verify'),
    path('signup/complete/', CompleteSignupView.as_view(), name='auth-signup-complete'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),
]
