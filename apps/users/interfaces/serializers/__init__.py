# Serializers
from .user_serializer import UserSerializer, UserUpdateSerializer
from .auth_serializer import (
    AuthResultSerializer,
    CompleteSignupSerializer,
    OtpIssuedSerializer,
    RequestOtpSerializer,
    TokenSerializer,
    VerifyOtpSerializer,
)

__all__ = [
    'UserSerializer',
    'UserUpdateSerializer',
    'AuthResultSerializer',
    'CompleteSignupSerializer',
    'OtpIssuedSerializer',
    'RequestOtpSerializer',
    'TokenSerializer',
    'VerifyOtpSerializer',
]
