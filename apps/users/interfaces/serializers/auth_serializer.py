"""
Authentication serializers.
"""
from rest_framework import serializers

from ...domain.value_objects.user_role import UserRole
from .user_serializer import UserSerializer


class RequestOtpSerializer(serializers.Serializer):
    """Serializer for OTP request."""
    phone_number = serializers.CharField(max_length=20)


class OtpIssuedSerializer(serializers.Serializer):
    """Serializer for OTP request response."""
    message = serializers.CharField(read_only=True)
    expires_in_seconds = serializers.IntegerField(read_only=True)
    otp_code = serializers.CharField(read_only=True, allow_null=True)


class VerifyOtpSerializer(serializers.Serializer):
    """Serializer for OTP verification."""
    phone_number = serializers.CharField(max_length=20)
    otp_code = serializers.RegexField(r'^\d{6}$')


class CompleteSignupSerializer(serializers.Serializer):
    """Serializer for signup completion."""
    phone_number = serializers.CharField(max_length=20)
    full_name = serializers.CharField(min_length=2, max_length=150)
    address = serializers.CharField(min_length=5)
    role = serializers.ChoiceField(
        choices=[role.value for role in UserRole.self_assignable()],
        required=False,
    )


class TokenSerializer(serializers.Serializer):
    """Serializer for token response."""
    access_token = serializers.CharField(read_only=True)
    refresh_token = serializers.CharField(read_only=True)
    token_type = serializers.CharField(read_only=True, default="Bearer")


class AuthResultSerializer(serializers.Serializer):
    """Serializer for a successful sign-in."""
    tokens = TokenSerializer(read_only=True)
    user = UserSerializer(read_only=True)
    is_new_user = serializers.BooleanField(read_only=True)
