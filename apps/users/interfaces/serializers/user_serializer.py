"""
User serializers.
"""
from rest_framework import serializers


class UserSerializer(serializers.Serializer):
    """Serializer for user output."""
    id = serializers.UUIDField(read_only=True)
    phone_number = serializers.CharField(read_only=True)
    full_name = serializers.CharField(read_only=True)
    address = serializers.CharField(read_only=True)
    role = serializers.CharField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    is_verified = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class UserUpdateSerializer(serializers.Serializer):
    """Serializer for user update."""
    full_name = serializers.CharField(min_length=2, max_length=150, required=False)
    address = serializers.CharField(min_length=5, required=False)
