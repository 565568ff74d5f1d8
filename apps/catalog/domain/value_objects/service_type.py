"""
Service type value object.
"""
from enum import Enum


class ServiceType(str, Enum):
    """Laundry services a garment can be booked for."""
    WASHING = 'washing'
    IRONING = 'ironing'

    @classmethod
    def choices(cls):
        return [(service.value, service.name.title()) for service in cls]
