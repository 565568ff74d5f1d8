"""
Laundry service entity.
"""
from dataclasses import dataclass

from shared.domain import BaseEntity
from ..value_objects.localized_name import LocalizedName
from ..value_objects.service_type import ServiceType


@dataclass(eq=False)
class LaundryService(BaseEntity):
    """A service offered by the laundry (one per service type)."""
    name: LocalizedName
    service_type: ServiceType
    description: str = ""
    icon: str = ""
    is_active: bool = True
