"""
Laundry service repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.laundry_service import LaundryService
from ..value_objects.service_type import ServiceType


class LaundryServiceRepository(ABC):
    """Abstract repository for LaundryService."""

    @abstractmethod
    def save(self, service: LaundryService) -> LaundryService:
        pass

    @abstractmethod
    def find_by_type(self, service_type: ServiceType) -> Optional[LaundryService]:
        pass

    @abstractmethod
    def find_active(self) -> List[LaundryService]:
        pass
