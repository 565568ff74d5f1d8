"""
Laundry service use cases.
"""
from dataclasses import dataclass
from typing import List

from shared.application import UseCase, UseCaseResult, parse_enum
from ...domain.entities.laundry_service import LaundryService
from ...domain.exceptions import DuplicateServiceTypeError
from ...domain.repositories.laundry_service_repository import LaundryServiceRepository
from ...domain.value_objects.localized_name import LocalizedName
from ...domain.value_objects.service_type import ServiceType
from ..dtos.catalog_dto import LaundryServiceCreateDTO, LaundryServiceDTO


@dataclass
class ListLaundryServicesUseCase(UseCase[None, List[LaundryServiceDTO]]):
    """List active laundry services."""

    service_repository: LaundryServiceRepository

    def execute(self, input_dto=None) -> UseCaseResult[List[LaundryServiceDTO]]:
        services = self.service_repository.find_active()
        return UseCaseResult.ok([LaundryServiceDTO.from_entity(s) for s in services])


@dataclass
class CreateLaundryServiceUseCase(UseCase[LaundryServiceCreateDTO, LaundryServiceDTO]):
    """Register a new laundry service; one per service type."""

    service_repository: LaundryServiceRepository

    def execute(self, input_dto: LaundryServiceCreateDTO) -> UseCaseResult[LaundryServiceDTO]:
        service_type = parse_enum(ServiceType, input_dto.type, "type")
        if self.service_repository.find_by_type(service_type) is not None:
            raise DuplicateServiceTypeError(service_type.value)

        service = LaundryService(
            name=LocalizedName(en=input_dto.name.get('en', ''), bn=input_dto.name.get('bn', '')),
            service_type=service_type,
            description=input_dto.description,
            icon=input_dto.icon,
            is_active=input_dto.is_active,
        )
        saved = self.service_repository.save(service)
        return UseCaseResult.ok(LaundryServiceDTO.from_entity(saved))
