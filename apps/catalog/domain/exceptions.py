"""
Catalog domain exceptions.
"""
from shared.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)


class ClothingItemNotFoundError(EntityNotFoundError):
    """Raised when a clothing item is not found."""

    def __init__(self, identifier: str):
        super().__init__(entity_name="ClothingItem", entity_id=identifier, code="CLOTHING_ITEM_NOT_FOUND")
        self.identifier = identifier


class LaundryServiceNotFoundError(EntityNotFoundError):
    """Raised when a laundry service is not found."""

    def __init__(self, service_type: str):
        super().__init__(entity_name="LaundryService", entity_id=service_type, code="SERVICE_NOT_FOUND")
        self.service_type = service_type


class DuplicateServiceTypeError(ConflictError):
    """Raised when a service of the same type already exists."""

    def __init__(self, service_type: str):
        super().__init__(
            message=f"Service type '{service_type}' already exists",
            code="DUPLICATE_SERVICE_TYPE",
        )
        self.service_type = service_type


class InvalidPriceError(ValidationError):
    """Raised when a pricing entry carries a negative price."""

    def __init__(self, price):
        super().__init__(message=f"Price must be non-negative, got {price}", field="price")
        self.price = price
