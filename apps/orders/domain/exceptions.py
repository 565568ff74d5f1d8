"""
Order domain exceptions.
"""
from shared.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    InvalidOperationError,
    PermissionDeniedError,
    ValidationError,
)


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, identifier: str):
        super().__init__(entity_name="Order", entity_id=identifier, code="ORDER_NOT_FOUND")
        self.identifier = identifier


class OrderAccessDeniedError(PermissionDeniedError):
    """Raised when the caller has no role or ownership relation to the order."""

    def __init__(self, message: str = "Access denied to this order"):
        super().__init__(message=message, code="ORDER_ACCESS_DENIED")


class InvalidStatusTransitionError(InvalidOperationError):
    """Raised when the transition table rejects a status change."""

    def __init__(self, from_status: str, to_status: str):
        super().__init__(
            message=f"Invalid status transition from {from_status} to {to_status}",
            operation="update_status",
            state=from_status,
            code="INVALID_STATUS_TRANSITION",
        )
        self.from_status = from_status
        self.to_status = to_status


class PricingUnavailableError(ValidationError):
    """Raised when a requested item/service/category combination has no active price."""

    def __init__(self, item_name: str, service_type: str, category: str):
        super().__init__(
            message=f"Pricing not found for {item_name} - {service_type} ({category})",
            field="items",
            code="PRICING_UNAVAILABLE",
        )
        self.item_name = item_name
        self.service_type = service_type
        self.category = category


class NotADeliveryPersonError(ValidationError):
    """Raised when an assignment target does not hold the delivery role."""

    def __init__(self, user_id: str):
        super().__init__(
            message=f"User '{user_id}' is not a delivery person",
            field="delivery_person_id",
            code="NOT_A_DELIVERY_PERSON",
        )
        self.user_id = user_id


class InvalidOrderError(ValidationError):
    """Raised when order data breaks an aggregate invariant."""

    def __init__(self, message: str, field: str = "order"):
        super().__init__(message=message, field=field, code="INVALID_ORDER")


class ConcurrentOrderUpdateError(ConflictError):
    """Raised when the order changed between read and write."""

    def __init__(self, order_id: str):
        super().__init__(
            message=f"Order '{order_id}' was modified concurrently, reload and retry",
            code="CONCURRENT_ORDER_UPDATE",
        )
        self.order_id = order_id
