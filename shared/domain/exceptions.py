"""
Domain exceptions.
"""


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, code: str = "ENTITY_NOT_FOUND"):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code=code
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message=message, code=code)
        self.field = field


class PermissionDeniedError(DomainException):
    """Raised when the caller lacks the role or ownership a operation requires."""

    def __init__(self, message: str, code: str = "PERMISSION_DENIED"):
        super().__init__(message=message, code=code)


class ConflictError(DomainException):
    """Raised when an operation collides with existing or concurrently changed state."""

    def __init__(self, message: str, code: str = "CONFLICT"):
        super().__init__(message=message, code=code)


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: str = None, state: str = None, code: str = "INVALID_OPERATION"):
        super().__init__(message=message, code=code)
        self.operation = operation
        self.state = state
