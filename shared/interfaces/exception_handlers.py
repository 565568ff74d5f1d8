"""
Custom exception handlers for DRF.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    PermissionDeniedError,
    ConflictError,
    InvalidOperationError,
)

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if isinstance(exc, DomainException):
        view = context.get('view')
        logger.warning(
            "%s rejected by %s: %s",
            exc.code,
            view.__class__.__name__ if view else 'unknown view',
            exc.message,
        )

    # Handle domain exceptions
    if isinstance(exc, EntityNotFoundError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
                'entity': exc.entity_name,
                'entity_id': exc.entity_id,
            },
            status=status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, PermissionDeniedError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
            },
            status=status.HTTP_403_FORBIDDEN,
        )

    if isinstance(exc, ValidationError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
                'field': exc.field,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, ConflictError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, InvalidOperationError):
        body = {
            'error': exc.message,
            'code': exc.code,
            'operation': exc.operation,
            'state': exc.state,
        }
        # Status transitions carry both ends of the rejected move.
        for attr in ('from_status', 'to_status'):
            if hasattr(exc, attr):
                body[attr] = getattr(exc, attr)
        return Response(body, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, DomainException):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    return response
