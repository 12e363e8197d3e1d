"""
API exception handler.

Turns domain exceptions and database integrity errors into JSON responses;
everything else goes through DRF's default handler.
"""

import logging

from django.db import IntegrityError
from django.db.models.deletion import ProtectedError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from domain.shared.exceptions import (
    BusinessRuleViolationException,
    CircularReferenceException,
    DomainException,
    EntityAlreadyExistsException,
    EntityNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)

DOMAIN_STATUS_CODES = (
    (EntityNotFoundException, status.HTTP_404_NOT_FOUND),
    (EntityAlreadyExistsException, status.HTTP_409_CONFLICT),
    (CircularReferenceException, status.HTTP_409_CONFLICT),
    (BusinessRuleViolationException, status.HTTP_409_CONFLICT),
    (ValidationException, status.HTTP_400_BAD_REQUEST),
)


def domain_status_code(exc: DomainException) -> int:
    for exception_class, status_code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exception_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def custom_exception_handler(exc, context):
    """
    Map domain and database errors to HTTP responses.

    Domain exceptions answer `{"detail": message, "error": code, ...details}`.
    """
    if isinstance(exc, DomainException):
        status_code = domain_status_code(exc)
        logger.warning("%s: %s", exc.code, exc.message)
        set_rollback()
        return Response(
            {'detail': exc.message, 'error': exc.code, **exc.details},
            status=status_code,
        )

    if isinstance(exc, ProtectedError):
        protected = [str(o) for o in list(exc.protected_objects)[:5]]
        logger.warning("Deletion blocked by protected references: %s", protected)
        set_rollback()
        return Response(
            {
                'detail': 'Cannot delete this record: it is referenced by other records.',
                'error': 'protected_error',
                'protected_objects_sample': protected,
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, IntegrityError):
        logger.warning("Integrity error: %s", exc)
        set_rollback()
        return Response(
            {
                'detail': 'Data integrity violation (duplicate or referenced record).',
                'error': 'integrity_error',
            },
            status=status.HTTP_409_CONFLICT,
        )

    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            "Unhandled error in %s: %s",
            view.__class__.__name__ if view else 'unknown view',
            exc,
            exc_info=exc,
        )

    return response
