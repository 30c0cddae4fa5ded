"""
DRF exception handler producing the uniform failure envelope.

Configured as ``REST_FRAMEWORK['EXCEPTION_HANDLER']``. Every failure,
whether a domain ``ServiceError``, a DRF validation error or a database
exception, leaves the API as::

    {"success": false, "message": "...", "code": "...", "errors": {...}}

with a matching HTTP status code.
"""

import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .exceptions import ServiceError, StorageError
from .responses import failure_body

logger = logging.getLogger(__name__)


def _first_message(detail):
    """Return the first human readable message from a DRF error detail."""
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
    if isinstance(detail, (list, tuple)) and detail:
        return _first_message(detail[0])
    return str(detail)


def ledger_exception_handler(exc, context):
    view = context.get('view')
    view_name = view.__class__.__name__ if view else 'unknown view'

    if isinstance(exc, ServiceError):
        return Response(
            failure_body(exc.message, exc.code),
            status=exc.status_code,
        )

    if isinstance(exc, DatabaseError):
        logger.exception("Storage failure in %s", view_name)
        error = StorageError()
        return Response(
            failure_body(error.message, error.code),
            status=error.status_code,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.data = failure_body(
            _first_message(exc.detail),
            'invalid_input',
            errors=exc.detail,
        )
        response.status_code = status.HTTP_400_BAD_REQUEST
    else:
        response.data = failure_body(
            _first_message(response.data.get('detail', response.data)),
            getattr(exc, 'default_code', 'error'),
        )
    return response
