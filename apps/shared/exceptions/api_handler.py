"""
DRF exception handler: business exceptions -> HTTP responses.

DAL (Django errors) -> AppError subclasses -> this handler -> JSON body of
the shape ``{error, error_code, message, timestamp, ...}``.

Permission errors are rendered with a fixed message so that a denied
request never reveals whether the resource exists or which tenant owns it.
"""

import logging
import traceback
from datetime import datetime
from datetime import timezone

from django.conf import settings
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.shared.exceptions import AppError
from apps.shared.exceptions import AuthenticationError
from apps.shared.exceptions import ConflictError
from apps.shared.exceptions import PermissionError
from apps.shared.exceptions import ResourceNotFoundError
from apps.shared.exceptions import ServiceUnavailableError
from apps.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

FORBIDDEN_MESSAGE = 'You do not have access to this resource'

# Checked in order, first match wins: (exception, title, status, log level)
ERROR_TABLE = (
    (ResourceNotFoundError, 'Resource Not Found', status.HTTP_404_NOT_FOUND, logging.INFO),
    (ConflictError, 'Conflict', status.HTTP_409_CONFLICT, logging.INFO),
    (ValidationError, 'Validation Error', status.HTTP_400_BAD_REQUEST, logging.INFO),
    (PermissionError, 'Permission Denied', status.HTTP_403_FORBIDDEN, logging.WARNING),
    (AuthenticationError, 'Authentication Failed', status.HTTP_401_UNAUTHORIZED, logging.WARNING),
    (ServiceUnavailableError, 'Service Unavailable', status.HTTP_503_SERVICE_UNAVAILABLE, logging.ERROR),
    (AppError, 'Application Error', status.HTTP_400_BAD_REQUEST, logging.ERROR),
)


def custom_exception_handler(exc, context):
    """
    Called by DRF for every exception raised in an API view.

    DRF's own exceptions (serializer errors, NotAuthenticated, throttling)
    keep DRF's body and gain ``error_code`` and ``timestamp``.
    """
    request_info = _request_info(context.get('request'), context.get('view'))

    response = exception_handler(exc, context)
    if response is not None:
        logger.info(f'DRF exception in API: {type(exc).__name__}: {exc!s} | Request: {request_info}')
        if isinstance(response.data, dict):
            response.data['error_code'] = getattr(exc, 'default_code', type(exc).__name__)
            response.data['timestamp'] = _timestamp()
        return response

    if isinstance(exc, AppError):
        return _app_error_response(exc, request_info)

    if isinstance(exc, DjangoPermissionDenied):
        logger.warning(f'Django PermissionDenied reached the API handler | Request: {request_info}')
        return _error_response('Permission Denied', 'permission_denied', FORBIDDEN_MESSAGE, status.HTTP_403_FORBIDDEN)

    if isinstance(exc, Http404):
        logger.info(f'Http404 reached the API handler | Request: {request_info}')
        return _error_response(
            'Not Found', 'resource_not_found', 'The requested resource was not found', status.HTTP_404_NOT_FOUND
        )

    logger.error(
        f'UNHANDLED EXCEPTION in API: {type(exc).__name__}: {exc!s}\n'
        f'Request: {request_info}\n'
        f'Traceback: {traceback.format_exc()}'
    )
    details = {}
    if settings.DEBUG:
        details = {'exception_type': type(exc).__name__, 'traceback': traceback.format_exc().split('\n')}
    return _error_response(
        'Internal Server Error',
        'internal_server_error',
        'An unexpected error occurred. Please try again later.',
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        details=details,
    )


def _app_error_response(exc: AppError, request_info: dict) -> Response:
    title, status_code, level = next(
        (title, code, level) for exc_type, title, code, level in ERROR_TABLE if isinstance(exc, exc_type)
    )
    logger.log(
        level,
        f'Business exception in API: {type(exc).__name__}: {exc!s} | Request: {request_info}',
        extra={'context': exc.get_context()},
    )

    if isinstance(exc, PermissionError):
        return _error_response(title, 'permission_denied', FORBIDDEN_MESSAGE, status_code)

    if isinstance(exc, ServiceUnavailableError):
        return _error_response(
            title,
            exc.error_code,
            'A required service is temporarily unavailable, please retry',
            status_code,
            retryable=True,
        )

    extra = {}
    if isinstance(exc, ConflictError):
        extra['details'] = {'field': exc.get_context().get('field')}
    if isinstance(exc, ValidationError) and exc.field_errors:
        extra['field_errors'] = exc.field_errors

    response = _error_response(title, exc.error_code, str(exc), status_code, **extra)
    if isinstance(exc, AuthenticationError):
        response['WWW-Authenticate'] = 'Bearer'
    return response


def _error_response(title: str, error_code: str, message: str, status_code: int, **extra) -> Response:
    body = {
        'error': title,
        'error_code': error_code,
        'message': message,
        'timestamp': _timestamp(),
        **extra,
    }
    return Response(body, status=status_code)


def _request_info(request, view) -> dict:
    if not request:
        return {'method': 'unknown', 'path': 'unknown', 'principal': 'unknown'}

    return {
        'method': getattr(request, 'method', 'unknown'),
        'path': getattr(request, 'path', 'unknown'),
        'principal': str(getattr(request, 'user', 'unknown')),
        'view': f'{view.__class__.__module__}.{view.__class__.__name__}' if view else 'unknown',
    }


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')
