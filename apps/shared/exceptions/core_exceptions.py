"""
Business exceptions raised by DALs and services.

None of these know about HTTP; ``api_handler`` maps each class to a status
code. DAL methods produce them through ``handle_db_errors``; services raise
them directly for rule violations.
"""

import logging

logger = logging.getLogger(__name__)


class AppError(Exception):
    """
    Root of every error a service may raise on purpose.

    ``error_code`` is the stable machine-readable identifier returned to
    clients; ``context`` is only logged.
    """

    def __init__(self, message: str, error_code: str = None, context: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def __str__(self) -> str:
        return self.message

    def get_context(self) -> dict:
        return self.context


class ResourceNotFoundError(AppError):
    """
    Raised when a requested resource doesn't exist.

    Examples:
    - Wedding not found by slug (or found but inactive)
    - User not found by ID

    HTTP Mapping: 404 NOT FOUND
    """
    pass


class ConflictError(AppError):
    """
    Raised when a write collides with a uniqueness rule.

    Examples:
    - Slug already taken
    - Email or admin username already registered
    - User already owns a wedding

    HTTP Mapping: 409 CONFLICT
    """
    pass


class ValidationError(AppError):
    """
    Raised when input data fails business validation.

    Examples:
    - Empty guest name on RSVP
    - Attendance outside the closed enum
    - Menu order that is not a permutation of the section keys

    HTTP Mapping: 400 BAD REQUEST
    """

    def __init__(self, message: str, field_errors: dict = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_errors = field_errors or {}


class PermissionError(AppError):
    """
    Raised when an authenticated principal may not act on a tenant.

    The message is deliberately generic: it must not reveal whether the
    resource exists.

    HTTP Mapping: 403 FORBIDDEN
    """

    def __init__(self, message: str = 'You do not have access to this resource', **kwargs):
        super().__init__(message, **kwargs)


class ServiceUnavailableError(AppError):
    """
    Raised when external service dependencies fail.

    Examples:
    - Database connection issues
    - Object storage failures

    HTTP Mapping: 503 SERVICE UNAVAILABLE
    """
    pass


class AuthenticationError(AppError):
    """
    Raised when the caller is not authenticated.

    Examples:
    - Missing, invalid, revoked or expired token
    - Wrong credentials on login

    HTTP Mapping: 401 UNAUTHORIZED
    """
    pass


class ConfigurationError(AppError):
    """
    Raised when application configuration is invalid.

    HTTP Mapping: 500 INTERNAL SERVER ERROR
    """
    pass


# Factories keep error codes uniform across apps
def permission_denied(action: str, **context) -> PermissionError:
    """Factory function for consistent (opaque) permission errors"""
    return PermissionError(
        error_code='permission_denied',
        context={'action': action, **context},
    )


def conflict(resource_type: str, field: str, details: str, **context) -> ConflictError:
    """Factory function for uniqueness conflicts"""
    return ConflictError(
        message=details,
        error_code=f'{resource_type.lower()}_{field}_conflict',
        context={'resource_type': resource_type, 'field': field, **context},
    )
