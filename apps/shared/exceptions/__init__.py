"""
Exception hierarchy shared by all apps.

Business errors live in ``core_exceptions``; object-storage failures in
``exception``. Import both from here.
"""

from apps.shared.exceptions.core_exceptions import AppError
from apps.shared.exceptions.core_exceptions import AuthenticationError
from apps.shared.exceptions.core_exceptions import ConfigurationError
from apps.shared.exceptions.core_exceptions import conflict
from apps.shared.exceptions.core_exceptions import ConflictError
from apps.shared.exceptions.core_exceptions import permission_denied
from apps.shared.exceptions.core_exceptions import PermissionError
from apps.shared.exceptions.core_exceptions import ResourceNotFoundError
from apps.shared.exceptions.core_exceptions import ServiceUnavailableError
from apps.shared.exceptions.core_exceptions import ValidationError
from apps.shared.exceptions.exception import StorageConfigurationError
from apps.shared.exceptions.exception import StorageServiceError

__all__ = [
    # Core business exceptions
    'AppError',
    'AuthenticationError',
    'ConfigurationError',
    'ConflictError',
    'PermissionError',
    'ResourceNotFoundError',
    'ServiceUnavailableError',
    'ValidationError',
    # Infrastructure exceptions
    'StorageConfigurationError',
    'StorageServiceError',
    # Factory functions
    'conflict',
    'permission_denied',
]
