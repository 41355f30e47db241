import logging
from collections.abc import Callable
from collections.abc import Sequence
from functools import wraps
from typing import Any

from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from django.db import IntegrityError

from apps.shared.exceptions import AppError
from apps.shared.exceptions import ConflictError
from apps.shared.exceptions import ResourceNotFoundError
from apps.shared.exceptions import ServiceUnavailableError
from apps.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

OPERATION_PREFIXES = (
    ('create', 'create'),
    ('add', 'create'),
    ('get', 'read'),
    ('list', 'read'),
    ('count', 'read'),
    ('exists', 'read'),
    ('update', 'update'),
    ('set', 'update'),
    ('delete', 'delete'),
)

REDACTED_KWARGS = ('password', 'secret', 'token', 'key')


def detect_operation(method_name: str) -> str:
    """Map a DAL method name to create/read/update/delete by its verb"""
    name = method_name.lower()
    for prefix, operation in OPERATION_PREFIXES:
        if name.startswith(prefix):
            return operation
    return name


class DatabaseErrorHandler:
    """
    Turns Django/driver errors raised inside a DAL method into AppErrors.

    IntegrityError is checked before DatabaseError (it is a subclass), so a
    lost unique-constraint race surfaces as a 409 rather than a 503.
    """

    def __init__(self, operation_type: str, unique_fields: Sequence[str] = ()):
        self.operation_type = operation_type
        self.unique_fields = tuple(unique_fields)

    def translate(self, error: Exception, context: dict[str, Any]) -> AppError:
        model_name = context.get('model_name', 'Resource')
        extra = {'operation': self.operation_type, 'context': context}

        if isinstance(error, IntegrityError):
            field = self.conflicting_field(error)
            logger.warning(f'Unique constraint hit on {model_name}.{field} during {self.operation_type}', extra=extra)
            return ConflictError(
                message=f'{model_name} with this {field} already exists',
                error_code=f'{model_name.lower()}_{field}_conflict',
                context={'original_error': str(error), 'field': field, **context},
            )

        if isinstance(error, ObjectDoesNotExist):
            logger.debug(f'{model_name} not found during {self.operation_type}', extra=extra)
            return ResourceNotFoundError(
                message=f'{model_name} not found',
                error_code=f'{model_name.lower()}_not_found',
                context={'model': model_name, **context},
            )

        if isinstance(error, DjangoValidationError):
            logger.warning(f'Model validation failed during {self.operation_type}: {error}', extra=extra)
            if hasattr(error, 'error_dict'):
                field_errors = error.message_dict
            else:
                field_errors = {'non_field_errors': error.messages}
            return ValidationError(
                message=f'Validation failed: {error!s}',
                field_errors=field_errors,
                error_code=f'{self.operation_type}_validation_error',
                context={'original_error': str(error), **context},
            )

        if isinstance(error, DatabaseError):
            logger.critical(f'Database unavailable during {self.operation_type}: {error}', extra=extra, exc_info=True)
            return ServiceUnavailableError(
                message='Database service is temporarily unavailable',
                error_code=f'{self.operation_type}_database_error',
                context={'original_error': str(error), **context},
            )

        logger.error(f'Unexpected error during {self.operation_type}: {error}', extra=extra, exc_info=True)
        return ServiceUnavailableError(
            message=f'Unexpected database error: {error!s}',
            error_code=f'{self.operation_type}_unexpected_error',
            context={'original_error': str(error), **context},
        )

    def conflicting_field(self, error: IntegrityError) -> str:
        """Pick the unique column the driver message names, if we can tell"""
        text = str(error).lower()
        for field in self.unique_fields:
            if f'.{field}' in text or f'_{field}_' in text or f'({field})' in text:
                return field
        if len(self.unique_fields) == 1:
            return self.unique_fields[0]
        return 'unknown'


def handle_db_errors(operation_type: str = None, model_name: str = None, unique_fields: Sequence[str] = ()):
    """
    Decorator for DAL methods: database errors leave as AppErrors.

    Args:
        operation_type: create / read / update / delete; guessed from the
            method name when omitted
        model_name: Model name used in messages and error codes
        unique_fields: Unique columns the write may collide on, used to name
            the field in the resulting ConflictError

    Usage:
        @handle_db_errors(operation_type='create', model_name='Wedding', unique_fields=('slug', 'user'))
        def create_wedding(self, **data) -> Wedding:
            return Wedding.objects.create(**data)
    """

    def decorator(func: Callable) -> Callable:
        operation = operation_type or detect_operation(func.__name__)

        @wraps(func)
        def wrapper(self, *args, **kwargs) -> Any:
            try:
                return func(self, *args, **kwargs)
            except AppError:
                raise
            except Exception as e:
                context = {
                    'method': func.__name__,
                    'class': self.__class__.__name__,
                    'operation': operation,
                    'kwargs': {
                        k: str(v) for k, v in kwargs.items() if not any(word in k.lower() for word in REDACTED_KWARGS)
                    },
                }
                if model_name:
                    context['model_name'] = model_name
                raise DatabaseErrorHandler(operation, unique_fields).translate(e, context) from e

        return wrapper

    return decorator
