from apps.shared.exceptions.core_exceptions import ConfigurationError
from apps.shared.exceptions.core_exceptions import ServiceUnavailableError


class StorageServiceError(ServiceUnavailableError):
    """Object storage failed (upload, delete, lookup)."""

    def __init__(self, message: str = 'Object storage error occurred', **kwargs):
        kwargs.setdefault('error_code', 'storage_service_error')
        super().__init__(message, **kwargs)


class StorageConfigurationError(ConfigurationError):
    """Unknown or misconfigured storage provider."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('error_code', 'storage_configuration_error')
        super().__init__(message, **kwargs)
