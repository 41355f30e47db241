# apps/shared/storage/factory.py
from django.conf import settings

from apps.shared.exceptions import StorageConfigurationError

from .base import AbstractStorageService
from .null_storage import NullStorageService
from .s3_storage import S3StorageService


class StorageFactory:
    """
    Picks the storage provider named by ``FILE_UPLOAD_STORAGE``.
    """

    _providers = {
        's3': S3StorageService,
        'none': NullStorageService,
    }

    @classmethod
    def create_storage_service(cls, provider: str = None) -> AbstractStorageService:
        """
        Create the storage service for a provider.

        Args:
            provider: Provider name; defaults to ``settings.FILE_UPLOAD_STORAGE``

        Raises:
            StorageConfigurationError: unknown provider
        """
        provider = provider or settings.FILE_UPLOAD_STORAGE

        if provider not in cls._providers:
            supported = ', '.join(cls._providers.keys())
            raise StorageConfigurationError(
                f'Unsupported storage provider: {provider}. Supported providers: {supported}'
            )

        return cls._providers[provider]()
