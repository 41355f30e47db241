# apps/shared/storage/null_storage.py
import logging

from apps.shared.storage.base import AbstractStorageService

logger = logging.getLogger(__name__)


class NullStorageService(AbstractStorageService):
    """Used when no object storage is configured: photos are plain external URLs."""

    @property
    def provider_name(self) -> str:
        return 'none'

    def public_url(self, key: str) -> str:
        return key

    def delete_file(self, key: str) -> bool:
        logger.debug(f'No object storage configured, skipping delete of {key}')
        return False
