# apps/shared/storage/base.py
from abc import ABC
from abc import abstractmethod


class AbstractStorageService(ABC):
    """
    Interface for object storage providers holding gallery images.

    Uploads happen outside this service (the client uploads straight to the
    provider); the backend only needs to build public URLs and remove objects
    whose gallery record was deleted.
    """

    @abstractmethod
    def public_url(self, key: str) -> str:
        """
        Build the public URL of a stored object.

        Args:
            key: Object key in storage

        Returns:
            str: URL the invitation page can load
        """

    @abstractmethod
    def delete_file(self, key: str) -> bool:
        """
        Delete an object.

        Args:
            key: Object key in storage

        Returns:
            bool: True if the object was deleted

        Raises:
            StorageServiceError: the provider rejected or failed the request
        """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Storage provider name."""
