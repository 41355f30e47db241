# apps/shared/storage/s3_storage.py
import logging

import boto3
from botocore.exceptions import BotoCoreError
from botocore.exceptions import ClientError
from django.conf import settings

from apps.shared.exceptions import StorageServiceError
from apps.shared.storage.base import AbstractStorageService

logger = logging.getLogger(__name__)


class S3StorageService(AbstractStorageService):
    """S3 implementation of AbstractStorageService."""

    def __init__(self, s3_client=None, bucket: str = None):
        self.s3_client = s3_client or boto3.client(
            's3',
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID or None,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY or None,
            region_name=settings.AWS_S3_REGION_NAME,
        )
        self.bucket = bucket or settings.S3_BUCKET_NAME
        self.public_base_url = settings.S3_PUBLIC_BASE_URL or (
            f'https://{self.bucket}.s3.{settings.AWS_S3_REGION_NAME}.amazonaws.com'
        )

    @property
    def provider_name(self) -> str:
        return 's3'

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url.rstrip('/')}/{key.lstrip('/')}"

    def delete_file(self, key: str) -> bool:
        if not key:
            raise StorageServiceError('S3 key is required')

        try:
            self.s3_client.delete_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            raise StorageServiceError(
                f"Error deleting S3 object {key}: {e.response.get('Error', {}).get('Message', e)}",
                context={'key': key, 'bucket': self.bucket},
            ) from e
        except BotoCoreError as e:
            raise StorageServiceError(f'AWS configuration error: {e!s}', context={'key': key}) from e

        logger.info(f'Deleted S3 object {key} from bucket {self.bucket}')
        return True
