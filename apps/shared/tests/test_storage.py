from unittest.mock import Mock

from botocore.exceptions import ClientError
from django.test import SimpleTestCase
from django.test import override_settings

from apps.shared.exceptions import StorageConfigurationError
from apps.shared.exceptions import StorageServiceError
from apps.shared.storage.base import AbstractStorageService
from apps.shared.storage.factory import StorageFactory
from apps.shared.storage.null_storage import NullStorageService
from apps.shared.storage.s3_storage import S3StorageService


def client_error(code, operation='DeleteObject'):
    return ClientError({'Error': {'Code': code, 'Message': f'{code} error'}}, operation)


@override_settings(S3_PUBLIC_BASE_URL='https://cdn.example.com/')
class S3StorageServiceTest(SimpleTestCase):
    def setUp(self):
        self.s3_client = Mock()
        self.storage = S3StorageService(s3_client=self.s3_client, bucket='gallery')

    def test_public_url(self):
        self.assertEqual(self.storage.public_url('/weddings/1/photo.jpg'), 'https://cdn.example.com/weddings/1/photo.jpg')

    def test_delete_file(self):
        self.assertTrue(self.storage.delete_file('weddings/1/photo.jpg'))
        self.s3_client.delete_object.assert_called_once_with(Bucket='gallery', Key='weddings/1/photo.jpg')

    def test_delete_file_client_error(self):
        self.s3_client.delete_object.side_effect = client_error('AccessDenied')

        with self.assertRaises(StorageServiceError):
            self.storage.delete_file('weddings/1/photo.jpg')


class StorageFactoryTest(SimpleTestCase):
    def test_none_provider(self):
        storage = StorageFactory.create_storage_service('none')

        self.assertIsInstance(storage, NullStorageService)
        self.assertFalse(storage.delete_file('photo.jpg'))
        self.assertEqual(storage.public_url('https://example.com/a.jpg'), 'https://example.com/a.jpg')

    @override_settings(FILE_UPLOAD_STORAGE='none')
    def test_default_provider_from_settings(self):
        self.assertEqual(StorageFactory.create_storage_service().provider_name, 'none')

    def test_unknown_provider(self):
        with self.assertRaises(StorageConfigurationError):
            StorageFactory.create_storage_service('ftp')


class StorageInterfaceTest(SimpleTestCase):
    def test_backends_only_build_urls_and_delete(self):
        self.assertEqual(
            AbstractStorageService.__abstractmethods__,
            frozenset({'public_url', 'delete_file', 'provider_name'}),
        )
