from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from django.db import IntegrityError
from django.test import SimpleTestCase

from apps.shared.decorators import handle_db_errors
from apps.shared.exceptions import ConflictError
from apps.shared.exceptions import ResourceNotFoundError
from apps.shared.exceptions import ServiceUnavailableError
from apps.shared.exceptions import ValidationError


class FakeDAL:
    def __init__(self, error):
        self.error = error

    @handle_db_errors(operation_type='create', model_name='Wedding', unique_fields=('slug', 'user'))
    def create_wedding(self, **data):
        raise self.error

    @handle_db_errors(model_name='Wedding')
    def get_by_id(self, wedding_id):
        raise self.error


class HandleDbErrorsTest(SimpleTestCase):
    """Translation of database errors into business exceptions"""

    def test_integrity_error_becomes_conflict_naming_field(self):
        dal = FakeDAL(IntegrityError('UNIQUE constraint failed: weddings_wedding.slug'))

        with self.assertRaises(ConflictError) as context:
            dal.create_wedding(slug='rina-budi', password='secret')

        self.assertEqual(context.exception.error_code, 'wedding_slug_conflict')
        self.assertEqual(context.exception.get_context()['field'], 'slug')
        self.assertNotIn('password', context.exception.get_context()['kwargs'])

    def test_integrity_error_on_second_unique_field(self):
        dal = FakeDAL(IntegrityError('UNIQUE constraint failed: weddings_wedding.user_id'))

        with self.assertRaises(ConflictError) as context:
            dal.create_wedding(user_id=1)

        self.assertEqual(context.exception.get_context()['field'], 'user')

    def test_object_does_not_exist_becomes_not_found(self):
        dal = FakeDAL(ObjectDoesNotExist())

        with self.assertRaises(ResourceNotFoundError) as context:
            dal.get_by_id(1)

        self.assertEqual(context.exception.error_code, 'wedding_not_found')
        self.assertEqual(context.exception.get_context()['operation'], 'read')

    def test_django_validation_error_keeps_field_errors(self):
        dal = FakeDAL(DjangoValidationError({'slug': ['Invalid slug']}))

        with self.assertRaises(ValidationError) as context:
            dal.create_wedding(slug='Bad Slug')

        self.assertEqual(context.exception.field_errors, {'slug': ['Invalid slug']})

    def test_database_error_becomes_service_unavailable(self):
        dal = FakeDAL(DatabaseError('connection refused'))

        with self.assertLogs('apps.shared.decorators.database', level='CRITICAL'):
            with self.assertRaises(ServiceUnavailableError):
                dal.get_by_id(1)

    def test_business_errors_pass_through(self):
        dal = FakeDAL(ConflictError('taken', error_code='custom'))

        with self.assertRaises(ConflictError) as context:
            dal.create_wedding(slug='x')

        self.assertEqual(context.exception.error_code, 'custom')
