from django.test import TestCase

from apps.accounts.exceptions import InvalidCredentials
from apps.accounts.services import AuthService
from apps.accounts.tests.factories import TEST_PASSWORD
from apps.accounts.tests.factories import AdminFactory
from apps.accounts.tests.factories import UserFactory
from apps.shared.auth.jwt_service import InvalidTokenError
from apps.shared.auth.principals import OwnerPrincipal
from apps.weddings.tests.factories import WeddingFactory


class AuthServiceTest(TestCase):
    def setUp(self):
        self.service = AuthService()
        self.user = UserFactory(email='rina@example.com', name='Rina')
        self.wedding = WeddingFactory(user=self.user, slug='rina-budi')

    def test_login_returns_verifiable_token(self):
        result = self.service.login('rina@example.com', TEST_PASSWORD)

        self.assertEqual(result['token_type'], 'Bearer')
        self.assertGreater(result['expires_in'], 0)
        principal = self.service.jwt_service.verify_token(result['token'])
        self.assertEqual(principal, OwnerPrincipal(user_id=self.user.id, wedding_id=self.wedding.id))

    def test_login_profile_for_owner(self):
        profile = self.service.login('rina@example.com', TEST_PASSWORD)['profile']

        self.assertEqual(profile['email'], 'rina@example.com')
        self.assertEqual(profile['wedding']['slug'], 'rina-budi')

    def test_login_profile_for_admin(self):
        admin = AdminFactory(username='ops')

        profile = self.service.login('ops', TEST_PASSWORD)['profile']

        self.assertEqual(profile['id'], admin.id)
        self.assertEqual(profile['kind'], 'admin')
        self.assertIsNone(profile['wedding'])

    def test_login_wrong_password(self):
        with self.assertRaises(InvalidCredentials):
            self.service.login('rina@example.com', 'wrong')

    def test_logout_revokes_token(self):
        token = self.service.login('rina@example.com', TEST_PASSWORD)['token']

        self.assertTrue(self.service.logout(token))

        with self.assertRaises(InvalidTokenError):
            self.service.jwt_service.verify_token(token)
