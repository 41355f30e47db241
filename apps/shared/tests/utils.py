"""
Helpers for API tests: bearer tokens for admin and couple principals.
"""

from apps.shared.auth.jwt_service import JWTService
from apps.shared.auth.principals import AdminPrincipal
from apps.shared.auth.principals import OwnerPrincipal


def admin_principal(admin) -> AdminPrincipal:
    return AdminPrincipal(admin_id=admin.id, role=admin.role)


def owner_principal(user) -> OwnerPrincipal:
    wedding = user.owned_wedding
    return OwnerPrincipal(user_id=user.id, wedding_id=wedding.id if wedding else None)


def token_for(principal) -> str:
    return JWTService().issue_token(principal)


class PrincipalAuthMixin:
    """Mixin for APITestCase: authenticate the client as an admin or couple"""

    def authenticate_admin(self, admin):
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {token_for(admin_principal(admin))}')

    def authenticate_owner(self, user):
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {token_for(owner_principal(user))}')

    def logout_client(self):
        self.client.credentials()
