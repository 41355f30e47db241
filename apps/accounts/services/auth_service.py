import logging
from typing import Any

from apps.accounts.services.identity_service import IdentityService
from apps.shared.auth.jwt_service import JWTService

logger = logging.getLogger(__name__)


class AuthService:
    """Login, logout and "who am I" on top of IdentityService and JWTService"""

    def __init__(self, identity_service: IdentityService = None, jwt_service: JWTService = None):
        self.identity_service = identity_service or IdentityService()
        self.jwt_service = jwt_service or JWTService()

    def login(self, identifier: str, password: str) -> dict[str, Any]:
        """Check credentials and issue an access token"""
        principal = self.identity_service.verify_credentials(identifier, password)
        token = self.jwt_service.issue_token(principal)

        return {
            'token': token,
            'token_type': 'Bearer',
            'expires_in': int(self.jwt_service.lifetime.total_seconds()),
            'principal': principal,
            'profile': self.get_profile(principal),
        }

    def logout(self, token: str) -> bool:
        revoked = self.jwt_service.revoke_token(token)
        logger.info('Logout processed')
        return revoked

    def get_profile(self, principal) -> dict[str, Any]:
        """Account details for an authenticated principal"""
        if principal.is_admin:
            admin = self.identity_service.get_admin(principal.admin_id)
            return {
                'kind': principal.kind,
                'id': admin.id,
                'username': admin.username,
                'role': admin.role,
                'wedding': None,
            }

        user = self.identity_service.get_user(principal.user_id)
        wedding = user.owned_wedding
        return {
            'kind': principal.kind,
            'id': user.id,
            'email': user.email,
            'name': user.name,
            'role': principal.role,
            'wedding': {'id': wedding.id, 'slug': wedding.slug, 'couple_name': wedding.couple_name} if wedding else None,
        }
