from apps.accounts.services.auth_service import AuthService
from apps.accounts.services.identity_service import IdentityService

__all__ = [
    'AuthService',
    'IdentityService',
]
