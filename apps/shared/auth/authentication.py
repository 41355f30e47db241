"""
Custom authentication classes for API endpoints
"""

import logging

from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication
from rest_framework.authentication import get_authorization_header

from apps.shared.auth.jwt_service import JWTService
from apps.shared.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class PrincipalJWTAuthentication(BaseAuthentication):
    """
    Bearer-token authentication resolving to an Admin or Owner principal.

    No ``Authorization`` header means the request proceeds as
    ``AnonymousPrincipal``; a header with a bad, expired or revoked token is
    rejected with 401 rather than silently downgraded to anonymous.
    """

    keyword = 'Bearer'

    def __init__(self, jwt_service: JWTService = None):
        self.jwt_service = jwt_service or JWTService()

    def authenticate(self, request):
        auth = get_authorization_header(request).split()

        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None

        if len(auth) != 2:
            raise exceptions.AuthenticationFailed('Invalid Authorization header', code='token_invalid')

        try:
            token = auth[1].decode()
        except UnicodeError as e:
            raise exceptions.AuthenticationFailed('Invalid Authorization header', code='token_invalid') from e

        try:
            principal = self.jwt_service.verify_token(token)
        except AuthenticationError as e:
            raise exceptions.AuthenticationFailed(str(e), code=e.error_code) from e

        return principal, token

    def authenticate_header(self, request):
        return self.keyword
