"""
JWT access tokens for admin and couple principals, with blacklisting on logout.
"""

import logging
import uuid
from datetime import datetime
from datetime import timedelta
from datetime import timezone as dt_timezone

import jwt
from django.apps import apps
from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils import timezone

from apps.shared.auth.principals import AdminPrincipal
from apps.shared.auth.principals import OwnerPrincipal
from apps.shared.base.models import BlacklistedToken
from apps.shared.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ['sub', 'principal_kind', 'iat', 'exp', 'jti', 'iss']


class TokenExpiredError(AuthenticationError):
    def __init__(self, message: str = 'Token has expired', **kwargs):
        kwargs.setdefault('error_code', 'token_expired')
        super().__init__(message, **kwargs)


class InvalidTokenError(AuthenticationError):
    def __init__(self, message: str = 'Token is invalid', **kwargs):
        kwargs.setdefault('error_code', 'token_invalid')
        super().__init__(message, **kwargs)


class JWTService:
    """
    Issues and verifies signed access tokens.

    A token names its principal (``sub`` + ``principal_kind``); verification
    re-reads the principal from the database so that deactivated users and
    newly created weddings are reflected without re-login.
    """

    def __init__(self, secret_key: str = None, algorithm: str = None, lifetime: timedelta = None):
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.issuer = settings.JWT_ISSUER
        self.lifetime = lifetime or timedelta(minutes=settings.ACCESS_TOKEN_LIFETIME_MINUTES)

    def generate_jti(self) -> str:
        """Generate unique JWT ID"""
        return str(uuid.uuid4())

    def issue_token(self, principal) -> str:
        """
        Create an access token for an admin or owner principal.

        Args:
            principal: AdminPrincipal or OwnerPrincipal

        Returns:
            JWT access token string
        """
        if not principal.is_authenticated:
            raise InvalidTokenError('Cannot issue a token for an anonymous principal')

        now = timezone.now()
        jti = self.generate_jti()
        payload = {
            'sub': str(principal.principal_id),
            'principal_kind': principal.kind,
            'role': principal.role,
            'jti': jti,
            'iat': int(now.timestamp()),
            'exp': int((now + self.lifetime).timestamp()),
            'iss': self.issuer,
        }

        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        logger.info(f'Issued access token for {principal} (jti: {jti})')
        return token

    def decode(self, token: str) -> dict:
        """Check signature, expiry, issuer and blacklist; return the claims"""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={'require': REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            logger.warning('Access token has expired')
            raise TokenExpiredError() from e
        except jwt.InvalidTokenError as e:
            logger.warning(f'Invalid access token: {e!s}')
            raise InvalidTokenError() from e

        if BlacklistedToken.is_blacklisted(payload['jti']):
            logger.warning(f"Token {payload['jti']} is blacklisted")
            raise InvalidTokenError('Token has been revoked', error_code='token_revoked')

        return payload

    def verify_token(self, token: str):
        """
        Verify a token and return the principal it names.

        Raises:
            TokenExpiredError: token past its ``exp``
            InvalidTokenError: bad signature, malformed, revoked, or the
                principal no longer exists / is deactivated
        """
        payload = self.decode(token)
        kind = payload['principal_kind']

        if kind == BlacklistedToken.PRINCIPAL_ADMIN:
            return self._load_admin(payload['sub'])
        if kind == BlacklistedToken.PRINCIPAL_USER:
            return self._load_owner(payload['sub'])

        logger.warning(f'Token with unknown principal kind: {kind}')
        raise InvalidTokenError()

    def revoke_token(self, token: str, reason: str = 'logout') -> bool:
        """
        Blacklist a token until its natural expiry.

        Returns:
            True if the token was (or already is) blacklisted, False when it is
            already expired and needs no entry
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={'require': REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            return False
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError() from e

        expires_at = datetime.fromtimestamp(payload['exp'], tz=dt_timezone.utc)
        BlacklistedToken.objects.get_or_create(
            jti=payload['jti'],
            defaults={
                'principal_kind': payload['principal_kind'],
                'principal_id': payload['sub'],
                'expires_at': expires_at,
                'reason': reason,
            },
        )

        logger.info(f"Revoked token {payload['jti']} for {payload['principal_kind']}:{payload['sub']}")
        return True

    def cleanup_expired(self) -> int:
        """Drop blacklist rows for tokens that have expired anyway"""
        count = BlacklistedToken.cleanup_expired()
        logger.info(f'Cleaned up {count} expired blacklisted tokens')
        return count

    def _load_admin(self, admin_id: str) -> AdminPrincipal:
        Admin = apps.get_model('accounts', 'Admin')
        try:
            admin = Admin.objects.get(id=admin_id)
        except (Admin.DoesNotExist, DjangoValidationError, ValueError) as e:
            logger.warning(f'Token names unknown admin {admin_id}')
            raise InvalidTokenError() from e
        return AdminPrincipal(admin_id=admin.id, role=admin.role)

    def _load_owner(self, user_id: str) -> OwnerPrincipal:
        User = apps.get_model(settings.AUTH_USER_MODEL)
        Wedding = apps.get_model('weddings', 'Wedding')
        try:
            user = User.objects.get(id=user_id)
        except (User.DoesNotExist, DjangoValidationError, ValueError) as e:
            logger.warning(f'Token names unknown user {user_id}')
            raise InvalidTokenError() from e

        if not user.is_active:
            logger.warning(f'Token presented by deactivated user {user_id}')
            raise InvalidTokenError('Account is deactivated', error_code='account_inactive')

        wedding_id = Wedding.objects.filter(user_id=user.id).values_list('id', flat=True).first()
        return OwnerPrincipal(user_id=user.id, wedding_id=wedding_id)
