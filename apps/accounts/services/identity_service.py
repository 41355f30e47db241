import logging
from typing import Any

from django.contrib.auth.hashers import make_password
from django.db import transaction

from apps.accounts.dal.admin_dal import AdminDAL
from apps.accounts.dal.user_dal import UserDAL
from apps.accounts.exceptions import EmailAlreadyExistsError
from apps.accounts.exceptions import InvalidCredentials
from apps.accounts.exceptions import UserNotFoundError
from apps.accounts.exceptions import UsernameAlreadyExistsError
from apps.accounts.models import Admin
from apps.accounts.models import User
from apps.shared.auth.principals import AdminPrincipal
from apps.shared.auth.principals import OwnerPrincipal
from apps.shared.exceptions import ValidationError
from apps.weddings.services.content_service import ContentService
from apps.weddings.services.tenant_service import TenantService

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class IdentityService:
    """Service layer for couple accounts, admins and credential checks"""

    def __init__(self, dal=None, admin_dal=None, tenant_service=None, content_service=None):
        self.dal = dal or UserDAL()
        self.admin_dal = admin_dal or AdminDAL()
        self.tenant_service = tenant_service or TenantService(user_dal=self.dal)
        self._content_service = content_service

    @property
    def content_service(self) -> ContentService:
        if self._content_service is None:
            self._content_service = ContentService(tenant_service=self.tenant_service)
        return self._content_service

    # =============================================================================
    # USER CREATION OPERATIONS
    # =============================================================================

    def create_user(self, email: str, password: str, name: str) -> User:
        """
        Create a couple account.

        Raises:
            ValidationError: blank email, password or name, or a short password
            ConflictError: the email is already registered (case-insensitive)
        """
        self._validate_user_data(email=email, password=password, name=name)

        if self.dal.email_exists(email):
            raise EmailAlreadyExistsError()

        # A racing insert that passed the check above surfaces as ConflictError from the DAL
        with transaction.atomic():
            user = self.dal.create_user(email=email, password=password, name=name.strip())
        logger.info(f'Created user: {user.email} (ID: {user.id})')
        return user

    def create_user_with_wedding(self, email: str, password: str, name: str, slug: str, wedding_date) -> User:
        """
        Create a couple account together with its wedding, default menu and
        the default akad/resepsi events. All or nothing.
        """
        with transaction.atomic():
            user = self.create_user(email=email, password=password, name=name)
            wedding = self.tenant_service.create_wedding(
                user_id=user.id,
                slug=slug,
                couple_name=user.name,
                wedding_date=wedding_date,
            )
            self.content_service.create_default_events(wedding.id, wedding.wedding_date)

        logger.info(f'Set up wedding {wedding.slug} for new user {user.email}')
        return self.get_user(user.id)

    def create_admin(self, username: str, password: str, role: str = Admin.Role.ADMIN, user_id=None) -> Admin:
        """
        Raises:
            ValidationError: blank username/password or unknown role
            ConflictError: the username is taken
        """
        self._require(username=username, password=password)
        if role not in Admin.Role.values:
            raise ValidationError(
                f'Unknown admin role: {role}',
                field_errors={'role': [f'Must be one of {", ".join(Admin.Role.values)}']},
            )
        if user_id is not None and not self.dal.exists(user_id):
            raise UserNotFoundError(user_id)
        if self.admin_dal.username_exists(username):
            raise UsernameAlreadyExistsError()

        admin = self.admin_dal.create_admin(username=username, password=password, role=role, user_id=user_id)
        logger.info(f'Created admin: {admin.username} (role: {admin.role})')
        return admin

    # =============================================================================
    # CREDENTIALS
    # =============================================================================

    def verify_credentials(self, identifier: str, password: str):
        """
        Resolve login credentials to a principal.

        Admins are matched by username first, then couple accounts by email.
        Every failure raises the same InvalidCredentials so callers cannot
        tell which part was wrong.
        """
        if not identifier or not password:
            self._burn_hash(password)
            raise InvalidCredentials()

        admin = self.admin_dal.get_by_username(identifier.strip())
        if admin is not None:
            if admin.check_password(password):
                logger.info(f'Admin {admin.username} authenticated')
                return AdminPrincipal(admin_id=admin.id, role=admin.role)
            logger.warning(f'Failed admin login for {identifier}')
            raise InvalidCredentials()

        user = self.dal.get_by_email(identifier)
        if user is None:
            self._burn_hash(password)
            logger.warning('Failed login for unknown identifier')
            raise InvalidCredentials()

        if not user.check_password(password) or not user.is_active:
            logger.warning(f'Failed login for user {user.id}')
            raise InvalidCredentials()

        wedding = user.owned_wedding
        logger.info(f'User {user.email} authenticated')
        return OwnerPrincipal(user_id=user.id, wedding_id=wedding.id if wedding else None)

    # =============================================================================
    # USER MANAGEMENT
    # =============================================================================

    def get_user(self, user_id) -> User:
        user = self.dal.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def get_admin(self, admin_id) -> Admin:
        admin = self.admin_dal.get_by_id(admin_id)
        if admin is None:
            raise UserNotFoundError(admin_id, error_code='admin_not_found')
        return admin

    def list_users(self) -> list[User]:
        """Users newest first; each carries ``owned_wedding``"""
        return list(self.dal.list_users())

    def update_user(self, user_id, name: str = None, email: str = None) -> User:
        user = self.get_user(user_id)
        update_fields: dict[str, Any] = {}

        if name is not None:
            self._require(name=name)
            update_fields['name'] = name.strip()
        if email is not None:
            self._require(email=email)
            normalized = User.objects.normalize_email(email)
            if normalized != user.email:
                if self.dal.email_exists(normalized, exclude_id=user.id):
                    raise EmailAlreadyExistsError()
                update_fields['email'] = normalized

        if not update_fields:
            return user

        user = self.dal.update_user(user, **update_fields)
        logger.info(f'Updated user {user_id}: {list(update_fields)}')
        return user

    def update_account(self, user_id, name: str = None, email: str = None, password: str = None, is_active=None) -> User:
        """
        Apply an admin edit of profile, password and status as one change.

        Input is checked before anything is written; a failure at any step
        leaves the account as it was.
        """
        if password is not None:
            self._validate_password(password)

        with transaction.atomic():
            user = self.update_user(user_id, name=name, email=email)
            if password is not None:
                user = self.set_password(user_id, password)
            if is_active is not None:
                user = self.set_active(user_id, is_active)
        return user

    def set_password(self, user_id, password: str) -> User:
        self._validate_password(password)
        user = self.get_user(user_id)
        user = self.dal.set_password(user, password)
        logger.info(f'Password changed for user {user_id}')
        return user

    def set_active(self, user_id, is_active: bool) -> User:
        user = self.get_user(user_id)
        user = self.dal.update_user(user, is_active=bool(is_active))
        logger.info(f"User {user_id} {'activated' if is_active else 'deactivated'}")
        return user

    @transaction.atomic
    def delete_user(self, user_id) -> bool:
        """Hard delete; the owned wedding and everything under it goes too"""
        user = self.get_user(user_id)
        self.dal.delete_user(user)
        logger.info(f'Deleted user {user_id}')
        return True

    # =============================================================================
    # VALIDATION HELPERS
    # =============================================================================

    def _validate_user_data(self, email: str, password: str, name: str):
        self._require(email=email, password=password, name=name)
        self._validate_password(password)

    def _validate_password(self, password: str):
        self._require(password=password)
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f'Password must be at least {MIN_PASSWORD_LENGTH} characters',
                field_errors={'password': [f'Ensure this field has at least {MIN_PASSWORD_LENGTH} characters.']},
            )

    @staticmethod
    def _require(**values):
        missing = {
            field: ['This field is required.']
            for field, value in values.items()
            if not value or not str(value).strip()
        }
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}", field_errors=missing)

    @staticmethod
    def _burn_hash(password: str):
        # Same hashing cost as a real check, so response time does not reveal unknown identifiers
        make_password(password or '')
