import logging
from typing import Optional

from django.db.models import QuerySet

from apps.accounts.models import User
from apps.shared.decorators import handle_db_errors

logger = logging.getLogger(__name__)


class UserDAL:
    """Data Access Layer for User operations"""

    @handle_db_errors(operation_type='read', model_name='User')
    def get_by_id(self, user_id) -> Optional[User]:
        return User.objects.with_wedding().filter(id=user_id).first()

    @handle_db_errors(operation_type='read', model_name='User')
    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email with case-insensitive lookup"""
        return User.objects.by_email(email).first()

    @handle_db_errors(operation_type='read', model_name='User')
    def email_exists(self, email: str, exclude_id=None) -> bool:
        queryset = User.objects.by_email(email)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    @handle_db_errors(operation_type='read', model_name='User')
    def exists(self, user_id) -> bool:
        return User.objects.filter(id=user_id).exists()

    @handle_db_errors(operation_type='create', model_name='User', unique_fields=('email',))
    def create_user(self, email: str, password: str, name: str) -> User:
        user = User.objects.create_user(email=email, password=password, name=name)
        logger.info(f'Created user: {user.email} (ID: {user.id})')
        return user

    @handle_db_errors(operation_type='update', model_name='User', unique_fields=('email',))
    def update_user(self, user: User, **update_fields) -> User:
        """Update user with given fields"""
        for field, value in update_fields.items():
            setattr(user, field, value)

        user.save(update_fields=[*update_fields.keys(), 'updated_at'])
        logger.info(f'Updated user {user.id} fields: {list(update_fields.keys())}')
        return user

    @handle_db_errors(operation_type='update', model_name='User')
    def set_password(self, user: User, password: str) -> User:
        user.set_password(password)
        user.save(update_fields=['password', 'updated_at'])
        return user

    @handle_db_errors(operation_type='delete', model_name='User')
    def delete_user(self, user: User) -> None:
        user.delete()

    @handle_db_errors(operation_type='read', model_name='User')
    def list_users(self) -> QuerySet[User]:
        """Users newest first, with their wedding joined in"""
        return User.objects.with_wedding().order_by('-created_at')
