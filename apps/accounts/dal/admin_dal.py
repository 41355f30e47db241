import logging
from typing import Optional

from apps.accounts.models import Admin
from apps.shared.decorators import handle_db_errors

logger = logging.getLogger(__name__)


class AdminDAL:
    """Data Access Layer for Admin operations"""

    @handle_db_errors(operation_type='read', model_name='Admin')
    def get_by_id(self, admin_id) -> Optional[Admin]:
        return Admin.objects.filter(id=admin_id).first()

    @handle_db_errors(operation_type='read', model_name='Admin')
    def get_by_username(self, username: str) -> Optional[Admin]:
        return Admin.objects.filter(username=username).first()

    @handle_db_errors(operation_type='read', model_name='Admin')
    def username_exists(self, username: str) -> bool:
        return Admin.objects.filter(username=username).exists()

    @handle_db_errors(operation_type='create', model_name='Admin', unique_fields=('username', 'user'))
    def create_admin(self, username: str, password: str, role: str, user_id=None) -> Admin:
        admin = Admin(username=username, role=role, user_id=user_id)
        admin.set_password(password)
        admin.save()
        logger.info(f'Created admin: {admin.username} (role: {admin.role})')
        return admin
