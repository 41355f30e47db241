from .user_manager import UserManager
from .user_manager import UserQuerySet

__all__ = ['UserManager', 'UserQuerySet']
