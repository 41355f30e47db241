"""
Accounts models package
"""

from apps.accounts.models.admin import Admin
from apps.accounts.models.user import User

__all__ = [
    'Admin',
    'User',
]
