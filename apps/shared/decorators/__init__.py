"""
Shared decorators.

- Database error handling for DAL methods
"""

from apps.shared.decorators.database import handle_db_errors

__all__ = [
    'handle_db_errors',
]
