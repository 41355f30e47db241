"""
Domain-specific exceptions for Accounts app.
"""

from apps.shared.exceptions import AuthenticationError
from apps.shared.exceptions import ConflictError
from apps.shared.exceptions import ResourceNotFoundError


class InvalidCredentials(AuthenticationError):
    """
    Login failed. Raised identically for an unknown identifier, a wrong
    password and a deactivated account.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault('error_code', 'invalid_credentials')
        super().__init__('Invalid credentials', **kwargs)


class UserNotFoundError(ResourceNotFoundError):
    def __init__(self, user_id=None, **kwargs):
        kwargs.setdefault('error_code', 'user_not_found')
        kwargs.setdefault('context', {'user_id': str(user_id)})
        super().__init__('User not found', **kwargs)


class EmailAlreadyExistsError(ConflictError):
    def __init__(self, **kwargs):
        kwargs.setdefault('error_code', 'user_email_conflict')
        kwargs.setdefault('context', {'field': 'email'})
        super().__init__('A user with this email already exists', **kwargs)


class UsernameAlreadyExistsError(ConflictError):
    def __init__(self, **kwargs):
        kwargs.setdefault('error_code', 'admin_username_conflict')
        kwargs.setdefault('context', {'field': 'username'})
        super().__init__('An admin with this username already exists', **kwargs)
