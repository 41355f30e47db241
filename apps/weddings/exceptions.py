"""
Domain-specific exceptions for Weddings app.
"""

from apps.shared.exceptions import ConflictError
from apps.shared.exceptions import ResourceNotFoundError


class WeddingNotFoundError(ResourceNotFoundError):
    def __init__(self, identifier=None, **kwargs):
        kwargs.setdefault('error_code', 'wedding_not_found')
        kwargs.setdefault('context', {'identifier': str(identifier)})
        super().__init__('Wedding not found', **kwargs)


class SlugTakenError(ConflictError):
    def __init__(self, slug: str = None, **kwargs):
        kwargs.setdefault('error_code', 'wedding_slug_conflict')
        kwargs.setdefault('context', {'field': 'slug', 'slug': slug})
        super().__init__('This slug is already taken', **kwargs)


class WeddingAlreadyExistsError(ConflictError):
    def __init__(self, user_id=None, **kwargs):
        kwargs.setdefault('error_code', 'wedding_user_conflict')
        kwargs.setdefault('context', {'field': 'user', 'user_id': str(user_id)})
        super().__init__('This user already owns a wedding', **kwargs)
