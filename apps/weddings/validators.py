"""Wedding validators for slug and menu rules."""

import re

from django.utils.translation import gettext_lazy as _

from apps.shared.exceptions import ValidationError
from apps.weddings.models.menu_config import SECTION_KEYS

SLUG_PATTERN = re.compile(r'^[a-z0-9]+(?:-[a-z0-9]+)*$')
SLUG_MAX_LENGTH = 100


def validate_slug(slug: str) -> str:
    """
    Validate a public wedding slug: lowercase letters and digits in groups
    joined by single hyphens.

    Returns:
        The slug, unchanged

    Raises:
        ValidationError: If the slug is empty or not URL-safe
    """
    if not slug or len(slug) > SLUG_MAX_LENGTH or not SLUG_PATTERN.match(slug):
        raise ValidationError(
            'Slug must contain only lowercase letters, digits and single hyphens',
            field_errors={'slug': [str(_('Invalid slug'))]},
            error_code='invalid_slug',
        )
    return slug


def validate_menu_order(custom_order) -> str:
    """
    Validate that a menu order is an exact permutation of the section keys.

    Accepts either a comma-separated string or a list of keys.

    Returns:
        The normalised comma-separated order

    Raises:
        ValidationError: On missing, duplicated or unknown keys
    """
    if isinstance(custom_order, str):
        keys = [key.strip() for key in custom_order.split(',')]
    else:
        keys = [str(key).strip() for key in custom_order or []]

    if len(keys) != len(SECTION_KEYS) or set(keys) != set(SECTION_KEYS):
        raise ValidationError(
            f"Menu order must contain each of {', '.join(SECTION_KEYS)} exactly once",
            field_errors={'custom_order': [str(_('Invalid section order'))]},
            error_code='invalid_menu_order',
        )
    return ','.join(keys)


def require_fields(**values):
    """Raise ValidationError naming every blank required field"""
    missing = {
        field: [str(_('This field is required.'))]
        for field, value in values.items()
        if value is None or (isinstance(value, str) and not value.strip())
    }
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            field_errors=missing,
            error_code='required_fields_missing',
        )
