import logging
from typing import Any

from django.db import transaction

from apps.accounts.dal.user_dal import UserDAL
from apps.accounts.exceptions import UserNotFoundError
from apps.weddings.dal import MenuConfigDAL
from apps.weddings.dal import WeddingDAL
from apps.weddings.exceptions import SlugTakenError
from apps.weddings.exceptions import WeddingAlreadyExistsError
from apps.weddings.exceptions import WeddingNotFoundError
from apps.weddings.models import Wedding
from apps.weddings.validators import require_fields
from apps.weddings.validators import validate_slug

logger = logging.getLogger(__name__)

THEME_FIELDS = ('theme', 'primary_color', 'secondary_color', 'font_family')
DETAIL_FIELDS = ('couple_name', 'wedding_date')


class TenantService:
    """Service for wedding (tenant) lifecycle: creation, lookup, settings"""

    def __init__(self, dal=None, menu_dal=None, user_dal=None):
        self.dal = dal or WeddingDAL()
        self.menu_dal = menu_dal or MenuConfigDAL()
        self.user_dal = user_dal or UserDAL()

    def create_wedding(
        self,
        user_id,
        slug: str,
        couple_name: str,
        wedding_date,
        theme: str = None,
        primary_color: str = None,
        secondary_color: str = None,
        font_family: str = None,
    ) -> Wedding:
        """
        Create a wedding and its default menu config atomically.

        Raises:
            ValidationError: blank fields or a slug that is not URL-safe
            UserNotFoundError: unknown user
            ConflictError: slug taken, or the user already owns a wedding
        """
        require_fields(couple_name=couple_name, wedding_date=wedding_date)
        validate_slug(slug)

        if not self.user_dal.exists(user_id):
            raise UserNotFoundError(user_id)
        if self.dal.owner_exists(user_id):
            raise WeddingAlreadyExistsError(user_id)
        if self.dal.slug_exists(slug):
            raise SlugTakenError(slug)

        wedding_data = {
            'user_id': user_id,
            'slug': slug,
            'couple_name': couple_name.strip(),
            'wedding_date': wedding_date,
        }
        for field, value in zip(THEME_FIELDS, (theme, primary_color, secondary_color, font_family)):
            if value:
                wedding_data[field] = value

        # A racing insert that passed the checks above surfaces as ConflictError from the DAL
        with transaction.atomic():
            wedding = self.dal.create_wedding(wedding_data)
            self.menu_dal.create_default(wedding.id)

        logger.info(f'Created wedding {wedding.slug} (ID: {wedding.id}) for user {user_id}')
        return wedding

    def resolve_by_slug(self, slug: str) -> Wedding:
        """Active wedding for a public slug; inactive and unknown look the same"""
        wedding = self.dal.find_active_by_slug(slug)
        if wedding is None:
            raise WeddingNotFoundError(slug)
        return wedding

    def resolve_by_owner(self, user_id) -> Wedding:
        wedding = self.dal.find_by_owner(user_id)
        if wedding is None:
            raise WeddingNotFoundError(user_id)
        return wedding

    def get_wedding(self, wedding_id) -> Wedding:
        wedding = self.dal.find_by_id(wedding_id)
        if wedding is None:
            raise WeddingNotFoundError(wedding_id)
        return wedding

    def get_public_wedding(self, wedding_id) -> Wedding:
        """Active wedding by id; inactive and unknown look the same"""
        wedding = self.dal.find_by_id(wedding_id)
        if wedding is None or not wedding.is_active:
            raise WeddingNotFoundError(wedding_id)
        return wedding

    def is_active_wedding(self, wedding_id) -> bool:
        return self.dal.is_active(wedding_id)

    def update_theme(
        self,
        wedding_id,
        theme: str,
        primary_color: str,
        secondary_color: str,
        font_family: str = None,
    ) -> Wedding:
        """Colors are stored as given; only presence is checked."""
        require_fields(theme=theme, primary_color=primary_color, secondary_color=secondary_color)
        wedding = self.get_wedding(wedding_id)

        validated_data = {
            'theme': theme,
            'primary_color': primary_color,
            'secondary_color': secondary_color,
        }
        if font_family:
            validated_data['font_family'] = font_family

        wedding = self.dal.update_wedding(wedding, validated_data)
        logger.info(f'Updated theme for wedding {wedding_id}')
        return wedding

    def update_details(self, wedding_id, couple_name: str = None, wedding_date=None) -> Wedding:
        """Update couple name and/or date. The slug never changes."""
        validated_data: dict[str, Any] = {}
        if couple_name is not None:
            require_fields(couple_name=couple_name)
            validated_data['couple_name'] = couple_name.strip()
        if wedding_date is not None:
            validated_data['wedding_date'] = wedding_date

        wedding = self.get_wedding(wedding_id)
        if not validated_data:
            return wedding

        wedding = self.dal.update_wedding(wedding, validated_data)
        logger.info(f'Updated details for wedding {wedding_id}: {list(validated_data)}')
        return wedding

    def set_active(self, wedding_id, is_active: bool) -> Wedding:
        wedding = self.get_wedding(wedding_id)
        wedding = self.dal.update_wedding(wedding, {'is_active': bool(is_active)})
        logger.info(f"Wedding {wedding_id} {'activated' if is_active else 'deactivated'}")
        return wedding

    def list_active_weddings(self) -> list[Wedding]:
        """Active weddings, newest first"""
        return list(self.dal.get_active_weddings_queryset())

    @transaction.atomic
    def delete_wedding(self, wedding_id) -> bool:
        """Delete a wedding with its content, guests and wishes"""
        wedding = self.get_wedding(wedding_id)
        self.dal.delete_wedding(wedding)
        logger.info(f'Deleted wedding {wedding_id}')
        return True
