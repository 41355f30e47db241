import logging
from typing import Any
from typing import Optional

from django.db import transaction

from apps.shared.exceptions import StorageServiceError
from apps.shared.storage.factory import StorageFactory
from apps.weddings.dal import EventDAL
from apps.weddings.dal import GalleryDAL
from apps.weddings.dal import MenuConfigDAL
from apps.weddings.models import Event
from apps.weddings.models import GalleryPhoto
from apps.weddings.models import MenuConfig
from apps.weddings.services.tenant_service import TenantService
from apps.weddings.validators import require_fields
from apps.weddings.validators import validate_menu_order

logger = logging.getLogger(__name__)

MENU_FLAG_FIELDS = ('show_home', 'show_details', 'show_rsvp', 'show_gallery', 'show_wishes')
EVENT_FIELDS = ('type', 'date', 'time', 'location', 'address', 'map_url', 'image_url', 'is_active', 'order')

DEFAULT_EVENT_LOCATION = 'TBA'
DEFAULT_EVENT_ADDRESS = 'Lokasi akan ditentukan'
DEFAULT_EVENTS = (
    {'type': Event.Type.AKAD, 'time': '09:00 - 11:00 WIB', 'order': 0},
    {'type': Event.Type.RESEPSI, 'time': '14:00 - 17:00 WIB', 'order': 1},
)


class ContentService:
    """Service for a wedding's page content: menu, events and gallery"""

    def __init__(self, menu_dal=None, event_dal=None, gallery_dal=None, tenant_service=None, storage=None):
        self.menu_dal = menu_dal or MenuConfigDAL()
        self.event_dal = event_dal or EventDAL()
        self.gallery_dal = gallery_dal or GalleryDAL()
        self.tenant_service = tenant_service or TenantService()
        self.storage = storage or StorageFactory.create_storage_service()

    # =============================================================================
    # PUBLIC PAGE
    # =============================================================================

    def get_wedding_page(self, slug: str) -> dict[str, Any]:
        """Everything the public invitation page needs for one slug"""
        wedding = self.tenant_service.resolve_by_slug(slug)
        menu_config = self.get_menu_config(wedding.id)
        return {
            'wedding': wedding,
            'events': self.list_events(wedding.id),
            'gallery': self.list_gallery(wedding.id),
            'menu_config': menu_config,
            'navigation': self.navigation(menu_config),
        }

    # =============================================================================
    # MENU
    # =============================================================================

    def get_menu_config(self, wedding_id) -> Optional[MenuConfig]:
        return self.menu_dal.find_for_wedding(wedding_id)

    @transaction.atomic
    def update_menu_config(self, wedding_id, partial: dict[str, Any]) -> MenuConfig:
        """
        Apply a partial update of visibility flags and/or ``custom_order``.
        A missing config is created with defaults first.

        Raises:
            ValidationError: ``custom_order`` is not a permutation of the sections
        """
        validated_data = {field: bool(partial[field]) for field in MENU_FLAG_FIELDS if partial.get(field) is not None}
        if partial.get('custom_order') is not None:
            validated_data['custom_order'] = validate_menu_order(partial['custom_order'])

        self.tenant_service.get_wedding(wedding_id)
        menu_config = self.menu_dal.get_or_create_default(wedding_id)
        if not validated_data:
            return menu_config

        menu_config = self.menu_dal.update_menu_config(menu_config, validated_data)
        logger.info(f'Updated menu config for wedding {wedding_id}: {list(validated_data)}')
        return menu_config

    @staticmethod
    def navigation(menu_config: Optional[MenuConfig]) -> list[str]:
        """Visible section keys in order; no config means every section in default order"""
        if menu_config is None:
            return MenuConfig().navigation()
        return menu_config.navigation()

    # =============================================================================
    # EVENTS
    # =============================================================================

    def add_event(
        self,
        wedding_id,
        type: str,
        date,
        time: str,
        location: str,
        address: str,
        map_url: str = None,
        image_url: str = None,
        order: int = 0,
    ) -> Event:
        """Add an event. Several events may share a type."""
        require_fields(type=type, date=date, time=time, location=location, address=address)
        self.tenant_service.get_wedding(wedding_id)

        event = self.event_dal.create_event({
            'wedding_id': wedding_id,
            'type': type,
            'date': date,
            'time': time,
            'location': location,
            'address': address,
            'map_url': map_url or None,
            'image_url': image_url or None,
            'order': order or 0,
        })
        logger.info(f'Added {type} event {event.id} to wedding {wedding_id}')
        return event

    def create_default_events(self, wedding_id, wedding_date) -> list[Event]:
        """The akad and resepsi placeholders every new wedding starts with"""
        events = [
            Event(
                wedding_id=wedding_id,
                date=wedding_date,
                location=DEFAULT_EVENT_LOCATION,
                address=DEFAULT_EVENT_ADDRESS,
                **defaults,
            )
            for defaults in DEFAULT_EVENTS
        ]
        return self.event_dal.bulk_create_events(events)

    def list_events(self, wedding_id) -> list[Event]:
        """Active events by ascending order, ties in creation order"""
        return list(self.event_dal.get_active_events_queryset(wedding_id))

    def get_event_wedding_id(self, event_id):
        """Owning wedding of an event, or None if there is no such event"""
        return self.event_dal.find_wedding_id(event_id)

    def update_event(self, event_id, partial: dict[str, Any]) -> Event:
        validated_data = {field: partial[field] for field in EVENT_FIELDS if field in partial}
        required = {field: validated_data[field] for field in ('type', 'date', 'time', 'location', 'address')
                    if field in validated_data}
        if required:
            require_fields(**required)
        for field in ('map_url', 'image_url'):
            if field in validated_data:
                validated_data[field] = validated_data[field] or None

        event = self.event_dal.get_by_id(event_id)
        event = self.event_dal.update_event(event, validated_data)
        logger.info(f'Updated event {event_id}: {list(validated_data)}')
        return event

    def delete_event(self, event_id) -> bool:
        event = self.event_dal.get_by_id(event_id)
        self.event_dal.delete_event(event)
        logger.info(f'Deleted event {event_id}')
        return True

    # =============================================================================
    # GALLERY
    # =============================================================================

    def add_gallery_photo(
        self,
        wedding_id,
        image_url: str = None,
        caption: str = None,
        order: int = 0,
        storage_key: str = None,
    ) -> GalleryPhoto:
        if not image_url and storage_key:
            image_url = self.storage.public_url(storage_key)
        require_fields(image_url=image_url)
        self.tenant_service.get_wedding(wedding_id)

        photo = self.gallery_dal.create_photo({
            'wedding_id': wedding_id,
            'image_url': image_url,
            'caption': caption or None,
            'order': order or 0,
            'storage_key': storage_key or None,
        })
        logger.info(f'Added gallery photo {photo.id} to wedding {wedding_id}')
        return photo

    def list_gallery(self, wedding_id) -> list[GalleryPhoto]:
        return list(self.gallery_dal.get_active_photos_queryset(wedding_id))

    def get_photo_wedding_id(self, photo_id):
        return self.gallery_dal.find_wedding_id(photo_id)

    def delete_gallery_photo(self, photo_id) -> bool:
        """
        Delete the photo record, then try to remove the stored object.
        Storage failures are logged and never undo or fail the delete.
        """
        photo = self.gallery_dal.get_by_id(photo_id)
        storage_key = photo.storage_key
        self.gallery_dal.delete_photo(photo)
        logger.info(f'Deleted gallery photo {photo_id}')

        if storage_key:
            try:
                self.storage.delete_file(storage_key)
            except StorageServiceError as storage_error:
                logger.warning(
                    f'Non-critical: Failed to delete stored object {storage_key} for photo {photo_id}: {storage_error}'
                )
        return True
