from typing import Any
from typing import Optional

from django.db.models import QuerySet

from apps.shared.decorators.database import handle_db_errors
from apps.weddings.models import Event
from apps.weddings.models import GalleryPhoto
from apps.weddings.models import MenuConfig


class MenuConfigDAL:
    """Data Access Layer for MenuConfig"""

    @handle_db_errors(operation_type='read', model_name='MenuConfig')
    def find_for_wedding(self, wedding_id) -> Optional[MenuConfig]:
        return MenuConfig.objects.filter(wedding_id=wedding_id).first()

    @handle_db_errors(operation_type='create', model_name='MenuConfig', unique_fields=('wedding',))
    def create_default(self, wedding_id) -> MenuConfig:
        return MenuConfig.objects.create(wedding_id=wedding_id)

    @handle_db_errors(operation_type='create', model_name='MenuConfig')
    def get_or_create_default(self, wedding_id) -> MenuConfig:
        menu_config, _ = MenuConfig.objects.get_or_create(wedding_id=wedding_id)
        return menu_config

    @handle_db_errors(operation_type='update', model_name='MenuConfig')
    def update_menu_config(self, menu_config: MenuConfig, validated_data: dict[str, Any]) -> MenuConfig:
        for field, value in validated_data.items():
            setattr(menu_config, field, value)
        menu_config.save(update_fields=[*validated_data.keys(), 'updated_at'])
        return menu_config


class EventDAL:
    """Data Access Layer for wedding Event rows"""

    @handle_db_errors(operation_type='create', model_name='Event')
    def create_event(self, event_data: dict[str, Any]) -> Event:
        return Event.objects.create(**event_data)

    @handle_db_errors(operation_type='create', model_name='Event')
    def bulk_create_events(self, events: list[Event]) -> list[Event]:
        return Event.objects.bulk_create(events)

    @handle_db_errors(operation_type='read', model_name='Event')
    def get_by_id(self, event_id) -> Event:
        return Event.objects.get(id=event_id)

    @handle_db_errors(operation_type='read', model_name='Event')
    def find_wedding_id(self, event_id):
        return Event.objects.filter(id=event_id).values_list('wedding_id', flat=True).first()

    def get_active_events_queryset(self, wedding_id) -> QuerySet[Event]:
        return Event.objects.for_wedding(wedding_id).active().in_display_order()

    @handle_db_errors(operation_type='update', model_name='Event')
    def update_event(self, event: Event, validated_data: dict[str, Any]) -> Event:
        for field, value in validated_data.items():
            setattr(event, field, value)
        event.save()
        return event

    @handle_db_errors(operation_type='delete', model_name='Event')
    def delete_event(self, event: Event) -> bool:
        event.delete()
        return True


class GalleryDAL:
    """Data Access Layer for GalleryPhoto rows"""

    @handle_db_errors(operation_type='create', model_name='GalleryPhoto')
    def create_photo(self, photo_data: dict[str, Any]) -> GalleryPhoto:
        return GalleryPhoto.objects.create(**photo_data)

    @handle_db_errors(operation_type='read', model_name='GalleryPhoto')
    def get_by_id(self, photo_id) -> GalleryPhoto:
        return GalleryPhoto.objects.get(id=photo_id)

    @handle_db_errors(operation_type='read', model_name='GalleryPhoto')
    def find_wedding_id(self, photo_id):
        return GalleryPhoto.objects.filter(id=photo_id).values_list('wedding_id', flat=True).first()

    def get_active_photos_queryset(self, wedding_id) -> QuerySet[GalleryPhoto]:
        return GalleryPhoto.objects.for_wedding(wedding_id).active().in_display_order()

    @handle_db_errors(operation_type='delete', model_name='GalleryPhoto')
    def delete_photo(self, photo: GalleryPhoto) -> bool:
        photo.delete()
        return True
