"""
Weddings models package
"""

from apps.weddings.models.event import Event
from apps.weddings.models.event import EventQuerySet
from apps.weddings.models.gallery_photo import GalleryPhoto
from apps.weddings.models.menu_config import MenuConfig
from apps.weddings.models.wedding import Wedding
from apps.weddings.models.wedding import WeddingManager
from apps.weddings.models.wedding import WeddingQuerySet

__all__ = [
    'Event',
    'EventQuerySet',
    'GalleryPhoto',
    'MenuConfig',
    'Wedding',
    'WeddingManager',
    'WeddingQuerySet',
]
