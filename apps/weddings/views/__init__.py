from apps.weddings.views.content_views import EventDetailAPIView
from apps.weddings.views.content_views import EventListCreateAPIView
from apps.weddings.views.content_views import GalleryListCreateAPIView
from apps.weddings.views.content_views import GalleryPhotoDetailAPIView
from apps.weddings.views.content_views import MenuConfigAPIView
from apps.weddings.views.wedding_views import WeddingAPIView
from apps.weddings.views.wedding_views import WeddingListCreateAPIView
from apps.weddings.views.wedding_views import WeddingThemeAPIView

__all__ = [
    'EventDetailAPIView',
    'EventListCreateAPIView',
    'GalleryListCreateAPIView',
    'GalleryPhotoDetailAPIView',
    'MenuConfigAPIView',
    'WeddingAPIView',
    'WeddingListCreateAPIView',
    'WeddingThemeAPIView',
]
