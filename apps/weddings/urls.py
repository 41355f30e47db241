from django.urls import path

from apps.weddings.views import EventDetailAPIView
from apps.weddings.views import EventListCreateAPIView
from apps.weddings.views import GalleryListCreateAPIView
from apps.weddings.views import GalleryPhotoDetailAPIView
from apps.weddings.views import MenuConfigAPIView
from apps.weddings.views import WeddingAPIView
from apps.weddings.views import WeddingListCreateAPIView
from apps.weddings.views import WeddingThemeAPIView

app_name = 'weddings'


urlpatterns = [
    # Tenants
    path('weddings', WeddingListCreateAPIView.as_view(), name='wedding-list'),  # GET (admin), POST
    path('weddings/<uuid:wedding_id>/theme', WeddingThemeAPIView.as_view(), name='wedding-theme'),  # PATCH
    path('weddings/<uuid:wedding_id>/menu', MenuConfigAPIView.as_view(), name='wedding-menu'),  # GET, PATCH
    # Content
    path('weddings/<uuid:wedding_id>/events', EventListCreateAPIView.as_view(), name='wedding-events'),  # GET, POST
    path('weddings/<uuid:wedding_id>/gallery', GalleryListCreateAPIView.as_view(), name='wedding-gallery'),  # GET, POST
    path('events/<uuid:event_id>', EventDetailAPIView.as_view(), name='event-detail'),  # PATCH, DELETE
    path('gallery/<uuid:photo_id>', GalleryPhotoDetailAPIView.as_view(), name='gallery-photo-detail'),  # DELETE
    # Public page by slug (GET); details/removal by id (PATCH, DELETE)
    path('weddings/<str:key>', WeddingAPIView.as_view(), name='wedding-detail'),
]
