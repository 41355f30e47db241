import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.shared.auth.gateway import Action
from apps.weddings.models import MenuConfig
from apps.weddings.serializers import EventCreateSerializer
from apps.weddings.serializers import EventSerializer
from apps.weddings.serializers import EventUpdateSerializer
from apps.weddings.serializers import GalleryPhotoCreateSerializer
from apps.weddings.serializers import GalleryPhotoSerializer
from apps.weddings.serializers import MenuConfigSerializer
from apps.weddings.serializers import MenuConfigUpdateSerializer
from apps.weddings.views.wedding_views import BaseWeddingAPIView

logger = logging.getLogger(__name__)


class BaseContentAPIView(BaseWeddingAPIView):
    def get_service(self):
        return self.get_content_service()


@extend_schema(tags=['Menu'])
class MenuConfigAPIView(BaseContentAPIView):
    @extend_schema(responses=MenuConfigSerializer)
    def get(self, request, wedding_id):
        """Menu for a visible wedding; defaults when none is stored"""
        self.authorize(Action.GET_MENU_CONFIG, tenant_id=wedding_id)
        self.ensure_visible(wedding_id)
        menu_config = self.get_service().get_menu_config(wedding_id) or MenuConfig()
        return Response(MenuConfigSerializer(menu_config).data, status=status.HTTP_200_OK)

    @extend_schema(request=MenuConfigUpdateSerializer, responses=MenuConfigSerializer)
    def patch(self, request, wedding_id):
        self.authorize(Action.UPDATE_MENU_CONFIG, tenant_id=wedding_id)
        serializer = MenuConfigUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        menu_config = self.get_service().update_menu_config(wedding_id, serializer.validated_data)
        return Response(MenuConfigSerializer(menu_config).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Events'])
class EventListCreateAPIView(BaseContentAPIView):
    @extend_schema(responses=EventSerializer(many=True))
    def get(self, request, wedding_id):
        self.authorize(Action.LIST_EVENTS, tenant_id=wedding_id)
        self.ensure_visible(wedding_id)
        events = self.get_service().list_events(wedding_id)
        return Response(EventSerializer(events, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(request=EventCreateSerializer, responses={201: EventSerializer})
    def post(self, request, wedding_id):
        self.authorize(Action.ADD_EVENT, tenant_id=wedding_id)
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        event = self.get_service().add_event(wedding_id, **serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Events'])
class EventDetailAPIView(BaseContentAPIView):
    """Update or delete one event; unknown events are Forbidden to owners"""

    @extend_schema(request=EventUpdateSerializer, responses=EventSerializer)
    def patch(self, request, event_id):
        service = self.get_service()
        self.authorize(Action.UPDATE_EVENT, tenant_id=service.get_event_wedding_id(event_id))
        serializer = EventUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        event = service.update_event(event_id, serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_200_OK)

    def delete(self, request, event_id):
        service = self.get_service()
        self.authorize(Action.DELETE_EVENT, tenant_id=service.get_event_wedding_id(event_id))
        service.delete_event(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Gallery'])
class GalleryListCreateAPIView(BaseContentAPIView):
    @extend_schema(responses=GalleryPhotoSerializer(many=True))
    def get(self, request, wedding_id):
        self.authorize(Action.LIST_GALLERY, tenant_id=wedding_id)
        self.ensure_visible(wedding_id)
        photos = self.get_service().list_gallery(wedding_id)
        return Response(GalleryPhotoSerializer(photos, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(request=GalleryPhotoCreateSerializer, responses={201: GalleryPhotoSerializer})
    def post(self, request, wedding_id):
        self.authorize(Action.ADD_GALLERY_PHOTO, tenant_id=wedding_id)
        serializer = GalleryPhotoCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        photo = self.get_service().add_gallery_photo(wedding_id, **serializer.validated_data)
        return Response(GalleryPhotoSerializer(photo).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Gallery'])
class GalleryPhotoDetailAPIView(BaseContentAPIView):
    def delete(self, request, photo_id):
        service = self.get_service()
        self.authorize(Action.DELETE_GALLERY_PHOTO, tenant_id=service.get_photo_wedding_id(photo_id))
        service.delete_gallery_photo(photo_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
