import logging
import uuid

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.shared.auth.gateway import Action
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_content_service
from apps.shared.container import get_tenant_service
from apps.shared.exceptions import ValidationError
from apps.weddings.serializers import WeddingCreateSerializer
from apps.weddings.serializers import WeddingDetailsSerializer
from apps.weddings.serializers import WeddingPageSerializer
from apps.weddings.serializers import WeddingSerializer
from apps.weddings.serializers import WeddingThemeSerializer

logger = logging.getLogger(__name__)


class BaseWeddingAPIView(BaseAPIView):
    """Base view for tenant operations"""

    _tenant_service = None
    _content_service = None

    def get_service(self):
        return self.get_tenant_service()

    def get_tenant_service(self):
        if self._tenant_service is None:
            self._tenant_service = get_tenant_service()
        return self._tenant_service

    def get_content_service(self):
        if self._content_service is None:
            self._content_service = get_content_service()
        return self._content_service

    def ensure_visible(self, wedding_id):
        """
        Resolve the tenant behind a by-id read.

        The public sees active weddings only; admins and the owner also see a
        hidden one. Unknown ids are not found either way.
        """
        if self.has_tenant_access(wedding_id):
            return self.get_tenant_service().get_wedding(wedding_id)
        return self.get_tenant_service().get_public_wedding(wedding_id)


@extend_schema(tags=['Weddings'])
class WeddingListCreateAPIView(BaseWeddingAPIView):
    """List active weddings (admin) or create a wedding"""

    @extend_schema(responses=WeddingSerializer(many=True))
    def get(self, request):
        self.authorize(Action.LIST_WEDDINGS)
        weddings = self.get_tenant_service().list_active_weddings()
        return Response(WeddingSerializer(weddings, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(request=WeddingCreateSerializer, responses={201: WeddingSerializer})
    def post(self, request):
        """Owners create their own wedding; admins name the user"""
        serializer = WeddingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)

        user_id = data.pop('user_id', None)
        if user_id is None and request.user.is_authenticated and not request.user.is_admin:
            user_id = request.user.user_id
        self.authorize(Action.CREATE_WEDDING, tenant_id=user_id)
        if user_id is None:
            raise ValidationError('user_id is required', field_errors={'user_id': ['This field is required.']})

        wedding = self.get_tenant_service().create_wedding(user_id=user_id, **data)
        return Response(WeddingSerializer(wedding).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Weddings'])
class WeddingAPIView(BaseWeddingAPIView):
    """
    GET by slug: the public invitation page.
    PATCH/DELETE by wedding id: details, visibility and removal.
    """

    @extend_schema(responses=WeddingPageSerializer)
    def get(self, request, key):
        self.authorize(Action.RESOLVE_BY_SLUG)
        page = self.get_content_service().get_wedding_page(key)
        return Response(WeddingPageSerializer(page).data, status=status.HTTP_200_OK)

    @extend_schema(request=WeddingDetailsSerializer, responses=WeddingSerializer)
    def patch(self, request, key):
        wedding_id = self._parse_id(key)
        serializer = WeddingDetailsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)

        is_active = data.pop('is_active', None)
        if data or is_active is None:
            self.authorize(Action.UPDATE_DETAILS, tenant_id=wedding_id)
        if is_active is not None:
            self.authorize(Action.SET_WEDDING_ACTIVE, tenant_id=wedding_id)

        service = self.get_tenant_service()
        wedding = service.update_details(wedding_id, **data)
        if is_active is not None:
            wedding = service.set_active(wedding_id, is_active)
        return Response(WeddingSerializer(wedding).data, status=status.HTTP_200_OK)

    def delete(self, request, key):
        wedding_id = self._parse_id(key)
        self.authorize(Action.DELETE_WEDDING, tenant_id=wedding_id)
        self.get_tenant_service().delete_wedding(wedding_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @staticmethod
    def _parse_id(key):
        try:
            return uuid.UUID(str(key))
        except ValueError:
            return None


@extend_schema(tags=['Weddings'])
class WeddingThemeAPIView(BaseWeddingAPIView):
    @extend_schema(request=WeddingThemeSerializer, responses=WeddingSerializer)
    def patch(self, request, wedding_id):
        self.authorize(Action.UPDATE_THEME, tenant_id=wedding_id)
        serializer = WeddingThemeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        wedding = self.get_tenant_service().update_theme(wedding_id, **serializer.validated_data)
        return Response(WeddingSerializer(wedding).data, status=status.HTTP_200_OK)
