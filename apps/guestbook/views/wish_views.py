import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.guestbook.serializers import WishCreateSerializer
from apps.guestbook.serializers import WishListQuerySerializer
from apps.guestbook.serializers import WishSerializer
from apps.guestbook.views.base import BaseGuestbookAPIView
from apps.shared.auth.gateway import Action

logger = logging.getLogger(__name__)


@extend_schema(tags=['Wishes'])
class WishListCreateAPIView(BaseGuestbookAPIView):
    """Public wishes wall"""

    @extend_schema(parameters=[WishListQuerySerializer], responses=WishSerializer(many=True))
    def get(self, request):
        self.authorize(Action.LIST_WISHES)
        query = WishListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        scope = self.resolve_scope(query.validated_data, public=True)
        wishes = self.get_service().list_wishes(scope, search=query.validated_data.get('search'))
        return Response(WishSerializer(wishes, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(request=WishCreateSerializer, responses={201: WishSerializer})
    def post(self, request):
        self.authorize(Action.SUBMIT_WISH)
        serializer = WishCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        wish = self.get_service().submit_wish(self.resolve_scope(data), name=data['name'], message=data['message'])
        return Response(WishSerializer(wish).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Wishes'])
class WishDetailAPIView(BaseGuestbookAPIView):
    def delete(self, request, wish_id):
        """Moderation: owners remove wishes on their own wedding"""
        service = self.get_service()
        scope = service.get_wish_scope(wish_id)
        # Unknown wishes and global ones carry no tenant: admin only
        self.authorize(Action.DELETE_WISH, tenant_id=scope.wedding_id if scope else None)

        service.delete_wish(wish_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
