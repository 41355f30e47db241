import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.accounts.serializers import UserCreateSerializer
from apps.accounts.serializers import UserSerializer
from apps.accounts.serializers import UserUpdateSerializer
from apps.shared.auth.gateway import Action
from apps.shared.auth.permissions import IsAdminPrincipal
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_identity_service

logger = logging.getLogger(__name__)


class BaseUserAPIView(BaseAPIView):
    """Base view for couple account management (admin only)"""

    permission_classes = [IsAdminPrincipal]

    def __init__(self, identity_service=None, **kwargs):
        super().__init__(**kwargs)
        self._identity_service = identity_service

    def get_service(self):
        return self._identity_service or get_identity_service()


@extend_schema(tags=['Users'])
class UserListCreateView(BaseUserAPIView):
    @extend_schema(responses=UserSerializer(many=True))
    def get(self, request):
        self.authorize(Action.LIST_USERS)
        users = self.get_service().list_users()
        return Response(UserSerializer(users, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(request=UserCreateSerializer, responses={201: UserSerializer})
    def post(self, request):
        """Create a couple account, optionally with its wedding"""
        self.authorize(Action.CREATE_USER)
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        service = self.get_service()
        if 'slug' in data:
            user = service.create_user_with_wedding(
                email=data['email'],
                password=data['password'],
                name=data['name'],
                slug=data['slug'],
                wedding_date=data['wedding_date'],
            )
        else:
            user = service.create_user(email=data['email'], password=data['password'], name=data['name'])

        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Users'])
class UserDetailView(BaseUserAPIView):
    @extend_schema(responses=UserSerializer)
    def get(self, request, user_id):
        self.authorize(Action.GET_USER)
        user = self.get_service().get_user(user_id)
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)

    @extend_schema(request=UserUpdateSerializer, responses=UserSerializer)
    def patch(self, request, user_id):
        """Profile, password and status change together or not at all"""
        self.authorize(Action.UPDATE_USER)
        serializer = UserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        if 'is_active' in data:
            self.authorize(Action.SET_USER_ACTIVE)

        user = self.get_service().update_account(
            user_id,
            name=data.get('name'),
            email=data.get('email'),
            password=data.get('password'),
            is_active=data.get('is_active'),
        )
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)

    def delete(self, request, user_id):
        self.authorize(Action.DELETE_USER)
        self.get_service().delete_user(user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
