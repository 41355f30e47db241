import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.accounts.serializers import LoginResponseSerializer
from apps.accounts.serializers import LoginSerializer
from apps.accounts.serializers import ProfileSerializer
from apps.shared.auth.permissions import IsAuthenticatedPrincipal
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_auth_service

logger = logging.getLogger(__name__)


class BaseAuthAPIView(BaseAPIView):
    """Base view for authentication operations"""

    def __init__(self, auth_service=None, **kwargs):
        super().__init__(**kwargs)
        self._auth_service = auth_service

    def get_service(self):
        return self._auth_service or get_auth_service()


@extend_schema(tags=['Authentication'])
class LoginView(BaseAuthAPIView):
    """Exchange admin or couple credentials for an access token"""

    permission_classes = [AllowAny]

    @extend_schema(request=LoginSerializer, responses=LoginResponseSerializer)
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().login(
            identifier=serializer.validated_data['identifier'],
            password=serializer.validated_data['password'],
        )
        return Response(LoginResponseSerializer(result).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Authentication'])
class LogoutView(BaseAuthAPIView):
    """Revoke the bearer token used for this request"""

    permission_classes = [IsAuthenticatedPrincipal]

    @extend_schema(request=None, responses={200: None})
    def post(self, request):
        self.get_service().logout(request.auth)
        logger.info(f'{request.user} logged out')
        return Response({'message': 'Logged out successfully'}, status=status.HTTP_200_OK)


@extend_schema(tags=['Authentication'])
class MeView(BaseAuthAPIView):
    permission_classes = [IsAuthenticatedPrincipal]

    @extend_schema(responses=ProfileSerializer)
    def get(self, request):
        profile = self.get_service().get_profile(request.user)
        return Response(ProfileSerializer(profile).data, status=status.HTTP_200_OK)
