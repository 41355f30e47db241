from rest_framework.views import APIView

from apps.shared.auth.authentication import PrincipalJWTAuthentication
from apps.shared.auth.gateway import AccessGateway


class BaseAPIView(APIView):
    """
    Unified base class for all API views.

    Features:
    - Bearer JWT authentication (anonymous when no header is sent)
    - Access gateway check before any service call
    - Service layer integration

    Note: Exception handling is centralized in the DRF exception handler.
    """

    authentication_classes = (PrincipalJWTAuthentication,)
    gateway = AccessGateway()

    def authorize(self, action, tenant_id=None):
        self.gateway.authorize(self.request.user, action, tenant_id)

    def has_tenant_access(self, tenant_id) -> bool:
        return self.gateway.has_tenant_access(self.request.user, tenant_id)

    def get_service(self):
        """
        Subclasses must implement this to return appropriate service instance.

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError("Subclasses must implement get_service()")
