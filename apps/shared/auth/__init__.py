"""
Authentication and permissions

Import directly from submodules:
- from .authentication import PrincipalJWTAuthentication
- from .jwt_service import JWTService
- from .gateway import AccessGateway, Action
- from .principals import AdminPrincipal, OwnerPrincipal, AnonymousPrincipal
- from .permissions import IsAdminPrincipal, IsAuthenticatedPrincipal
"""
