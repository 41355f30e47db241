from typing import Callable

from apps.accounts.dal.admin_dal import AdminDAL
from apps.accounts.dal.user_dal import UserDAL
from apps.accounts.services.auth_service import AuthService
from apps.accounts.services.identity_service import IdentityService
from apps.guestbook.dal import GuestDAL
from apps.guestbook.dal import WishDAL
from apps.guestbook.services import GuestbookService
from apps.shared.auth.jwt_service import JWTService
from apps.shared.storage.factory import StorageFactory
from apps.weddings.dal import EventDAL
from apps.weddings.dal import GalleryDAL
from apps.weddings.dal import MenuConfigDAL
from apps.weddings.dal import WeddingDAL
from apps.weddings.services.content_service import ContentService
from apps.weddings.services.tenant_service import TenantService


class Container:
    """
    Simple DI Container for managing service dependencies.

    Allows easy service creation and dependency injection without
    the complexity of enterprise factory patterns.
    """

    def __init__(self):
        # Service factory functions - can be overridden for testing
        self._dal_factories = {}
        self._service_factories = {}

        self._setup_default_factories()

    def _setup_default_factories(self):
        """Set up default factory functions for services"""
        self._dal_factories = {
            'user_dal': UserDAL,
            'admin_dal': AdminDAL,
            'wedding_dal': WeddingDAL,
            'menu_dal': MenuConfigDAL,
            'event_dal': EventDAL,
            'gallery_dal': GalleryDAL,
            'guest_dal': GuestDAL,
            'wish_dal': WishDAL,
        }

        self._service_factories = {
            'storage': StorageFactory.create_storage_service,
            'jwt_service': JWTService,
        }

    def tenant_service(self) -> TenantService:
        return TenantService(
            dal=self._dal_factories['wedding_dal'](),
            menu_dal=self._dal_factories['menu_dal'](),
            user_dal=self._dal_factories['user_dal'](),
        )

    def content_service(self) -> ContentService:
        return ContentService(
            menu_dal=self._dal_factories['menu_dal'](),
            event_dal=self._dal_factories['event_dal'](),
            gallery_dal=self._dal_factories['gallery_dal'](),
            tenant_service=self.tenant_service(),
            storage=self._service_factories['storage'](),
        )

    def guestbook_service(self) -> GuestbookService:
        return GuestbookService(
            guest_dal=self._dal_factories['guest_dal'](),
            wish_dal=self._dal_factories['wish_dal'](),
            tenant_service=self.tenant_service(),
        )

    def identity_service(self) -> IdentityService:
        tenant_service = self.tenant_service()
        return IdentityService(
            dal=self._dal_factories['user_dal'](),
            admin_dal=self._dal_factories['admin_dal'](),
            tenant_service=tenant_service,
            content_service=self.content_service(),
        )

    def auth_service(self) -> AuthService:
        return AuthService(
            identity_service=self.identity_service(),
            jwt_service=self._service_factories['jwt_service'](),
        )

    # Override methods for testing
    def override_storage(self, factory: Callable):
        """Override storage factory for testing"""
        self._service_factories['storage'] = factory

    def override_jwt_service(self, factory: Callable):
        self._service_factories['jwt_service'] = factory

    def reset_to_defaults(self):
        """Reset all factories to defaults - useful for test cleanup"""
        self._setup_default_factories()


# Global container instance
_container = Container()


def get_container() -> Container:
    """Get the global container instance"""
    return _container


def get_tenant_service() -> TenantService:
    return get_container().tenant_service()


def get_content_service() -> ContentService:
    return get_container().content_service()


def get_guestbook_service() -> GuestbookService:
    return get_container().guestbook_service()


def get_identity_service() -> IdentityService:
    return get_container().identity_service()


def get_auth_service() -> AuthService:
    return get_container().auth_service()
