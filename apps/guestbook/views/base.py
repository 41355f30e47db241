from apps.guestbook.scope import GuestScope
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_guestbook_service
from apps.shared.container import get_tenant_service
from apps.shared.exceptions import ValidationError


class BaseGuestbookAPIView(BaseAPIView):
    """Base view for guest book operations"""

    def __init__(self, guestbook_service=None, tenant_service=None, **kwargs):
        super().__init__(**kwargs)
        self._guestbook_service = guestbook_service
        self._tenant_service = tenant_service

    def get_service(self):
        return self._guestbook_service or get_guestbook_service()

    def get_tenant_service(self):
        return self._tenant_service or get_tenant_service()

    def resolve_scope(self, data, default_to_own=False, public=False) -> GuestScope:
        """
        Scope from validated ``wedding_id``/``slug`` input.

        With neither given, ``default_to_own`` points an owner at their own
        wedding; everyone else gets the global guest book. On ``public`` reads
        a ``wedding_id`` must name an active wedding unless the caller is an
        admin or its owner.
        """
        wedding_id = data.get('wedding_id')
        slug = data.get('slug')

        if wedding_id and slug:
            raise ValidationError(
                'Give either wedding_id or slug, not both',
                field_errors={'non_field_errors': ['Give either wedding_id or slug, not both.']},
                error_code='ambiguous_scope',
            )
        if wedding_id:
            if public and not self.has_tenant_access(wedding_id):
                self.get_tenant_service().get_public_wedding(wedding_id)
            return GuestScope.tenant(wedding_id)
        if slug:
            wedding = self.get_tenant_service().resolve_by_slug(slug)
            return GuestScope.tenant(wedding.id)

        principal = self.request.user
        if default_to_own and principal.is_authenticated and not principal.is_admin and principal.wedding_id:
            return GuestScope.tenant(principal.wedding_id)
        return GuestScope.global_scope()
