"""
Access Gateway: one decision point for "may this principal do this here".

Every view calls ``authorize`` before touching a service. Denials are opaque:
an owner asking about another tenant's resource, or one that does not exist,
gets the same Forbidden.
"""

import logging
from enum import Enum

from apps.shared.exceptions import AuthenticationError
from apps.shared.exceptions import PermissionError
from apps.shared.exceptions import permission_denied

logger = logging.getLogger(__name__)


class Action(str, Enum):
    # Public: open to everyone, tenant ignored
    RESOLVE_BY_SLUG = 'resolve_by_slug'
    LIST_EVENTS = 'list_events'
    LIST_GALLERY = 'list_gallery'
    GET_MENU_CONFIG = 'get_menu_config'
    LIST_WISHES = 'list_wishes'
    SUBMIT_RSVP = 'submit_rsvp'
    SUBMIT_WISH = 'submit_wish'

    # Tenant-scoped: admin or the owning couple
    UPDATE_THEME = 'update_theme'
    UPDATE_DETAILS = 'update_details'
    UPDATE_MENU_CONFIG = 'update_menu_config'
    ADD_EVENT = 'add_event'
    UPDATE_EVENT = 'update_event'
    DELETE_EVENT = 'delete_event'
    ADD_GALLERY_PHOTO = 'add_gallery_photo'
    DELETE_GALLERY_PHOTO = 'delete_gallery_photo'
    LIST_GUESTS = 'list_guests'
    EXPORT_GUESTS = 'export_guests'
    VIEW_DASHBOARD = 'view_dashboard'
    DELETE_WISH = 'delete_wish'

    # Owner may create a wedding for themselves only (tenant is their user id)
    CREATE_WEDDING = 'create_wedding'

    # Admin only
    CREATE_USER = 'create_user'
    LIST_USERS = 'list_users'
    GET_USER = 'get_user'
    UPDATE_USER = 'update_user'
    DELETE_USER = 'delete_user'
    SET_USER_ACTIVE = 'set_user_active'
    LIST_WEDDINGS = 'list_weddings'
    SET_WEDDING_ACTIVE = 'set_wedding_active'
    DELETE_WEDDING = 'delete_wedding'


PUBLIC_ACTIONS = frozenset({
    Action.RESOLVE_BY_SLUG,
    Action.LIST_EVENTS,
    Action.LIST_GALLERY,
    Action.GET_MENU_CONFIG,
    Action.LIST_WISHES,
    Action.SUBMIT_RSVP,
    Action.SUBMIT_WISH,
})

OWNER_ACTIONS = frozenset({
    Action.UPDATE_THEME,
    Action.UPDATE_DETAILS,
    Action.UPDATE_MENU_CONFIG,
    Action.ADD_EVENT,
    Action.UPDATE_EVENT,
    Action.DELETE_EVENT,
    Action.ADD_GALLERY_PHOTO,
    Action.DELETE_GALLERY_PHOTO,
    Action.LIST_GUESTS,
    Action.EXPORT_GUESTS,
    Action.VIEW_DASHBOARD,
    Action.DELETE_WISH,
})


class AccessGateway:
    """Authorization policy for admin, owner and anonymous principals"""

    def authorize(self, principal, action: Action, tenant_id=None) -> None:
        """
        Allow or reject ``action`` by ``principal`` on tenant ``tenant_id``.

        ``tenant_id`` is a wedding id, except for CREATE_WEDDING where it is
        the user id the wedding is being created for. A None tenant on a
        tenant-scoped action means global scope (admin only) or an unknown
        resource.

        Raises:
            AuthenticationError: anonymous caller on a non-public action
            PermissionError: authenticated caller not allowed
        """
        action = Action(action)

        if action in PUBLIC_ACTIONS:
            return

        if not principal.is_authenticated:
            logger.warning(f'Anonymous request rejected for action {action.value}')
            raise AuthenticationError('Authentication credentials were not provided', error_code='not_authenticated')

        if principal.is_admin:
            return

        if self._owner_allowed(principal, action, tenant_id):
            return

        logger.warning(f'Denied {action.value} for {principal} on tenant {tenant_id}')
        raise permission_denied(action.value)

    def is_allowed(self, principal, action: Action, tenant_id=None) -> bool:
        try:
            self.authorize(principal, action, tenant_id)
        except (AuthenticationError, PermissionError):
            return False
        return True

    def has_tenant_access(self, principal, tenant_id) -> bool:
        """Admin, or the owner of ``tenant_id``; these see a tenant even while it is hidden"""
        if not principal.is_authenticated:
            return False
        return principal.is_admin or principal.owns(tenant_id)

    def _owner_allowed(self, principal, action: Action, tenant_id) -> bool:
        if action == Action.CREATE_WEDDING:
            return tenant_id is not None and str(tenant_id) == str(principal.user_id)
        if action in OWNER_ACTIONS:
            return principal.owns(tenant_id)
        return False
