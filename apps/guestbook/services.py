import logging
from typing import Any

from apps.guestbook.dal import GuestDAL
from apps.guestbook.dal import WishDAL
from apps.guestbook.models import Guest
from apps.guestbook.models import Wish
from apps.guestbook.scope import GuestScope
from apps.shared.exceptions import ValidationError
from apps.weddings.exceptions import WeddingNotFoundError
from apps.weddings.services.tenant_service import TenantService

logger = logging.getLogger(__name__)


class GuestbookService:
    """RSVPs and wishes: public submission and admin/owner reads"""

    def __init__(self, guest_dal=None, wish_dal=None, tenant_service=None):
        self.guest_dal = guest_dal or GuestDAL()
        self.wish_dal = wish_dal or WishDAL()
        self.tenant_service = tenant_service or TenantService()

    # =============================================================================
    # RSVP
    # =============================================================================

    def submit_rsvp(
        self,
        scope: GuestScope,
        name: str,
        attendance: str,
        email: str = None,
        phone: str = None,
        guest_count: int = None,
        message: str = None,
    ) -> Guest:
        """
        Store an RSVP. ``guest_count`` is dropped unless attending.

        Raises:
            ValidationError: blank name, unknown attendance, bad guest count
            WeddingNotFoundError: tenant scope naming no active wedding
        """
        field_errors = {}
        if not name or not name.strip():
            field_errors['name'] = ['This field is required.']
        if attendance not in Guest.Attendance.values:
            field_errors['attendance'] = [f"Must be one of {', '.join(Guest.Attendance.values)}"]
        if attendance == Guest.Attendance.HADIR and guest_count is not None and guest_count < 1:
            field_errors['guest_count'] = ['Ensure this value is greater than or equal to 1.']
        if field_errors:
            raise ValidationError('Invalid RSVP', field_errors=field_errors, error_code='invalid_rsvp')

        self._ensure_open(scope)

        guest = self.guest_dal.create_guest(scope, {
            'name': name.strip(),
            'email': email or None,
            'phone': phone or None,
            'attendance': attendance,
            'guest_count': guest_count if attendance == Guest.Attendance.HADIR else None,
            'message': message or None,
        })
        logger.info(f'RSVP {guest.id} ({attendance}) recorded in scope {scope}')
        return guest

    def list_guests(self, scope: GuestScope, search: str = None, attendance: str = None) -> list[Guest]:
        """Newest first; ``attendance='all'`` or None means no filter"""
        queryset = self.guest_dal.get_guests_queryset(scope).search(search).with_attendance(attendance)
        return list(queryset)

    def export_guests_rows(self, scope: GuestScope) -> list[dict[str, Any]]:
        """Flat rows for spreadsheet export, newest first"""
        return [
            {
                'name': guest.name,
                'email': guest.email or '',
                'phone': guest.phone or '',
                'attendance': guest.attendance,
                'guest_count': guest.effective_guest_count,
                'message': guest.message or '',
                'created_at': guest.created_at,
            }
            for guest in self.guest_dal.get_guests_queryset(scope)
        ]

    def compute_dashboard_stats(self, scope: GuestScope) -> dict[str, int]:
        counts = self.guest_dal.get_attendance_counts(scope)
        return {
            'total': counts['total'] or 0,
            'attending': counts['attending'] or 0,
            'not_attending': counts['not_attending'] or 0,
            'uncertain': counts['uncertain'] or 0,
            'total_wishes': self.wish_dal.count_wishes(scope),
        }

    # =============================================================================
    # WISHES
    # =============================================================================

    def submit_wish(self, scope: GuestScope, name: str, message: str) -> Wish:
        field_errors = {}
        if not name or not name.strip():
            field_errors['name'] = ['This field is required.']
        if not message or not message.strip():
            field_errors['message'] = ['This field is required.']
        if field_errors:
            raise ValidationError('Invalid wish', field_errors=field_errors, error_code='invalid_wish')

        self._ensure_open(scope)

        wish = self.wish_dal.create_wish(scope, {'name': name.strip(), 'message': message.strip()})
        logger.info(f'Wish {wish.id} recorded in scope {scope}')
        return wish

    def list_wishes(self, scope: GuestScope, search: str = None) -> list[Wish]:
        """Newest first; search matches name or message"""
        return list(self.wish_dal.get_wishes_queryset(scope).search(search))

    def get_wish_scope(self, wish_id):
        """Scope a wish belongs to, or None if there is no such wish"""
        found, wedding_id = self.wish_dal.find_wedding_id(wish_id)
        if not found:
            return None
        return GuestScope.tenant(wedding_id) if wedding_id else GuestScope.global_scope()

    def delete_wish(self, wish_id) -> bool:
        wish = self.wish_dal.get_by_id(wish_id)
        self.wish_dal.delete_wish(wish)
        logger.info(f'Deleted wish {wish_id}')
        return True

    def _ensure_open(self, scope: GuestScope):
        """Tenant submissions need an existing, active wedding"""
        if not scope.is_global and not self.tenant_service.is_active_wedding(scope.wedding_id):
            raise WeddingNotFoundError(scope.wedding_id)
