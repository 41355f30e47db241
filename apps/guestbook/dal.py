from typing import Any

from django.db.models import QuerySet

from apps.guestbook.models import Guest
from apps.guestbook.models import Wish
from apps.guestbook.scope import GuestScope
from apps.shared.decorators.database import handle_db_errors


class GuestDAL:
    """Data Access Layer for RSVP rows. Every query is bound to a GuestScope."""

    @handle_db_errors(operation_type='create', model_name='Guest')
    def create_guest(self, scope: GuestScope, guest_data: dict[str, Any]) -> Guest:
        return Guest.objects.create(wedding_id=scope.wedding_id, **guest_data)

    def get_guests_queryset(self, scope: GuestScope) -> QuerySet[Guest]:
        return Guest.objects.in_scope(scope).newest_first()

    @handle_db_errors(operation_type='read', model_name='Guest')
    def get_attendance_counts(self, scope: GuestScope) -> dict[str, int]:
        return Guest.objects.in_scope(scope).attendance_counts()


class WishDAL:
    """Data Access Layer for wishes. Every query is bound to a GuestScope."""

    @handle_db_errors(operation_type='create', model_name='Wish')
    def create_wish(self, scope: GuestScope, wish_data: dict[str, Any]) -> Wish:
        return Wish.objects.create(wedding_id=scope.wedding_id, **wish_data)

    def get_wishes_queryset(self, scope: GuestScope) -> QuerySet[Wish]:
        return Wish.objects.in_scope(scope).newest_first()

    @handle_db_errors(operation_type='read', model_name='Wish')
    def count_wishes(self, scope: GuestScope) -> int:
        return Wish.objects.in_scope(scope).count()

    @handle_db_errors(operation_type='read', model_name='Wish')
    def get_by_id(self, wish_id) -> Wish:
        return Wish.objects.get(id=wish_id)

    @handle_db_errors(operation_type='read', model_name='Wish')
    def find_wedding_id(self, wish_id):
        """(found, wedding_id): a wish may exist with no wedding"""
        row = Wish.objects.filter(id=wish_id).values_list('wedding_id', flat=True)
        return (True, row[0]) if row else (False, None)

    @handle_db_errors(operation_type='delete', model_name='Wish')
    def delete_wish(self, wish: Wish) -> bool:
        wish.delete()
        return True
