"""
Principals: who is making a request.

Exactly one of these ends up on ``request.user`` for every API call.
``AnonymousPrincipal`` is DRF's ``UNAUTHENTICATED_USER`` so unauthenticated
requests still carry a principal object.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class AdminPrincipal:
    admin_id: UUID
    role: str = 'admin'

    kind = 'admin'
    is_authenticated = True
    is_anonymous = False
    is_admin = True

    @property
    def principal_id(self) -> UUID:
        return self.admin_id

    def __str__(self):
        return f'admin:{self.admin_id}'


@dataclass(frozen=True)
class OwnerPrincipal:
    """A couple account; ``wedding_id`` is None until their wedding is set up."""

    user_id: UUID
    wedding_id: Optional[UUID] = None

    kind = 'user'
    role = 'owner'
    is_authenticated = True
    is_anonymous = False
    is_admin = False

    @property
    def principal_id(self) -> UUID:
        return self.user_id

    def owns(self, wedding_id) -> bool:
        return self.wedding_id is not None and wedding_id is not None and str(self.wedding_id) == str(wedding_id)

    def __str__(self):
        return f'user:{self.user_id}'


class AnonymousPrincipal:
    kind = 'anonymous'
    role = None
    principal_id = None
    is_authenticated = False
    is_anonymous = True
    is_admin = False

    def __eq__(self, other):
        return isinstance(other, AnonymousPrincipal)

    def __hash__(self):
        return hash(self.kind)

    def __str__(self):
        return 'anonymous'
