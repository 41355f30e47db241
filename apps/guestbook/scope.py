"""
GuestScope: which guest book a query reads or writes.

``GuestScope.tenant(wedding_id)`` is one wedding's guest book.
``GuestScope.global_scope()`` is the legacy guest book of rows that belong to
no wedding. There is no implicit default: every query takes a scope.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

GLOBAL = 'global'
TENANT = 'tenant'


@dataclass(frozen=True)
class GuestScope:
    kind: str
    wedding_id: Optional[UUID] = None

    def __post_init__(self):
        if self.kind == TENANT and self.wedding_id is None:
            raise ValueError('Tenant scope requires a wedding id')
        if self.kind == GLOBAL and self.wedding_id is not None:
            raise ValueError('Global scope cannot name a wedding')
        if self.kind not in (GLOBAL, TENANT):
            raise ValueError(f'Unknown guest scope: {self.kind}')

    @classmethod
    def global_scope(cls) -> 'GuestScope':
        return cls(kind=GLOBAL)

    @classmethod
    def tenant(cls, wedding_id) -> 'GuestScope':
        return cls(kind=TENANT, wedding_id=wedding_id)

    @property
    def is_global(self) -> bool:
        return self.kind == GLOBAL

    def filter_kwargs(self) -> dict:
        if self.is_global:
            return {'wedding__isnull': True}
        return {'wedding_id': self.wedding_id}

    def __str__(self):
        return GLOBAL if self.is_global else f'{TENANT}:{self.wedding_id}'
