"""Platform operators: the Admin model."""

from django.conf import settings
from django.contrib.auth.hashers import check_password
from django.contrib.auth.hashers import make_password
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import UUIDModel


class Admin(UUIDModel):
    """
    An operator of the platform. Logs in with username + password and may act
    on every tenant. Optionally linked to a couple ``User`` account.
    """

    class Role(models.TextChoices):
        ADMIN = 'admin', _('Admin')
        SUPERADMIN = 'superadmin', _('Super admin')

    username = models.CharField(_('username'), max_length=150, unique=True)
    password = models.CharField(_('password'), max_length=128)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.ADMIN)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='admin_profile',
    )

    class Meta:
        db_table = 'accounts_admin'
        verbose_name = _('Admin')
        verbose_name_plural = _('Admins')

    def set_password(self, raw_password: str):
        self.password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        return check_password(raw_password, self.password)

    def __str__(self):
        return self.username
