"""Couple accounts: the User model (``AUTH_USER_MODEL``)."""

from typing import ClassVar

from django.contrib.auth.base_user import AbstractBaseUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.accounts.managers.user_manager import UserManager
from apps.shared.base.models import UUIDModel


class User(AbstractBaseUser, UUIDModel):
    """
    A couple account. Logs in with email + password and owns at most one
    Wedding (``user.wedding``). Admins are a separate principal class, see
    ``Admin``.
    """

    email = models.EmailField(_('email address'), unique=True)
    name = models.CharField(_('name'), max_length=255)
    is_active = models.BooleanField(
        default=True,
        db_index=True,
        help_text=_('Deactivated accounts cannot log in and their tokens stop working'),
    )

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS: ClassVar[list[str]] = ['name']

    objects = UserManager()

    class Meta:
        db_table = 'accounts_user'
        verbose_name = _('User')
        verbose_name_plural = _('Users')
        ordering = ['-created_at']

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.__class__.objects.normalize_email(self.email)
        if self.name:
            self.name = self.name.strip()
        super().save(*args, **kwargs)

    @property
    def owned_wedding(self):
        """The wedding this user owns, or None"""
        return getattr(self, 'wedding', None)

    def __str__(self):
        return self.email

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', is_active={self.is_active})>"
