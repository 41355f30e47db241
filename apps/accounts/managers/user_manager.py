"""
UserManager for couple accounts.
"""

from django.contrib.auth.base_user import BaseUserManager
from django.db import models


class UserQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def with_wedding(self):
        return self.select_related('wedding')

    def by_email(self, email: str):
        if not email:
            return self.none()
        return self.filter(email__iexact=email.strip())


class UserManager(BaseUserManager.from_queryset(UserQuerySet)):
    """
    Creates couple accounts with normalised (lowercased) emails and hashed
    passwords.
    """

    use_in_migrations = True

    def normalize_email(self, email):
        """Normalize email address (whole address lowercased)"""
        if email:
            return super().normalize_email(email.strip()).lower()
        return email

    def create_user(self, email: str, password: str, name: str = '', **extra_fields):
        """
        Create a couple account.

        Raises:
            ValueError: If email or password is missing
        """
        if not email:
            raise ValueError('Users must have an email address')
        if not password:
            raise ValueError('Users must have a password')

        extra_fields.setdefault('is_active', True)

        user = self.model(email=self.normalize_email(email), name=name, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def get_by_natural_key(self, username):
        return self.get(email__iexact=username)
