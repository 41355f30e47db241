"""
Shared models for the application
"""

import uuid

from django.db import models
from django.utils import timezone


class BaseModel(models.Model):
    """Base model with created_at and updated_at fields"""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class UUIDModel(BaseModel):
    """Base model keyed by an opaque UUID instead of a sequential integer"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        abstract = True


class BlacklistedToken(BaseModel):
    """
    Revoked access tokens.

    A token whose ``jti`` appears here is rejected even before it expires.
    Rows are only useful until ``expires_at``; after that the signature
    check rejects the token anyway and ``cleanup_expired`` may drop them.
    """

    PRINCIPAL_ADMIN = 'admin'
    PRINCIPAL_USER = 'user'
    PRINCIPAL_KIND_CHOICES = [
        (PRINCIPAL_ADMIN, 'Admin'),
        (PRINCIPAL_USER, 'User'),
    ]

    jti = models.CharField(max_length=255, unique=True, help_text='JWT ID (jti claim)')
    principal_kind = models.CharField(max_length=10, choices=PRINCIPAL_KIND_CHOICES)
    principal_id = models.CharField(max_length=64, help_text='Admin or User id the token was issued to')
    expires_at = models.DateTimeField(help_text='When this token expires')
    reason = models.CharField(
        max_length=100, default='logout', help_text='Reason for blacklisting (logout, security, etc.)'
    )

    class Meta:
        db_table = 'shared_blacklisted_tokens'
        indexes = [
            models.Index(fields=['principal_kind', 'principal_id'], name='blacklist_principal_idx'),
            models.Index(fields=['expires_at'], name='blacklist_expires_idx'),
        ]

    def __str__(self):
        return f'Blacklisted token {self.jti} for {self.principal_kind}:{self.principal_id}'

    @classmethod
    def is_blacklisted(cls, jti):
        """Check if a token is blacklisted by JTI"""
        return cls.objects.filter(jti=jti).exists()

    @classmethod
    def cleanup_expired(cls):
        """Remove expired blacklisted tokens from database"""
        count, _ = cls.objects.filter(expires_at__lt=timezone.now()).delete()
        return count
