from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import UUIDModel

DEFAULT_THEME = 'rose'
DEFAULT_PRIMARY_COLOR = '#e11d48'
DEFAULT_SECONDARY_COLOR = '#ec4899'
DEFAULT_FONT_FAMILY = 'serif'


class WeddingQuerySet(models.QuerySet):
    """QuerySet for tenant lookups"""

    def active(self):
        return self.filter(is_active=True)

    def by_slug(self, slug):
        return self.filter(slug=slug)

    def for_owner(self, user_id):
        return self.filter(user_id=user_id)

    def newest_first(self):
        return self.order_by('-created_at')


class WeddingManager(models.Manager):
    def get_queryset(self):
        return WeddingQuerySet(self.model, using=self._db)

    def active(self):
        return self.get_queryset().active()

    def by_slug(self, slug):
        return self.get_queryset().by_slug(slug)

    def for_owner(self, user_id):
        return self.get_queryset().for_owner(user_id)


class Wedding(UUIDModel):
    """
    A tenant: one couple's invitation site.

    ``slug`` is the public routing key (``/<slug>``); ``user`` is the couple
    account that owns it. Deleting the user deletes the wedding, and deleting
    the wedding deletes its menu config, events, gallery, guests and wishes.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='wedding',
    )
    slug = models.SlugField(_('slug'), max_length=100, unique=True)
    couple_name = models.CharField(_('couple name'), max_length=255)
    wedding_date = models.DateField(_('wedding date'))

    theme = models.CharField(max_length=50, default=DEFAULT_THEME)
    primary_color = models.CharField(max_length=50, default=DEFAULT_PRIMARY_COLOR)
    secondary_color = models.CharField(max_length=50, default=DEFAULT_SECONDARY_COLOR)
    font_family = models.CharField(max_length=100, default=DEFAULT_FONT_FAMILY)

    is_active = models.BooleanField(default=True, db_index=True)

    objects = WeddingManager()

    class Meta:
        db_table = 'weddings_wedding'
        ordering = ['-created_at']
        verbose_name = _('Wedding')
        verbose_name_plural = _('Weddings')

    def __str__(self):
        return f'{self.couple_name} ({self.slug})'
