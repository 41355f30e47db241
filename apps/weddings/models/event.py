from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import UUIDModel


class EventQuerySet(models.QuerySet):
    def for_wedding(self, wedding_id):
        return self.filter(wedding_id=wedding_id)

    def active(self):
        return self.filter(is_active=True)

    def in_display_order(self):
        """Ascending ``order``; equal orders keep creation order"""
        return self.order_by('order', 'created_at')


class Event(UUIDModel):
    """A ceremony on the invitation page (akad, resepsi, ...)."""

    class Type(models.TextChoices):
        AKAD = 'akad', _('Akad')
        RESEPSI = 'resepsi', _('Resepsi')

    wedding = models.ForeignKey('weddings.Wedding', on_delete=models.CASCADE, related_name='events')
    # Not restricted to Type: other ceremony kinds may be added
    type = models.CharField(max_length=50)
    date = models.DateField()
    # Display string, e.g. "09:00 - 11:00 WIB"
    time = models.CharField(max_length=100)
    location = models.CharField(max_length=255)
    address = models.TextField()
    map_url = models.URLField(max_length=500, null=True, blank=True)
    image_url = models.URLField(max_length=500, null=True, blank=True)
    is_active = models.BooleanField(default=True)
    order = models.IntegerField(default=0)

    objects = EventQuerySet.as_manager()

    class Meta:
        db_table = 'weddings_event'
        ordering = ['order', 'created_at']
        indexes = [
            models.Index(fields=['wedding', 'is_active', 'order'], name='event_wedding_order_idx'),
        ]

    def __str__(self):
        return f'{self.type} on {self.date}'
