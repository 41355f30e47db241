from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import UUIDModel


class GuestbookQuerySet(models.QuerySet):
    def in_scope(self, scope):
        return self.filter(**scope.filter_kwargs())

    def newest_first(self):
        return self.order_by('-created_at')


class GuestQuerySet(GuestbookQuerySet):
    def search(self, search_term):
        if not search_term:
            return self
        return self.filter(name__icontains=search_term)

    def with_attendance(self, attendance):
        if not attendance or attendance == 'all':
            return self
        return self.filter(attendance=attendance)

    def attendance_counts(self):
        return self.aggregate(
            total=models.Count('id'),
            attending=models.Count('id', filter=models.Q(attendance=Guest.Attendance.HADIR)),
            not_attending=models.Count('id', filter=models.Q(attendance=Guest.Attendance.TIDAK_HADIR)),
            uncertain=models.Count('id', filter=models.Q(attendance=Guest.Attendance.BELUM_PASTI)),
        )


class WishQuerySet(GuestbookQuerySet):
    def search(self, search_term):
        if not search_term:
            return self
        return self.filter(models.Q(name__icontains=search_term) | models.Q(message__icontains=search_term))


class Guest(UUIDModel):
    """An RSVP. Immutable once submitted; removed only with its wedding."""

    class Attendance(models.TextChoices):
        HADIR = 'hadir', _('Attending')
        TIDAK_HADIR = 'tidak-hadir', _('Not attending')
        BELUM_PASTI = 'belum-pasti', _('Not sure yet')

    # Null for legacy guests that belong to no wedding
    wedding = models.ForeignKey(
        'weddings.Wedding',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='guests',
    )
    name = models.CharField(max_length=255)
    email = models.EmailField(null=True, blank=True)
    phone = models.CharField(max_length=50, null=True, blank=True)
    attendance = models.CharField(max_length=20, choices=Attendance.choices)
    # Only kept when attendance is "hadir"
    guest_count = models.PositiveIntegerField(null=True, blank=True)
    message = models.TextField(null=True, blank=True)

    objects = GuestQuerySet.as_manager()

    class Meta:
        db_table = 'guestbook_guest'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['wedding', 'attendance'], name='guest_wedding_attendance_idx'),
            models.Index(fields=['wedding', 'created_at'], name='guest_wedding_created_idx'),
        ]

    @property
    def effective_guest_count(self):
        return self.guest_count if self.attendance == self.Attendance.HADIR else None

    def __str__(self):
        return f'{self.name} ({self.attendance})'


class Wish(UUIDModel):
    wedding = models.ForeignKey(
        'weddings.Wedding',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='wishes',
    )
    name = models.CharField(max_length=255)
    message = models.TextField()

    objects = WishQuerySet.as_manager()

    class Meta:
        db_table = 'guestbook_wish'
        ordering = ['-created_at']
        verbose_name_plural = 'wishes'
        indexes = [
            models.Index(fields=['wedding', 'created_at'], name='wish_wedding_created_idx'),
        ]

    def __str__(self):
        return f'Wish from {self.name}'
