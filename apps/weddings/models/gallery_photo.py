from django.db import models

from apps.shared.base.models import UUIDModel


class GalleryPhotoQuerySet(models.QuerySet):
    def for_wedding(self, wedding_id):
        return self.filter(wedding_id=wedding_id)

    def active(self):
        return self.filter(is_active=True)

    def in_display_order(self):
        return self.order_by('order', 'created_at')


class GalleryPhoto(UUIDModel):
    wedding = models.ForeignKey('weddings.Wedding', on_delete=models.CASCADE, related_name='gallery_photos')
    image_url = models.URLField(max_length=500)
    caption = models.CharField(max_length=500, null=True, blank=True)
    # Object key in storage, when the image was uploaded through our bucket
    storage_key = models.CharField(max_length=500, null=True, blank=True)
    order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)

    objects = GalleryPhotoQuerySet.as_manager()

    class Meta:
        db_table = 'weddings_gallery_photo'
        ordering = ['order', 'created_at']
        indexes = [
            models.Index(fields=['wedding', 'is_active', 'order'], name='gallery_wedding_order_idx'),
        ]

    def __str__(self):
        return self.caption or self.image_url
