from django.db import models

from apps.shared.base.models import UUIDModel

SECTION_HOME = 'home'
SECTION_DETAILS = 'details'
SECTION_RSVP = 'rsvp'
SECTION_GALLERY = 'gallery'
SECTION_WISHES = 'wishes'

SECTION_KEYS = (SECTION_HOME, SECTION_DETAILS, SECTION_RSVP, SECTION_GALLERY, SECTION_WISHES)
DEFAULT_CUSTOM_ORDER = ','.join(SECTION_KEYS)


class MenuConfig(UUIDModel):
    """Which invitation sections are visible, and in what order."""

    wedding = models.OneToOneField('weddings.Wedding', on_delete=models.CASCADE, related_name='menu_config')

    show_home = models.BooleanField(default=True)
    show_details = models.BooleanField(default=True)
    show_rsvp = models.BooleanField(default=True)
    show_gallery = models.BooleanField(default=True)
    show_wishes = models.BooleanField(default=True)

    # Comma-separated permutation of SECTION_KEYS
    custom_order = models.CharField(max_length=100, default=DEFAULT_CUSTOM_ORDER)

    class Meta:
        db_table = 'weddings_menu_config'

    @property
    def order(self) -> list[str]:
        return [key.strip() for key in self.custom_order.split(',') if key.strip()]

    def is_visible(self, section: str) -> bool:
        return bool(getattr(self, f'show_{section}', False))

    def navigation(self) -> list[str]:
        """Visible section keys in display order"""
        return [section for section in self.order if self.is_visible(section)]

    def __str__(self):
        return f'Menu for wedding {self.wedding_id}'
