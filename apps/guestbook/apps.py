from django.apps import AppConfig


class GuestbookConfig(AppConfig):
    """Configuration for the Guestbook application (RSVPs and wishes)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.guestbook'
    label = 'guestbook'
    verbose_name = 'Guestbook'
