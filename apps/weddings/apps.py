from django.apps import AppConfig


class WeddingsConfig(AppConfig):
    """Configuration for the Weddings application (tenants and their content)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.weddings'
    label = 'weddings'
    verbose_name = 'Weddings'
