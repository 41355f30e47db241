from django.apps import AppConfig


class SharedConfig(AppConfig):
    """Token blacklist and the cross-app plumbing."""

    name = 'apps.shared'
    label = 'shared'
    verbose_name = 'Shared infrastructure'
