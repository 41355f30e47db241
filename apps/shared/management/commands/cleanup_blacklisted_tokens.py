from django.core.management.base import BaseCommand

from apps.shared.auth.jwt_service import JWTService


class Command(BaseCommand):
    """
    Remove blacklist entries for tokens that are past their expiry.

    Usage: python manage.py cleanup_blacklisted_tokens
    """

    help = 'Delete blacklisted access tokens that have already expired'

    def handle(self, *args, **options):
        count = JWTService().cleanup_expired()
        self.stdout.write(self.style.SUCCESS(f'Removed {count} expired blacklisted tokens'))
