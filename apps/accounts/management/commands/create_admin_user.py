import environ
from django.core.management import BaseCommand
from django.core.management import CommandError

from apps.accounts.models import Admin
from apps.shared.container import get_identity_service
from apps.shared.exceptions import AppError

env = environ.Env()


class Command(BaseCommand):
    help = 'Create the initial superadmin account'

    def add_arguments(self, parser):
        parser.add_argument('--username', default=env.str('ADMIN_USERNAME', default='admin'))
        parser.add_argument('--password', default=env.str('ADMIN_PASSWORD', default=''))
        parser.add_argument('--role', default=Admin.Role.SUPERADMIN, choices=Admin.Role.values)

    def handle(self, *args, **options):  # noqa: ARG002
        if not options['password']:
            raise CommandError('A password is required (--password or ADMIN_PASSWORD)')

        try:
            admin = get_identity_service().create_admin(
                username=options['username'],
                password=options['password'],
                role=options['role'],
            )
        except AppError as e:
            raise CommandError(e.message) from e

        self.stdout.write(self.style.SUCCESS(f'Admin "{admin.username}" ({admin.role}) has been created!'))
