from django.db import migrations
from django.db import models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='BlacklistedToken',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('jti', models.CharField(help_text='JWT ID (jti claim)', max_length=255, unique=True)),
                (
                    'principal_kind',
                    models.CharField(choices=[('admin', 'Admin'), ('user', 'User')], max_length=10),
                ),
                (
                    'principal_id',
                    models.CharField(help_text='Admin or User id the token was issued to', max_length=64),
                ),
                ('expires_at', models.DateTimeField(help_text='When this token expires')),
                (
                    'reason',
                    models.CharField(
                        default='logout',
                        help_text='Reason for blacklisting (logout, security, etc.)',
                        max_length=100,
                    ),
                ),
            ],
            options={
                'db_table': 'shared_blacklisted_tokens',
                'indexes': [
                    models.Index(fields=['principal_kind', 'principal_id'], name='blacklist_principal_idx'),
                    models.Index(fields=['expires_at'], name='blacklist_expires_idx'),
                ],
            },
        ),
    ]
