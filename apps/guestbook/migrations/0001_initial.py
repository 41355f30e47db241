import uuid

import django.db.models.deletion
from django.db import migrations
from django.db import models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ('weddings', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Guest',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('email', models.EmailField(blank=True, max_length=254, null=True)),
                ('phone', models.CharField(blank=True, max_length=50, null=True)),
                (
                    'attendance',
                    models.CharField(
                        choices=[
                            ('hadir', 'Attending'),
                            ('tidak-hadir', 'Not attending'),
                            ('belum-pasti', 'Not sure yet'),
                        ],
                        max_length=20,
                    ),
                ),
                ('guest_count', models.PositiveIntegerField(blank=True, null=True)),
                ('message', models.TextField(blank=True, null=True)),
                (
                    'wedding',
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='guests',
                        to='weddings.wedding',
                    ),
                ),
            ],
            options={
                'db_table': 'guestbook_guest',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['wedding', 'attendance'], name='guest_wedding_attendance_idx'),
                    models.Index(fields=['wedding', 'created_at'], name='guest_wedding_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Wish',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('message', models.TextField()),
                (
                    'wedding',
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='wishes',
                        to='weddings.wedding',
                    ),
                ),
            ],
            options={
                'verbose_name_plural': 'wishes',
                'db_table': 'guestbook_wish',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['wedding', 'created_at'], name='wish_wedding_created_idx'),
                ],
            },
        ),
    ]
