import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations
from django.db import models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Wedding',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('slug', models.SlugField(max_length=100, unique=True, verbose_name='slug')),
                ('couple_name', models.CharField(max_length=255, verbose_name='couple name')),
                ('wedding_date', models.DateField(verbose_name='wedding date')),
                ('theme', models.CharField(default='rose', max_length=50)),
                ('primary_color', models.CharField(default='#e11d48', max_length=50)),
                ('secondary_color', models.CharField(default='#ec4899', max_length=50)),
                ('font_family', models.CharField(default='serif', max_length=100)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                (
                    'user',
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='wedding',
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                'verbose_name': 'Wedding',
                'verbose_name_plural': 'Weddings',
                'db_table': 'weddings_wedding',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='MenuConfig',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('show_home', models.BooleanField(default=True)),
                ('show_details', models.BooleanField(default=True)),
                ('show_rsvp', models.BooleanField(default=True)),
                ('show_gallery', models.BooleanField(default=True)),
                ('show_wishes', models.BooleanField(default=True)),
                ('custom_order', models.CharField(default='home,details,rsvp,gallery,wishes', max_length=100)),
                (
                    'wedding',
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='menu_config',
                        to='weddings.wedding',
                    ),
                ),
            ],
            options={
                'db_table': 'weddings_menu_config',
            },
        ),
        migrations.CreateModel(
            name='Event',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(max_length=50)),
                ('date', models.DateField()),
                ('time', models.CharField(max_length=100)),
                ('location', models.CharField(max_length=255)),
                ('address', models.TextField()),
                ('map_url', models.URLField(blank=True, max_length=500, null=True)),
                ('image_url', models.URLField(blank=True, max_length=500, null=True)),
                ('is_active', models.BooleanField(default=True)),
                ('order', models.IntegerField(default=0)),
                (
                    'wedding',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='events',
                        to='weddings.wedding',
                    ),
                ),
            ],
            options={
                'db_table': 'weddings_event',
                'ordering': ['order', 'created_at'],
                'indexes': [
                    models.Index(fields=['wedding', 'is_active', 'order'], name='event_wedding_order_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='GalleryPhoto',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('image_url', models.URLField(max_length=500)),
                ('caption', models.CharField(blank=True, max_length=500, null=True)),
                ('storage_key', models.CharField(blank=True, max_length=500, null=True)),
                ('order', models.IntegerField(default=0)),
                ('is_active', models.BooleanField(default=True)),
                (
                    'wedding',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='gallery_photos',
                        to='weddings.wedding',
                    ),
                ),
            ],
            options={
                'db_table': 'weddings_gallery_photo',
                'ordering': ['order', 'created_at'],
                'indexes': [
                    models.Index(fields=['wedding', 'is_active', 'order'], name='gallery_wedding_order_idx'),
                ],
            },
        ),
    ]
