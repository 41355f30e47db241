import uuid

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.accounts.tests.factories import AdminFactory
from apps.accounts.tests.factories import UserFactory
from apps.shared.tests.utils import PrincipalAuthMixin
from apps.weddings.models import Event
from apps.weddings.models import GalleryPhoto
from apps.weddings.models import Wedding
from apps.weddings.tests.factories import EventFactory
from apps.weddings.tests.factories import GalleryPhotoFactory
from apps.weddings.tests.factories import InactiveWeddingFactory
from apps.weddings.tests.factories import WeddingFactory


class WeddingAPITestBase(PrincipalAuthMixin, APITestCase):
    def setUp(self):
        self.admin = AdminFactory()
        self.owner = UserFactory()
        self.wedding = WeddingFactory(user=self.owner, slug='rina-budi')
        self.other_wedding = WeddingFactory(slug='sari-andi')


class WeddingEndpointsTest(WeddingAPITestBase):
    """Tenant creation, public page and settings"""

    def test_public_page_by_slug(self):
        EventFactory(wedding=self.wedding)

        response = self.client.get(reverse('weddings:wedding-detail', kwargs={'key': 'rina-budi'}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['wedding']['slug'], 'rina-budi')
        self.assertEqual(len(response.data['events']), 1)
        self.assertEqual(response.data['navigation'], ['home', 'details', 'rsvp', 'gallery', 'wishes'])

    def test_public_page_inactive_is_not_found(self):
        InactiveWeddingFactory(slug='hidden')

        response = self.client.get(reverse('weddings:wedding-detail', kwargs={'key': 'hidden'}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_owner_creates_own_wedding(self):
        user = UserFactory()
        self.authenticate_owner(user)

        response = self.client.post(
            reverse('weddings:wedding-list'),
            {'slug': 'dewi-agus', 'couple_name': 'Dewi & Agus', 'wedding_date': '2026-11-01'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Wedding.objects.get(slug='dewi-agus').user, user)

    def test_owner_cannot_create_for_someone_else(self):
        user = UserFactory()
        self.authenticate_owner(user)

        response = self.client.post(
            reverse('weddings:wedding-list'),
            {'user_id': str(UserFactory().id), 'slug': 'x-y', 'couple_name': 'X & Y', 'wedding_date': '2026-11-01'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_creates_wedding_for_user(self):
        user = UserFactory()
        self.authenticate_admin(self.admin)

        response = self.client.post(
            reverse('weddings:wedding-list'),
            {'user_id': str(user.id), 'slug': 'dewi-agus', 'couple_name': 'Dewi & Agus', 'wedding_date': '2026-11-01'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_create_wedding_slug_conflict(self):
        self.authenticate_admin(self.admin)

        response = self.client.post(
            reverse('weddings:wedding-list'),
            {'user_id': str(UserFactory().id), 'slug': 'rina-budi', 'couple_name': 'R', 'wedding_date': '2026-11-01'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['details']['field'], 'slug')

    def test_create_wedding_anonymous(self):
        response = self.client.post(
            reverse('weddings:wedding-list'),
            {'slug': 'dewi-agus', 'couple_name': 'Dewi & Agus', 'wedding_date': '2026-11-01'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_weddings_admin_only(self):
        self.authenticate_owner(self.owner)
        self.assertEqual(self.client.get(reverse('weddings:wedding-list')).status_code, status.HTTP_403_FORBIDDEN)

        self.authenticate_admin(self.admin)
        response = self.client.get(reverse('weddings:wedding-list'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)

    def test_owner_updates_theme(self):
        self.authenticate_owner(self.owner)

        response = self.client.patch(
            reverse('weddings:wedding-theme', kwargs={'wedding_id': self.wedding.id}),
            {'theme': 'sage', 'primary_color': '#84a98c', 'secondary_color': '#cad2c5'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['theme'], 'sage')

    def test_owner_cannot_update_other_theme(self):
        self.authenticate_owner(self.owner)

        response = self.client.patch(
            reverse('weddings:wedding-theme', kwargs={'wedding_id': self.other_wedding.id}),
            {'theme': 'sage', 'primary_color': '#84a98c', 'secondary_color': '#cad2c5'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.other_wedding.refresh_from_db()
        self.assertEqual(self.other_wedding.theme, 'rose')

    def test_anonymous_cannot_update_theme(self):
        response = self.client.patch(
            reverse('weddings:wedding-theme', kwargs={'wedding_id': self.wedding.id}),
            {'theme': 'sage', 'primary_color': '#84a98c', 'secondary_color': '#cad2c5'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.wedding.refresh_from_db()
        self.assertEqual(self.wedding.theme, 'rose')
        self.assertEqual(self.wedding.primary_color, '#e11d48')
        self.assertEqual(self.wedding.secondary_color, '#ec4899')

    def test_owner_updates_details_but_not_visibility(self):
        self.authenticate_owner(self.owner)
        url = reverse('weddings:wedding-detail', kwargs={'key': self.wedding.id})

        response = self.client.patch(url, {'couple_name': 'Rina & Budi S.'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['slug'], 'rina-budi')

        response = self.client.patch(url, {'is_active': False}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_deactivates_wedding(self):
        self.authenticate_admin(self.admin)

        response = self.client.patch(
            reverse('weddings:wedding-detail', kwargs={'key': self.wedding.id}),
            {'is_active': False},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data['is_active'])

    def test_admin_deletes_wedding(self):
        self.authenticate_admin(self.admin)

        response = self.client.delete(reverse('weddings:wedding-detail', kwargs={'key': self.wedding.id}))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Wedding.objects.filter(id=self.wedding.id).exists())

    def test_owner_cannot_delete_wedding(self):
        self.authenticate_owner(self.owner)

        response = self.client.delete(reverse('weddings:wedding-detail', kwargs={'key': self.wedding.id}))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class ContentEndpointsTest(WeddingAPITestBase):
    """Menu, events and gallery"""

    def test_menu_public_defaults(self):
        response = self.client.get(reverse('weddings:wedding-menu', kwargs={'wedding_id': self.wedding.id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['custom_order'], 'home,details,rsvp,gallery,wishes')

    def test_owner_updates_menu(self):
        self.authenticate_owner(self.owner)

        response = self.client.patch(
            reverse('weddings:wedding-menu', kwargs={'wedding_id': self.wedding.id}),
            {'show_gallery': False, 'custom_order': 'home,rsvp,details,gallery,wishes'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['navigation'], ['home', 'rsvp', 'details', 'wishes'])

    def test_menu_invalid_order(self):
        self.authenticate_owner(self.owner)

        response = self.client.patch(
            reverse('weddings:wedding-menu', kwargs={'wedding_id': self.wedding.id}),
            {'custom_order': 'home,rsvp'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('custom_order', response.data['field_errors'])

    def test_events_public_list(self):
        EventFactory(wedding=self.wedding, order=1, type='resepsi')
        EventFactory(wedding=self.wedding, order=0, type='akad')

        response = self.client.get(reverse('weddings:wedding-events', kwargs={'wedding_id': self.wedding.id}))

        self.assertEqual([e['type'] for e in response.data], ['akad', 'resepsi'])

    def test_owner_adds_event(self):
        self.authenticate_owner(self.owner)

        response = self.client.post(
            reverse('weddings:wedding-events', kwargs={'wedding_id': self.wedding.id}),
            {
                'type': 'resepsi',
                'date': '2026-12-12',
                'time': '19:00 - 21:00 WIB',
                'location': 'Gedung Serbaguna',
                'address': 'Jl. Sudirman 10',
            },
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Event.objects.filter(wedding=self.wedding).count(), 1)

    def test_owner_cannot_touch_foreign_event(self):
        event = EventFactory(wedding=self.other_wedding)
        self.authenticate_owner(self.owner)

        response = self.client.patch(
            reverse('weddings:event-detail', kwargs={'event_id': event.id}),
            {'location': 'Elsewhere'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        response = self.client.delete(reverse('weddings:event-detail', kwargs={'event_id': event.id}))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Event.objects.filter(id=event.id).exists())

    def test_unknown_event_forbidden_for_owner_not_found_for_admin(self):
        url = reverse('weddings:event-detail', kwargs={'event_id': uuid.uuid4()})

        self.authenticate_owner(self.owner)
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_403_FORBIDDEN)

        self.authenticate_admin(self.admin)
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_404_NOT_FOUND)

    def test_owner_updates_event(self):
        event = EventFactory(wedding=self.wedding)
        self.authenticate_owner(self.owner)

        response = self.client.patch(
            reverse('weddings:event-detail', kwargs={'event_id': event.id}),
            {'location': 'Gedung Serbaguna'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['location'], 'Gedung Serbaguna')
        self.assertEqual(response.data['order'], event.order)

    def test_gallery_add_and_delete(self):
        self.authenticate_owner(self.owner)

        response = self.client.post(
            reverse('weddings:wedding-gallery', kwargs={'wedding_id': self.wedding.id}),
            {'image_url': 'https://cdn.example.com/1.jpg', 'caption': 'Lamaran'},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        response = self.client.delete(reverse('weddings:gallery-photo-detail', kwargs={'photo_id': response.data['id']}))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(GalleryPhoto.objects.exists())

    def test_gallery_public_list(self):
        GalleryPhotoFactory(wedding=self.wedding)
        GalleryPhotoFactory(wedding=self.wedding, is_active=False)

        response = self.client.get(reverse('weddings:wedding-gallery', kwargs={'wedding_id': self.wedding.id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

    def test_owner_cannot_delete_foreign_photo(self):
        photo = GalleryPhotoFactory(wedding=self.other_wedding)
        self.authenticate_owner(self.owner)

        response = self.client.delete(reverse('weddings:gallery-photo-detail', kwargs={'photo_id': photo.id}))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class HiddenTenantContentTest(WeddingAPITestBase):
    """A deactivated wedding's content is gone for the public, kept for admin and owner"""

    def setUp(self):
        super().setUp()
        self.wedding.is_active = False
        self.wedding.save()
        EventFactory(wedding=self.wedding)
        GalleryPhotoFactory(wedding=self.wedding)

    def public_urls(self, wedding_id):
        return [
            reverse('weddings:wedding-menu', kwargs={'wedding_id': wedding_id}),
            reverse('weddings:wedding-events', kwargs={'wedding_id': wedding_id}),
            reverse('weddings:wedding-gallery', kwargs={'wedding_id': wedding_id}),
        ]

    def test_anonymous_gets_not_found(self):
        for url in self.public_urls(self.wedding.id):
            with self.subTest(url=url):
                response = self.client.get(url)

                self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
                self.assertEqual(response.data['error_code'], 'wedding_not_found')

    def test_other_owner_gets_not_found(self):
        self.authenticate_owner(self.other_wedding.user)

        for url in self.public_urls(self.wedding.id):
            with self.subTest(url=url):
                self.assertEqual(self.client.get(url).status_code, status.HTTP_404_NOT_FOUND)

    def test_owner_still_sees_content(self):
        self.authenticate_owner(self.owner)

        events = self.client.get(reverse('weddings:wedding-events', kwargs={'wedding_id': self.wedding.id}))
        gallery = self.client.get(reverse('weddings:wedding-gallery', kwargs={'wedding_id': self.wedding.id}))

        self.assertEqual(events.status_code, status.HTTP_200_OK)
        self.assertEqual(len(events.data), 1)
        self.assertEqual(len(gallery.data), 1)

    def test_admin_still_sees_content(self):
        self.authenticate_admin(self.admin)

        for url in self.public_urls(self.wedding.id):
            with self.subTest(url=url):
                self.assertEqual(self.client.get(url).status_code, status.HTTP_200_OK)

    def test_unknown_wedding_is_not_found(self):
        for url in self.public_urls(uuid.uuid4()):
            with self.subTest(url=url):
                self.assertEqual(self.client.get(url).status_code, status.HTTP_404_NOT_FOUND)

    def test_unknown_wedding_is_not_found_for_admin(self):
        self.authenticate_admin(self.admin)

        response = self.client.get(reverse('weddings:wedding-menu', kwargs={'wedding_id': uuid.uuid4()}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
