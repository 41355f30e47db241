import uuid
from datetime import date
from unittest.mock import patch

from django.test import TestCase

from apps.accounts.exceptions import UserNotFoundError
from apps.accounts.tests.factories import UserFactory
from apps.guestbook.models import Guest
from apps.guestbook.models import Wish
from apps.guestbook.tests.factories import GuestFactory
from apps.guestbook.tests.factories import WishFactory
from apps.shared.exceptions import ConflictError
from apps.shared.exceptions import ValidationError
from apps.weddings.dal import WeddingDAL
from apps.weddings.exceptions import SlugTakenError
from apps.weddings.exceptions import WeddingAlreadyExistsError
from apps.weddings.exceptions import WeddingNotFoundError
from apps.weddings.models import Event
from apps.weddings.models import MenuConfig
from apps.weddings.models import Wedding
from apps.weddings.services import TenantService
from apps.weddings.tests.factories import EventFactory
from apps.weddings.tests.factories import InactiveWeddingFactory
from apps.weddings.tests.factories import WeddingFactory


class CreateWeddingTest(TestCase):
    def setUp(self):
        self.service = TenantService()
        self.user = UserFactory()

    def create(self, **overrides):
        data = {
            'user_id': self.user.id,
            'slug': 'rina-budi',
            'couple_name': 'Rina & Budi',
            'wedding_date': date(2026, 12, 12),
        }
        data.update(overrides)
        return self.service.create_wedding(**data)

    def test_create_wedding_with_defaults(self):
        wedding = self.create()

        self.assertEqual(wedding.theme, 'rose')
        self.assertEqual(wedding.primary_color, '#e11d48')
        self.assertEqual(wedding.secondary_color, '#ec4899')
        self.assertEqual(wedding.font_family, 'serif')
        self.assertTrue(wedding.is_active)

        menu_config = MenuConfig.objects.get(wedding=wedding)
        self.assertEqual(menu_config.custom_order, 'home,details,rsvp,gallery,wishes')
        self.assertEqual(menu_config.navigation(), ['home', 'details', 'rsvp', 'gallery', 'wishes'])

    def test_create_wedding_custom_theme(self):
        wedding = self.create(theme='sage', primary_color='#84a98c')

        self.assertEqual(wedding.theme, 'sage')
        self.assertEqual(wedding.primary_color, '#84a98c')
        self.assertEqual(wedding.secondary_color, '#ec4899')

    def test_slug_taken(self):
        WeddingFactory(slug='rina-budi')

        with self.assertRaises(SlugTakenError):
            self.create()

    def test_slug_race_resolves_to_conflict(self):
        """The unique index decides when the pre-insert check misses a concurrent insert"""
        WeddingFactory(slug='rina-budi')

        with patch.object(WeddingDAL, 'slug_exists', return_value=False):
            with self.assertRaises(ConflictError) as context:
                self.create()

        self.assertEqual(context.exception.error_code, 'wedding_slug_conflict')
        self.assertEqual(Wedding.objects.filter(slug='rina-budi').count(), 1)
        self.assertFalse(MenuConfig.objects.filter(wedding__user=self.user).exists())

    def test_user_already_owns_a_wedding(self):
        WeddingFactory(user=self.user)

        with self.assertRaises(WeddingAlreadyExistsError):
            self.create(slug='another-slug')

    def test_invalid_slugs(self):
        for slug in ['', 'Rina-Budi', 'rina budi', 'rina--budi', '-rina', 'rina_budi', 'a' * 101]:
            with self.subTest(slug=slug):
                with self.assertRaises(ValidationError):
                    self.create(slug=slug)

    def test_unknown_user(self):
        with self.assertRaises(UserNotFoundError):
            self.create(user_id='00000000-0000-0000-0000-000000000000')

    def test_blank_couple_name(self):
        with self.assertRaises(ValidationError):
            self.create(couple_name='   ')


class TenantLookupTest(TestCase):
    def setUp(self):
        self.service = TenantService()

    def test_resolve_by_slug(self):
        wedding = WeddingFactory(slug='rina-budi')

        self.assertEqual(self.service.resolve_by_slug('rina-budi'), wedding)

    def test_resolve_inactive_looks_like_unknown(self):
        InactiveWeddingFactory(slug='rina-budi')

        with self.assertRaises(WeddingNotFoundError):
            self.service.resolve_by_slug('rina-budi')
        with self.assertRaises(WeddingNotFoundError):
            self.service.resolve_by_slug('nobody')

    def test_get_public_wedding(self):
        wedding = WeddingFactory()

        self.assertEqual(self.service.get_public_wedding(wedding.id), wedding)

    def test_get_public_wedding_hides_inactive_and_unknown(self):
        hidden = InactiveWeddingFactory()

        for wedding_id in (hidden.id, uuid.uuid4()):
            with self.subTest(wedding_id=wedding_id):
                with self.assertRaises(WeddingNotFoundError):
                    self.service.get_public_wedding(wedding_id)

    def test_resolve_by_owner(self):
        wedding = WeddingFactory()

        self.assertEqual(self.service.resolve_by_owner(wedding.user_id), wedding)

    def test_list_active_weddings_newest_first(self):
        older = WeddingFactory()
        newer = WeddingFactory()
        InactiveWeddingFactory()

        self.assertEqual(self.service.list_active_weddings(), [newer, older])


class UpdateWeddingTest(TestCase):
    def setUp(self):
        self.service = TenantService()
        self.wedding = WeddingFactory(slug='rina-budi', couple_name='Rina & Budi')

    def test_update_theme(self):
        wedding = self.service.update_theme(self.wedding.id, 'sage', '#84a98c', '#cad2c5', 'sans-serif')

        self.assertEqual(wedding.theme, 'sage')
        self.assertEqual(wedding.font_family, 'sans-serif')

    def test_update_theme_keeps_font_when_omitted(self):
        wedding = self.service.update_theme(self.wedding.id, 'sage', '#84a98c', '#cad2c5')

        self.assertEqual(wedding.font_family, 'serif')

    def test_update_theme_requires_colors(self):
        with self.assertRaises(ValidationError):
            self.service.update_theme(self.wedding.id, 'sage', '', '#cad2c5')

    def test_update_details_never_touches_slug(self):
        wedding = self.service.update_details(self.wedding.id, couple_name='Rina & Budi Santoso')

        self.assertEqual(wedding.couple_name, 'Rina & Budi Santoso')
        self.assertEqual(wedding.slug, 'rina-budi')

    def test_set_active(self):
        self.service.set_active(self.wedding.id, False)

        self.assertFalse(self.service.is_active_wedding(self.wedding.id))

    def test_update_unknown_wedding(self):
        with self.assertRaises(WeddingNotFoundError):
            self.service.update_details('00000000-0000-0000-0000-000000000000', couple_name='X')

    def test_delete_wedding_cascades(self):
        EventFactory(wedding=self.wedding)
        GuestFactory(wedding=self.wedding)
        WishFactory(wedding=self.wedding)
        global_guest = GuestFactory(wedding=None)

        self.service.delete_wedding(self.wedding.id)

        self.assertFalse(Event.objects.exists())
        self.assertFalse(Wish.objects.exists())
        self.assertEqual(list(Guest.objects.all()), [global_guest])
