from django.test import SimpleTestCase
from django.test import TestCase

from apps.guestbook.models import Guest
from apps.guestbook.models import Wish
from apps.guestbook.scope import GuestScope
from apps.guestbook.services import GuestbookService
from apps.guestbook.tests.factories import GuestFactory
from apps.guestbook.tests.factories import NotAttendingGuestFactory
from apps.guestbook.tests.factories import UncertainGuestFactory
from apps.guestbook.tests.factories import WishFactory
from apps.shared.exceptions import ValidationError
from apps.weddings.exceptions import WeddingNotFoundError
from apps.weddings.tests.factories import InactiveWeddingFactory
from apps.weddings.tests.factories import WeddingFactory


class GuestScopeTest(SimpleTestCase):
    def test_global_scope(self):
        scope = GuestScope.global_scope()

        self.assertTrue(scope.is_global)
        self.assertEqual(scope.filter_kwargs(), {'wedding__isnull': True})

    def test_tenant_scope(self):
        scope = GuestScope.tenant('abc')

        self.assertFalse(scope.is_global)
        self.assertEqual(scope.filter_kwargs(), {'wedding_id': 'abc'})

    def test_tenant_scope_requires_wedding(self):
        with self.assertRaises(ValueError):
            GuestScope.tenant(None)


class SubmitRSVPTest(TestCase):
    def setUp(self):
        self.service = GuestbookService()
        self.wedding = WeddingFactory()
        self.scope = GuestScope.tenant(self.wedding.id)

    def test_submit_rsvp_attending(self):
        guest = self.service.submit_rsvp(self.scope, name=' Andi ', attendance='hadir', guest_count=3, message='Selamat!')

        self.assertEqual(guest.name, 'Andi')
        self.assertEqual(guest.wedding, self.wedding)
        self.assertEqual(guest.guest_count, 3)

    def test_guest_count_dropped_unless_attending(self):
        guest = self.service.submit_rsvp(self.scope, name='Andi', attendance='tidak-hadir', guest_count=3)

        self.assertIsNone(guest.guest_count)

    def test_invalid_attendance(self):
        with self.assertRaises(ValidationError) as context:
            self.service.submit_rsvp(self.scope, name='Andi', attendance='maybe')

        self.assertIn('attendance', context.exception.field_errors)

    def test_blank_name(self):
        with self.assertRaises(ValidationError) as context:
            self.service.submit_rsvp(self.scope, name='  ', attendance='hadir')

        self.assertIn('name', context.exception.field_errors)

    def test_inactive_wedding_not_found(self):
        scope = GuestScope.tenant(InactiveWeddingFactory().id)

        with self.assertRaises(WeddingNotFoundError):
            self.service.submit_rsvp(scope, name='Andi', attendance='hadir')
        self.assertFalse(Guest.objects.exists())

    def test_global_scope_rsvp(self):
        guest = self.service.submit_rsvp(GuestScope.global_scope(), name='Andi', attendance='belum-pasti')

        self.assertIsNone(guest.wedding)


class GuestQueriesTest(TestCase):
    def setUp(self):
        self.service = GuestbookService()
        self.wedding = WeddingFactory()
        self.scope = GuestScope.tenant(self.wedding.id)

    def test_list_guests_is_isolated_per_scope(self):
        own = GuestFactory(wedding=self.wedding)
        GuestFactory()
        GuestFactory(wedding=None)

        self.assertEqual(self.service.list_guests(self.scope), [own])
        self.assertEqual(len(self.service.list_guests(GuestScope.global_scope())), 1)

    def test_list_guests_newest_first_with_filters(self):
        andi = GuestFactory(wedding=self.wedding, name='Andi Wijaya')
        sari = NotAttendingGuestFactory(wedding=self.wedding, name='Sari')
        andika = UncertainGuestFactory(wedding=self.wedding, name='Andika')

        self.assertEqual(self.service.list_guests(self.scope), [andika, sari, andi])
        self.assertEqual(self.service.list_guests(self.scope, search='andi'), [andika, andi])
        self.assertEqual(self.service.list_guests(self.scope, attendance='tidak-hadir'), [sari])
        self.assertEqual(len(self.service.list_guests(self.scope, attendance='all')), 3)

    def test_dashboard_stats(self):
        GuestFactory.create_batch(2, wedding=self.wedding)
        NotAttendingGuestFactory(wedding=self.wedding)
        UncertainGuestFactory(wedding=self.wedding)
        WishFactory.create_batch(3, wedding=self.wedding)
        GuestFactory()

        stats = self.service.compute_dashboard_stats(self.scope)

        self.assertEqual(stats, {'total': 4, 'attending': 2, 'not_attending': 1, 'uncertain': 1, 'total_wishes': 3})

    def test_dashboard_stats_empty(self):
        stats = self.service.compute_dashboard_stats(self.scope)

        self.assertEqual(stats, {'total': 0, 'attending': 0, 'not_attending': 0, 'uncertain': 0, 'total_wishes': 0})

    def test_export_rows(self):
        GuestFactory(wedding=self.wedding, name='Andi', phone=None, guest_count=2)
        NotAttendingGuestFactory(wedding=self.wedding, name='Sari')

        rows = self.service.export_guests_rows(self.scope)

        self.assertEqual([row['name'] for row in rows], ['Sari', 'Andi'])
        self.assertEqual(rows[1]['phone'], '')
        self.assertEqual(rows[1]['guest_count'], 2)
        self.assertIsNone(rows[0]['guest_count'])


class WishTest(TestCase):
    def setUp(self):
        self.service = GuestbookService()
        self.wedding = WeddingFactory()
        self.scope = GuestScope.tenant(self.wedding.id)

    def test_submit_and_list_wishes(self):
        first = self.service.submit_wish(self.scope, name='Andi', message='Semoga bahagia')
        second = self.service.submit_wish(self.scope, name='Sari', message='Selamat menempuh hidup baru')
        WishFactory()

        self.assertEqual(self.service.list_wishes(self.scope), [second, first])
        self.assertEqual(self.service.list_wishes(self.scope, search='BAHAGIA'), [first])
        self.assertEqual(self.service.list_wishes(self.scope, search='sari'), [second])

    def test_wish_requires_message(self):
        with self.assertRaises(ValidationError):
            self.service.submit_wish(self.scope, name='Andi', message=' ')

    def test_wish_scope(self):
        wish = WishFactory(wedding=self.wedding)
        global_wish = WishFactory(wedding=None)

        self.assertEqual(self.service.get_wish_scope(wish.id), self.scope)
        self.assertEqual(self.service.get_wish_scope(global_wish.id), GuestScope.global_scope())
        self.assertIsNone(self.service.get_wish_scope('00000000-0000-0000-0000-000000000000'))

    def test_delete_wish(self):
        wish = WishFactory(wedding=self.wedding)

        self.service.delete_wish(wish.id)

        self.assertFalse(Wish.objects.exists())
