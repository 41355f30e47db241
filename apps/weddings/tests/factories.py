from datetime import date
from datetime import timedelta

import factory

from apps.accounts.tests.factories import UserFactory
from apps.weddings.models import Event
from apps.weddings.models import GalleryPhoto
from apps.weddings.models import MenuConfig
from apps.weddings.models import Wedding


class WeddingFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Wedding

    user = factory.SubFactory(UserFactory)
    slug = factory.Sequence(lambda n: f'rina-dan-budi-{n}')
    couple_name = 'Rina & Budi'
    wedding_date = factory.LazyFunction(lambda: date.today() + timedelta(days=90))
    is_active = True


class InactiveWeddingFactory(WeddingFactory):
    is_active = False


class MenuConfigFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = MenuConfig

    wedding = factory.SubFactory(WeddingFactory)


class EventFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Event

    wedding = factory.SubFactory(WeddingFactory)
    type = Event.Type.AKAD
    date = factory.LazyAttribute(lambda o: o.wedding.wedding_date)
    time = '09:00 - 11:00 WIB'
    location = 'Masjid Agung'
    address = factory.Faker('address')
    is_active = True
    order = 0


class GalleryPhotoFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = GalleryPhoto

    wedding = factory.SubFactory(WeddingFactory)
    image_url = factory.Sequence(lambda n: f'https://cdn.example.com/photos/{n}.jpg')
    caption = factory.Faker('sentence', nb_words=4)
    order = 0
    is_active = True
