from decimal import Decimal

import pytest

from apps.fleet.models import Accessory, Car, InsuranceOption, Location

MODEL_BACKEND = 'django.contrib.auth.backends.ModelBackend'
PASSWORD = 'road-trip-2024'


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username='ana@example.com', email='ana@example.com',
        password=PASSWORD, first_name='Ana',
    )


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(
        username='bruno@example.com', email='bruno@example.com',
        password=PASSWORD, first_name='Bruno',
    )


@pytest.fixture
def auth_client(client, user):
    client.force_login(user, backend=MODEL_BACKEND)
    return client


@pytest.fixture
def location(db):
    return Location.objects.create(city='Lisbon', branch_name='Downtown')


@pytest.fixture
def other_location(db):
    return Location.objects.create(city='Porto', branch_name='Airport')


@pytest.fixture
def car(location):
    return Car.objects.create(
        location=location, make='Volkswagen', model='Golf', daily_price=Decimal('50.00'),
    )


@pytest.fixture
def cheap_car(location):
    return Car.objects.create(
        location=location, make='Fiat', model='500', daily_price=Decimal('40.00'),
    )


@pytest.fixture
def insurance(db):
    return InsuranceOption.objects.create(name='Basic Cover', price_per_day=Decimal('10.00'))


@pytest.fixture
def gps(db):
    return Accessory.objects.create(name='GPS Navigator', price_flat=Decimal('5.00'))


@pytest.fixture
def child_seat(db):
    return Accessory.objects.create(name='Child Seat', price_flat=Decimal('7.00'))


@pytest.fixture
def set_draft(auth_client):
    """Write a raw draft dict into the logged-in client's session."""
    def _set(data):
        session = auth_client.session
        session['booking'] = data
        session.save()
    return _set
