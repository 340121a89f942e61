import uuid
from decimal import Decimal

import pytest
from django.db import DatabaseError
from django.urls import reverse

from apps.bookings.models import Reservation, ReservationAccessory
from apps.fleet.models import Car

pytestmark = pytest.mark.django_db


def _draft(location, car=None, **extra):
    data = {
        'location_id': str(location.id),
        'start_date': '2024-01-01',
        'end_date': '2024-01-04',
    }
    if car is not None:
        data.update(car_id=str(car.id), car_daily_price=str(car.daily_price))
    data.update(extra)
    return data


class TestLoginGate:
    @pytest.mark.parametrize('name', ['locations', 'cars', 'insurance', 'accessories', 'payment', 'reservations'])
    def test_anonymous_users_are_sent_to_login(self, client, name):
        url = reverse(f'bookings:{name}')
        response = client.get(url)
        assert response.status_code == 302
        assert response.url == f'/login?next={url}'


class TestStepOrdering:
    def test_payment_without_car_redirects_to_cars(self, auth_client, set_draft, location):
        set_draft(_draft(location))
        response = auth_client.get('/payment')
        assert response.status_code == 302
        assert response.url == '/cars'

    def test_payment_with_empty_draft_redirects_to_cars(self, auth_client):
        response = auth_client.get('/payment')
        assert response.url == '/cars'

    def test_cars_without_location_redirects_to_locations(self, auth_client):
        response = auth_client.get('/cars')
        assert response.url == '/locations'

    @pytest.mark.parametrize('path', ['/insurance', '/accessories'])
    def test_post_out_of_order_is_redirected_too(self, auth_client, set_draft, location, path):
        set_draft(_draft(location))
        response = auth_client.post(path, {})
        assert response.url == '/cars'


class TestProgressLinks:
    def test_car_step_links_back_but_not_forward(self, auth_client, set_draft, location):
        set_draft(_draft(location))
        response = auth_client.get('/cars')
        reachable = {s['label']: s['reachable'] for s in response.context['steps']}
        assert reachable == {
            'Location & Dates': True,
            'Car': True,
            'Insurance': False,
            'Accessories': False,
            'Payment': False,
        }
        assert b'href="/locations"' in response.content
        assert b'href="/insurance"' not in response.content

    def test_with_a_car_every_step_is_a_link(self, auth_client, set_draft, location, car):
        set_draft(_draft(location, car))
        response = auth_client.get('/payment')
        assert all(s['reachable'] for s in response.context['steps'])
        for path in ('/locations', '/cars', '/insurance', '/accessories'):
            assert f'href="{path}"'.encode() in response.content
        assert b'href="/payment"' not in response.content


class TestLocationStep:
    def test_lists_locations(self, auth_client, location):
        response = auth_client.get('/locations')
        assert response.status_code == 200
        assert b'Downtown' in response.content

    def test_valid_submission_starts_draft(self, auth_client, location):
        response = auth_client.post('/locations', {
            'location_id': str(location.id),
            'start_date': '2024-01-01',
            'end_date': '2024-01-04',
        })
        assert response.url == '/cars'
        draft = auth_client.session['booking']
        assert draft['location_id'] == str(location.id)
        assert draft['start_date'] == '2024-01-01'
        assert draft['end_date'] == '2024-01-04'

    def test_end_before_start_is_rejected(self, auth_client, location):
        response = auth_client.post('/locations', {
            'location_id': str(location.id),
            'start_date': '2024-01-04',
            'end_date': '2024-01-01',
        })
        assert response.status_code == 200
        assert 'booking' not in auth_client.session

    def test_unknown_location_is_rejected(self, auth_client, location):
        response = auth_client.post('/locations', {
            'location_id': str(uuid.uuid4()),
            'start_date': '2024-01-01',
            'end_date': '2024-01-02',
        })
        assert response.status_code == 200
        assert 'booking' not in auth_client.session


class TestCarStep:
    def test_lists_cars_at_draft_location(self, auth_client, set_draft, location, other_location, car):
        Car.objects.create(location=other_location, make='Tesla', model='Model 3', daily_price='90.00')
        set_draft(_draft(location))
        response = auth_client.get('/cars')
        assert b'Golf' in response.content
        assert b'Tesla' not in response.content

    def test_unknown_car_is_404(self, auth_client, set_draft, location):
        set_draft(_draft(location))
        response = auth_client.post('/cars', {'car_id': str(uuid.uuid4())})
        assert response.status_code == 404

    def test_car_from_another_location_is_404(self, auth_client, set_draft, location, other_location):
        elsewhere = Car.objects.create(location=other_location, make='Tesla', model='Model 3', daily_price='90.00')
        set_draft(_draft(location))
        response = auth_client.post('/cars', {'car_id': str(elsewhere.id)})
        assert response.status_code == 404
        assert 'car_id' not in auth_client.session['booking']

    def test_selecting_a_car_snapshots_price(self, auth_client, set_draft, location, car):
        set_draft(_draft(location))
        response = auth_client.post('/cars', {'car_id': str(car.id)})
        assert response.url == '/insurance'
        assert auth_client.session['booking']['car_daily_price'] == '50.00'


class TestBookingFlow:
    def test_full_booking_flow(self, auth_client, user, location, car, insurance, gps, child_seat):
        auth_client.post('/locations', {
            'location_id': str(location.id),
            'start_date': '2024-01-01',
            'end_date': '2024-01-04',
        })
        auth_client.post('/cars', {'car_id': str(car.id)})
        auth_client.post('/insurance', {'insurance_id': str(insurance.id)})
        response = auth_client.post('/accessories', {'accessory_ids': [str(gps.id), str(child_seat.id)]})
        assert response.url == '/payment'

        response = auth_client.get('/payment')
        assert response.status_code == 200
        assert response.context['days'] == 3
        assert response.context['car_total'] == Decimal('150.00')
        assert response.context['insurance_total'] == Decimal('30.00')
        assert response.context['accessories_total'] == Decimal('12.00')
        assert response.context['total_price'] == Decimal('192.00')
        assert auth_client.session['booking']['total_price'] == '192.00'

        response = auth_client.post('/payment')
        assert response.url == '/reservations'

        reservation = Reservation.objects.get(user=user)
        assert reservation.total_price == Decimal('192.00')
        assert reservation.location == reservation.car.location == location
        assert reservation.insurance == insurance
        assert set(reservation.accessories.all()) == {gps, child_seat}
        assert 'booking' not in auth_client.session
        assert auth_client.session['_auth_user_id'] == str(user.pk)

    def test_one_day_booking_without_extras(self, auth_client, user, location, cheap_car):
        auth_client.post('/locations', {
            'location_id': str(location.id),
            'start_date': '2024-06-01',
            'end_date': '2024-06-01',
        })
        auth_client.post('/cars', {'car_id': str(cheap_car.id)})
        auth_client.post('/insurance', {'insurance_id': ''})
        auth_client.post('/accessories', {})
        assert auth_client.session['booking']['accessories'] == []

        response = auth_client.get('/payment')
        assert response.context['total_price'] == Decimal('40.00')

        auth_client.post('/payment')
        assert Reservation.objects.get(user=user).total_price == Decimal('40.00')

    def test_database_failure_keeps_draft_and_writes_nothing(
        self, auth_client, set_draft, location, car, gps, monkeypatch,
    ):
        def boom(*args, **kwargs):
            raise DatabaseError('disk full')

        monkeypatch.setattr(ReservationAccessory.objects, 'bulk_create', boom)
        set_draft(_draft(location, car, accessories=[
            {'id': str(gps.id), 'name': gps.name, 'price': '5.00'},
        ]))

        response = auth_client.post('/payment')
        assert response.status_code == 500
        assert Reservation.objects.count() == 0
        assert auth_client.session['booking']['car_id'] == str(car.id)
