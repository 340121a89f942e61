import uuid
from decimal import Decimal

import pytest

from apps.bookings import wizard
from apps.bookings.exceptions import EntityNotFound, PrerequisiteMissing
from apps.bookings.session import BookingDraft, SessionDraftStore
from apps.bookings.wizard import Step
from apps.fleet.models import Car

pytestmark = pytest.mark.django_db


@pytest.fixture
def located(location):
    return wizard.choose_location(BookingDraft(), location.id, '2024-01-01', '2024-01-04')


@pytest.fixture
def with_car(located, car):
    return wizard.choose_car(located, car.id)


class TestGuards:
    def test_location_step_is_always_open(self):
        wizard.check_prerequisites(BookingDraft(), Step.LOCATION)

    def test_car_step_needs_location(self):
        with pytest.raises(PrerequisiteMissing) as exc:
            wizard.check_prerequisites(BookingDraft(), Step.CAR)
        assert exc.value.step is Step.LOCATION

    @pytest.mark.parametrize('step', [Step.INSURANCE, Step.ACCESSORIES, Step.PAYMENT])
    def test_later_steps_need_a_car(self, located, step):
        with pytest.raises(PrerequisiteMissing) as exc:
            wizard.check_prerequisites(located, step)
        assert exc.value.step is Step.CAR

    def test_insurance_is_not_required_for_payment(self, with_car):
        assert wizard.can_enter(with_car, Step.PAYMENT)


class TestTransitions:
    def test_choose_location_stores_dates_verbatim(self, location):
        draft = wizard.choose_location(BookingDraft(), location.id, '2024-01-01', '2024-01-04')
        assert draft.location_id == str(location.id)
        assert (draft.start_date, draft.end_date) == ('2024-01-01', '2024-01-04')

    def test_choose_location_starts_a_fresh_draft(self, with_car, location):
        draft = wizard.choose_location(with_car, location.id, '2024-02-01', '2024-02-02')
        assert draft.car_id is None
        assert draft.accessories == []

    def test_choose_location_rejects_unknown_location(self):
        with pytest.raises(EntityNotFound):
            wizard.choose_location(BookingDraft(), uuid.uuid4(), '2024-01-01', '2024-01-02')

    def test_choose_car_snapshots_daily_price(self, located, car):
        draft = wizard.choose_car(located, car.id)
        car.daily_price = Decimal('99.00')
        car.save()
        assert draft.car_id == str(car.id)
        assert draft.car_daily_price == '50.00'

    def test_choose_car_rejects_car_from_another_location(self, located, other_location):
        elsewhere = Car.objects.create(
            location=other_location, make='Tesla', model='Model 3', daily_price=Decimal('90.00'),
        )
        with pytest.raises(EntityNotFound):
            wizard.choose_car(located, elsewhere.id)
        assert located.car_id is None

    @pytest.mark.parametrize('car_id', [uuid.uuid4(), 'not-a-uuid'])
    def test_choose_car_rejects_unknown_car(self, located, car_id):
        with pytest.raises(EntityNotFound):
            wizard.choose_car(located, car_id)

    def test_choose_insurance(self, with_car, insurance):
        draft = wizard.choose_insurance(with_car, str(insurance.id))
        assert draft.insurance_id == str(insurance.id)
        assert draft.insurance_price_per_day == '10.00'

    def test_blank_insurance_clears_previous_choice(self, with_car, insurance):
        draft = wizard.choose_insurance(with_car, str(insurance.id))
        draft = wizard.choose_insurance(draft, '')
        assert draft.insurance_id is None
        assert draft.insurance_price_per_day is None

    def test_choose_insurance_rejects_unknown_option(self, with_car):
        with pytest.raises(EntityNotFound):
            wizard.choose_insurance(with_car, str(uuid.uuid4()))

    def test_accessories_keep_order_and_drop_unknown_ids(self, with_car, gps, child_seat):
        ids = [str(child_seat.id), str(uuid.uuid4()), 'junk', str(gps.id), str(child_seat.id)]
        draft = wizard.choose_accessories(with_car, ids)
        assert draft.accessories == [
            {'id': str(child_seat.id), 'name': 'Child Seat', 'price': '7.00'},
            {'id': str(gps.id), 'name': 'GPS Navigator', 'price': '5.00'},
        ]

    def test_no_accessories_gives_empty_list(self, with_car):
        draft = wizard.choose_accessories(with_car, [])
        assert draft.accessories == []
        _, quote = wizard.review(draft)
        assert quote.accessories_total == Decimal('0.00')

    def test_review_records_total_on_draft(self, with_car, insurance, gps, child_seat):
        draft = wizard.choose_insurance(with_car, insurance.id)
        draft = wizard.choose_accessories(draft, [gps.id, child_seat.id])
        draft, quote = wizard.review(draft)
        assert quote.days == 3
        assert quote.total_price == Decimal('192.00')
        assert draft.total_price == '192.00'

    def test_review_requires_a_car(self, located):
        with pytest.raises(PrerequisiteMissing):
            wizard.review(located)


def test_session_store_round_trip(client, located):
    session = client.session
    store = SessionDraftStore(session)
    assert store.get().is_empty

    store.save(located)
    assert store.get() == located

    store.clear()
    assert 'booking' not in session
