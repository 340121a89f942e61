"""
Booking wizard — an explicit state machine over the session draft.

    LOCATION → CAR → INSURANCE → ACCESSORIES → PAYMENT → (confirm)

Each step names the draft field it depends on and the step that produces
that field. Reaching a step whose dependency is missing raises
PrerequisiteMissing carrying the step to send the user back to.

Transitions take the current BookingDraft, validate their input against
reference data and return the updated draft. Persisting the draft is the
caller's job (see session.SessionDraftStore).
"""
import enum
from dataclasses import dataclass
from typing import Optional

from apps.bookings import engine
from apps.bookings.exceptions import PrerequisiteMissing
from apps.bookings.pricing import PriceQuote, calculate_price
from apps.bookings.session import BookingDraft


class Step(enum.Enum):
    LOCATION = 'location'
    CAR = 'car'
    INSURANCE = 'insurance'
    ACCESSORIES = 'accessories'
    PAYMENT = 'payment'

    @property
    def label(self) -> str:
        return STEP_LABELS[self]

    @property
    def url_name(self) -> str:
        return f'bookings:{STEP_URL_NAMES[self]}'


STEP_LABELS = {
    Step.LOCATION: 'Location & Dates',
    Step.CAR: 'Car',
    Step.INSURANCE: 'Insurance',
    Step.ACCESSORIES: 'Accessories',
    Step.PAYMENT: 'Payment',
}

STEP_URL_NAMES = {
    Step.LOCATION: 'locations',
    Step.CAR: 'cars',
    Step.INSURANCE: 'insurance',
    Step.ACCESSORIES: 'accessories',
    Step.PAYMENT: 'payment',
}


@dataclass(frozen=True)
class Guard:
    requires: Optional[str]     # draft field that must be set
    fallback: Optional[Step]    # step that sets it


GUARDS = {
    Step.LOCATION:    Guard(requires=None, fallback=None),
    Step.CAR:         Guard(requires='location_id', fallback=Step.LOCATION),
    Step.INSURANCE:   Guard(requires='car_id', fallback=Step.CAR),
    Step.ACCESSORIES: Guard(requires='car_id', fallback=Step.CAR),
    Step.PAYMENT:     Guard(requires='car_id', fallback=Step.CAR),
}


def check_prerequisites(draft: BookingDraft, step: Step) -> None:
    guard = GUARDS[step]
    if guard.requires and not getattr(draft, guard.requires):
        raise PrerequisiteMissing(guard.fallback)


def can_enter(draft: BookingDraft, step: Step) -> bool:
    try:
        check_prerequisites(draft, step)
    except PrerequisiteMissing:
        return False
    return True


# ── Transitions ───────────────────────────────────────────────────────────────

def choose_location(draft: BookingDraft, location_id, start_date, end_date) -> BookingDraft:
    """Step 1. Always starts a fresh draft; dates are kept as given."""
    check_prerequisites(draft, Step.LOCATION)
    location = engine.get_location(location_id)
    return BookingDraft(
        location_id=str(location.id),
        start_date=str(start_date),
        end_date=str(end_date),
    )


def choose_car(draft: BookingDraft, car_id) -> BookingDraft:
    """Step 2. Only cars at the draft's location. Snapshots the daily price."""
    check_prerequisites(draft, Step.CAR)
    car = engine.get_car(car_id, location_id=draft.location_id)
    draft.car_id = str(car.id)
    draft.car_daily_price = str(car.daily_price)
    draft.total_price = None
    return draft


def choose_insurance(draft: BookingDraft, insurance_id) -> BookingDraft:
    """Step 3. A blank id means no insurance."""
    check_prerequisites(draft, Step.INSURANCE)
    insurance = engine.get_insurance(insurance_id)
    if insurance is None:
        draft.insurance_id = None
        draft.insurance_price_per_day = None
    else:
        draft.insurance_id = str(insurance.id)
        draft.insurance_price_per_day = str(insurance.price_per_day)
    draft.total_price = None
    return draft


def choose_accessories(draft: BookingDraft, accessory_ids) -> BookingDraft:
    """Step 4. Unknown ids are dropped without complaint."""
    check_prerequisites(draft, Step.ACCESSORIES)
    accessories = engine.resolve_accessories(accessory_ids)
    draft.accessories = engine.accessory_line_items(accessories)
    draft.total_price = None
    return draft


def quote(draft: BookingDraft) -> PriceQuote:
    return calculate_price(
        draft.car_daily_price,
        draft.insurance_price_per_day,
        draft.accessories,
        draft.start_date,
        draft.end_date,
    )


def review(draft: BookingDraft):
    """Step 5. Price the draft and record the total on it. Returns (draft, quote)."""
    check_prerequisites(draft, Step.PAYMENT)
    price_quote = quote(draft)
    draft.total_price = str(price_quote.total_price)
    return draft, price_quote


def confirm(draft: BookingDraft, user):
    """Terminal transition: draft → persisted Reservation."""
    draft, _ = review(draft)
    return engine.create_reservation(user, draft)
