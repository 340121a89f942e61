"""
Booking engine — reference-data lookups and the reservation store.
No HTTP/request awareness.

Public API:
  get_location(location_id)
  get_car(car_id, location_id=None)
  get_insurance(insurance_id)
  resolve_accessories(accessory_ids)
  create_reservation(user, draft)
  reservations_for_user(user)
  get_reservation_for_edit(reservation_id, user)
  update_reservation(reservation_id, user, car_id, insurance_id, accessory_ids, start_date, end_date)
  delete_reservation(reservation_id, user)

Ownership: every reservation-scoped call filters by user. Another user's
reservation is indistinguishable from a missing one.
"""
import logging
import uuid
from datetime import date as date_type

from django.db import transaction

from apps.fleet.models import Accessory, Car, InsuranceOption, Location
from apps.bookings.exceptions import EntityNotFound
from apps.bookings.models import Reservation, ReservationAccessory
from apps.bookings.pricing import calculate_price, to_money

logger = logging.getLogger(__name__)


# ── Id helpers ────────────────────────────────────────────────────────────────

def _parse_uuid(value):
    """Returns a UUID, or None for blank/malformed input."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value).strip())
    except (ValueError, TypeError, AttributeError):
        return None


def _parse_date(value) -> date_type:
    if isinstance(value, date_type):
        return value
    return date_type.fromisoformat(str(value))


# ── Reference data lookups ────────────────────────────────────────────────────

def get_location(location_id) -> Location:
    pk = _parse_uuid(location_id)
    try:
        return Location.objects.get(id=pk, is_active=True)
    except Location.DoesNotExist:
        raise EntityNotFound(f"Location {location_id} not found.")


def get_car(car_id, location_id=None) -> Car:
    """With location_id, a car parked at any other location counts as missing."""
    pk = _parse_uuid(car_id)
    qs = Car.objects.select_related('location').filter(is_active=True)
    if location_id is not None:
        qs = qs.filter(location_id=_parse_uuid(location_id))
    try:
        return qs.get(id=pk)
    except Car.DoesNotExist:
        raise EntityNotFound(f"Car {car_id} not found.")


def get_insurance(insurance_id):
    """Blank id means 'no insurance' and returns None."""
    if insurance_id in (None, ''):
        return None
    pk = _parse_uuid(insurance_id)
    try:
        return InsuranceOption.objects.get(id=pk, is_active=True)
    except InsuranceOption.DoesNotExist:
        raise EntityNotFound(f"Insurance option {insurance_id} not found.")


def resolve_accessories(accessory_ids) -> list:
    """
    Resolve ids to Accessory rows in the order they were submitted.
    Duplicates, malformed and unknown ids are silently dropped.
    """
    ordered = []
    for raw in accessory_ids or []:
        pk = _parse_uuid(raw)
        if pk is not None and pk not in ordered:
            ordered.append(pk)
    if not ordered:
        return []

    found = {a.id: a for a in Accessory.objects.filter(id__in=ordered, is_active=True)}
    return [found[pk] for pk in ordered if pk in found]


def accessory_line_items(accessories) -> list:
    """Accessory rows → the {id, name, price} dicts kept on the draft."""
    return [
        {'id': str(a.id), 'name': a.name, 'price': str(to_money(a.price_flat))}
        for a in accessories
    ]


# ── Reservation store ─────────────────────────────────────────────────────────

@transaction.atomic
def create_reservation(user, draft) -> Reservation:
    """
    Persist a completed draft: one reservation row plus one link row per
    accessory, all-or-nothing. Prices come from the draft snapshot taken
    while the user walked through the wizard.
    """
    quote = calculate_price(
        draft.car_daily_price,
        draft.insurance_price_per_day,
        draft.accessories,
        draft.start_date,
        draft.end_date,
    )
    car = get_car(draft.car_id, location_id=draft.location_id)

    reservation = Reservation.objects.create(
        user=user,
        car=car,
        location_id=car.location_id,
        insurance_id=_parse_uuid(draft.insurance_id),
        start_date=_parse_date(draft.start_date),
        end_date=_parse_date(draft.end_date),
        total_price=quote.total_price,
    )
    ReservationAccessory.objects.bulk_create([
        ReservationAccessory(reservation=reservation, accessory_id=_parse_uuid(item['id']))
        for item in draft.accessories
    ])
    logger.info(
        'Reservation %s created for user %s (total %s)',
        reservation.id, user.pk, reservation.total_price,
    )
    return reservation


def reservations_for_user(user):
    """Newest first, with car/location/insurance joined and accessories prefetched."""
    return Reservation.objects.owned_by(user).with_display_fields().order_by('-created_at')


def _get_owned_reservation(reservation_id, user, for_update=False) -> Reservation:
    pk = _parse_uuid(reservation_id)
    qs = Reservation.objects.owned_by(user)
    if for_update:
        qs = qs.select_for_update()
    try:
        return qs.get(id=pk)
    except Reservation.DoesNotExist:
        raise EntityNotFound(f"Reservation {reservation_id} not found.")


def get_reservation_for_edit(reservation_id, user) -> dict:
    """Reservation plus everything the edit form offers."""
    reservation = _get_owned_reservation(reservation_id, user)
    return {
        'reservation': reservation,
        'cars': Car.objects.filter(location_id=reservation.location_id, is_active=True),
        'insurance_options': InsuranceOption.objects.filter(is_active=True),
        'accessories': Accessory.objects.filter(is_active=True),
        'selected_accessory_ids': [
            str(pk) for pk in reservation.accessory_links.values_list('accessory_id', flat=True)
        ],
    }


@transaction.atomic
def update_reservation(reservation_id, user, car_id, insurance_id, accessory_ids,
                       start_date, end_date) -> Reservation:
    """
    Re-price with *current* catalogue prices (not the ones captured at
    booking time) and replace the accessory links wholesale.
    """
    reservation = _get_owned_reservation(reservation_id, user, for_update=True)
    car = get_car(car_id)
    insurance = get_insurance(insurance_id)
    accessories = resolve_accessories(accessory_ids)

    quote = calculate_price(
        car.daily_price,
        insurance.price_per_day if insurance else None,
        accessory_line_items(accessories),
        start_date,
        end_date,
    )

    reservation.car = car
    reservation.location_id = car.location_id
    reservation.insurance = insurance
    reservation.start_date = _parse_date(start_date)
    reservation.end_date = _parse_date(end_date)
    reservation.total_price = quote.total_price
    reservation.save()

    reservation.accessory_links.all().delete()
    ReservationAccessory.objects.bulk_create([
        ReservationAccessory(reservation=reservation, accessory=a) for a in accessories
    ])
    logger.info('Reservation %s updated (total %s)', reservation.id, reservation.total_price)
    return reservation


@transaction.atomic
def delete_reservation(reservation_id, user) -> bool:
    """
    Remove accessory links, then the reservation. Returns False (and does
    nothing) when the reservation is missing or belongs to someone else.
    """
    pk = _parse_uuid(reservation_id)
    reservation = Reservation.objects.owned_by(user).filter(id=pk).first()
    if reservation is None:
        return False

    ReservationAccessory.objects.filter(reservation=reservation).delete()
    reservation.delete()
    logger.info('Reservation %s deleted by user %s', pk, user.pk)
    return True
