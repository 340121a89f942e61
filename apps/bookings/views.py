"""
Booking flow views — 5-step wizard backed by the session draft.

Each view is gated twice: the user must be logged in, and the wizard step's
prerequisite must be present in the draft (see decorators.wizard_step).
"""
import logging

from django.contrib import messages
from django.db import DatabaseError
from django.http import Http404
from django.shortcuts import redirect, render

from apps.accounts.decorators import customer_login_required
from apps.fleet.models import Accessory, Car, InsuranceOption, Location

from . import wizard
from .decorators import wizard_step
from .exceptions import EntityNotFound
from .forms import LocationStepForm
from .session import SessionDraftStore
from .wizard import Step

logger = logging.getLogger(__name__)


def _progress(step, draft):
    """Step list for the progress bar; steps the draft can already enter are links."""
    return [
        {
            'label': s.label,
            'active': s is step,
            'reachable': wizard.can_enter(draft, s),
            'url_name': s.url_name,
        }
        for s in Step
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Step 1 — Location & Dates
# ─────────────────────────────────────────────────────────────────────────────

@customer_login_required
@wizard_step(Step.LOCATION)
def step_locations(request, draft):
    store = SessionDraftStore.for_request(request)

    if request.method == 'POST':
        form = LocationStepForm(request.POST)
        if form.is_valid():
            try:
                draft = wizard.choose_location(
                    draft,
                    location_id=form.cleaned_data['location_id'].id,
                    start_date=form.cleaned_data['start_date'].isoformat(),
                    end_date=form.cleaned_data['end_date'].isoformat(),
                )
            except EntityNotFound:
                form.add_error('location_id', 'Please select a valid location.')
            else:
                store.save(draft)
                return redirect(Step.CAR.url_name)
    else:
        form = LocationStepForm(initial={
            'location_id': draft.location_id,
            'start_date': draft.start_date,
            'end_date': draft.end_date,
        })

    return render(request, 'bookings/location.html', {
        'form': form,
        'locations': Location.objects.filter(is_active=True),
        'steps': _progress(Step.LOCATION, draft),
    })


# ─────────────────────────────────────────────────────────────────────────────
# Step 2 — Car
# ─────────────────────────────────────────────────────────────────────────────

@customer_login_required
@wizard_step(Step.CAR)
def step_cars(request, draft):
    if request.method == 'POST':
        car_id = request.POST.get('car_id', '')
        if not car_id:
            messages.error(request, 'Please select a car.')
            return redirect(Step.CAR.url_name)
        try:
            draft = wizard.choose_car(draft, car_id)
        except EntityNotFound as exc:
            raise Http404(str(exc))

        SessionDraftStore.for_request(request).save(draft)
        return redirect(Step.INSURANCE.url_name)

    cars = (
        Car.objects
        .filter(location_id=draft.location_id, is_active=True)
        .select_related('location')
    )
    return render(request, 'bookings/cars.html', {
        'cars': cars,
        'location': Location.objects.filter(id=draft.location_id).first(),
        'selected_car_id': draft.car_id,
        'start_date': draft.start_date,
        'end_date': draft.end_date,
        'steps': _progress(Step.CAR, draft),
    })


# ─────────────────────────────────────────────────────────────────────────────
# Step 3 — Insurance
# ─────────────────────────────────────────────────────────────────────────────

@customer_login_required
@wizard_step(Step.INSURANCE)
def step_insurance(request, draft):
    if request.method == 'POST':
        try:
            draft = wizard.choose_insurance(draft, request.POST.get('insurance_id', ''))
        except EntityNotFound as exc:
            raise Http404(str(exc))

        SessionDraftStore.for_request(request).save(draft)
        return redirect(Step.ACCESSORIES.url_name)

    return render(request, 'bookings/insurance.html', {
        'insurances': InsuranceOption.objects.filter(is_active=True),
        'selected_insurance_id': draft.insurance_id,
        'steps': _progress(Step.INSURANCE, draft),
    })


# ─────────────────────────────────────────────────────────────────────────────
# Step 4 — Accessories
# ─────────────────────────────────────────────────────────────────────────────

@customer_login_required
@wizard_step(Step.ACCESSORIES)
def step_accessories(request, draft):
    if request.method == 'POST':
        draft = wizard.choose_accessories(draft, request.POST.getlist('accessory_ids'))
        SessionDraftStore.for_request(request).save(draft)
        return redirect(Step.PAYMENT.url_name)

    return render(request, 'bookings/accessories.html', {
        'accessories': Accessory.objects.filter(is_active=True),
        'selected_accessory_ids': [item['id'] for item in draft.accessories],
        'steps': _progress(Step.ACCESSORIES, draft),
    })


# ─────────────────────────────────────────────────────────────────────────────
# Step 5 — Payment (review & confirm)
# ─────────────────────────────────────────────────────────────────────────────

@customer_login_required
@wizard_step(Step.PAYMENT)
def step_payment(request, draft):
    store = SessionDraftStore.for_request(request)

    if request.method == 'POST':
        try:
            reservation = wizard.confirm(draft, request.user)
        except EntityNotFound:
            messages.error(request, 'That car is no longer available. Please choose another one.')
            return redirect(Step.CAR.url_name)
        except DatabaseError:
            logger.exception('Failed to confirm reservation for user %s', request.user.pk)
            return render(request, '500.html', status=500)

        # Booking done: drop the draft, keep the login.
        store.clear()
        messages.success(request, f'Reservation #{reservation.id_short} confirmed.')
        return redirect('bookings:reservations')

    draft, quote = wizard.review(draft)
    store.save(draft)

    car = Car.objects.select_related('location').filter(id=draft.car_id).first()
    insurance = InsuranceOption.objects.filter(id=draft.insurance_id).first() if draft.insurance_id else None

    return render(request, 'bookings/payment.html', {
        'draft': draft,
        'car': car,
        'insurance': insurance,
        'accessories': draft.accessories,
        'start_date': draft.start_date,
        'end_date': draft.end_date,
        'steps': _progress(Step.PAYMENT, draft),
        **quote.as_dict(),
    })
