"""
Reservation views — list, edit, update and delete the user's own bookings.

Ownership is enforced in engine.py: anything belonging to another user
behaves exactly like a reservation that does not exist.
"""
import logging

from django.contrib import messages
from django.db import DatabaseError
from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST

from apps.accounts.decorators import customer_login_required

from .engine import (
    delete_reservation,
    get_reservation_for_edit,
    reservations_for_user,
    update_reservation,
)
from .exceptions import EntityNotFound
from .forms import ReservationEditForm

logger = logging.getLogger(__name__)


def _load_for_edit(reservation_id, user):
    try:
        return get_reservation_for_edit(reservation_id, user)
    except EntityNotFound as exc:
        raise Http404(str(exc))


def _render_edit(request, context, form, status=200):
    return render(request, 'bookings/edit_reservation.html', {
        **context,
        'form': form,
    }, status=status)


@customer_login_required
@require_GET
def reservation_list(request):
    return render(request, 'bookings/reservations.html', {
        'reservations': reservations_for_user(request.user),
    })


@customer_login_required
@require_GET
def reservation_edit(request, reservation_id):
    context = _load_for_edit(reservation_id, request.user)
    reservation = context['reservation']
    form = ReservationEditForm(
        location=reservation.location,
        initial={
            'car_id': reservation.car_id,
            'insurance_id': reservation.insurance_id,
            'start_date': reservation.start_date,
            'end_date': reservation.end_date,
        },
    )
    return _render_edit(request, context, form)


@customer_login_required
@require_POST
def reservation_update(request, reservation_id):
    context = _load_for_edit(reservation_id, request.user)
    reservation = context['reservation']
    form = ReservationEditForm(request.POST, location=reservation.location)

    if not form.is_valid():
        context['selected_accessory_ids'] = request.POST.getlist('accessory_ids')
        return _render_edit(request, context, form)

    insurance = form.cleaned_data['insurance_id']
    try:
        updated = update_reservation(
            reservation_id,
            request.user,
            car_id=form.cleaned_data['car_id'].id,
            insurance_id=insurance.id if insurance else None,
            accessory_ids=request.POST.getlist('accessory_ids'),
            start_date=form.cleaned_data['start_date'],
            end_date=form.cleaned_data['end_date'],
        )
    except EntityNotFound as exc:
        raise Http404(str(exc))
    except DatabaseError:
        logger.exception('Failed to update reservation %s', reservation_id)
        return render(request, '500.html', status=500)

    messages.success(request, f'Reservation #{updated.id_short} updated.')
    return redirect('bookings:reservations')


@customer_login_required
@require_POST
def reservation_delete(request, reservation_id):
    try:
        deleted = delete_reservation(reservation_id, request.user)
    except DatabaseError:
        logger.exception('Failed to delete reservation %s', reservation_id)
        return render(request, '500.html', status=500)

    if deleted:
        messages.success(request, 'Reservation deleted.')
    return redirect('bookings:reservations')
