"""
Booking flow and reservation URLs.

Flow:
  /locations                        Step 1: Location & dates
  /cars                             Step 2: Car selection
  /insurance                        Step 3: Insurance (optional)
  /accessories                      Step 4: Accessories (zero or more)
  /payment                          Step 5: Price summary & confirm
  /reservations                     The user's reservations, newest first
  /reservations/<uuid>/edit         Edit form (owner only)
  /reservations/<uuid>/update       POST: re-price and save (owner only)
  /reservations/<uuid>/delete       POST: delete (owner only, silent otherwise)
"""
from django.urls import path
from . import views, views_reservations

app_name = 'bookings'

urlpatterns = [
    # ── Multi-step booking flow ────────────────────────────────────────────────
    path('locations',   views.step_locations,   name='locations'),
    path('cars',        views.step_cars,        name='cars'),
    path('insurance',   views.step_insurance,   name='insurance'),
    path('accessories', views.step_accessories, name='accessories'),
    path('payment',     views.step_payment,     name='payment'),

    # ── Reservations ───────────────────────────────────────────────────────────
    path('reservations', views_reservations.reservation_list, name='reservations'),
    path('reservations/<uuid:reservation_id>/edit',
         views_reservations.reservation_edit,   name='reservation_edit'),
    path('reservations/<uuid:reservation_id>/update',
         views_reservations.reservation_update, name='reservation_update'),
    path('reservations/<uuid:reservation_id>/delete',
         views_reservations.reservation_delete, name='reservation_delete'),
]
