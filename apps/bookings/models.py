"""
Bookings app models:
  - Reservation          : a confirmed booking owned by one user
  - ReservationAccessory : junction row linking a reservation to an accessory

Reservations are created from the session draft on confirmation and are
hard-deleted (links first) when their owner removes them.
"""
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from apps.core.models import UUIDModel, TimestampedModel
from apps.fleet.models import Accessory, Car, InsuranceOption, Location


class ReservationQuerySet(models.QuerySet):
    def owned_by(self, user):
        """Every reservation-scoped read goes through here."""
        return self.filter(user=user)

    def with_display_fields(self):
        return self.select_related('car', 'location', 'insurance').prefetch_related('accessories')


class Reservation(UUIDModel, TimestampedModel):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reservations',
    )
    car = models.ForeignKey(Car, on_delete=models.PROTECT, related_name='reservations')
    location = models.ForeignKey(Location, on_delete=models.PROTECT, related_name='reservations')
    insurance = models.ForeignKey(
        InsuranceOption, on_delete=models.SET_NULL, null=True, blank=True,
        related_name='reservations',
    )
    accessories = models.ManyToManyField(
        Accessory, through='ReservationAccessory', related_name='reservations', blank=True,
    )

    start_date = models.DateField()
    end_date = models.DateField()
    total_price = models.DecimalField(
        max_digits=10, decimal_places=2, default=0,
        validators=[MinValueValidator(0)],
    )

    objects = ReservationQuerySet.as_manager()

    class Meta:
        db_table = 'reservations'
        verbose_name = 'Reservation'
        verbose_name_plural = 'Reservations'
        ordering = ['-created_at']

    def __str__(self):
        return f"#{self.id_short} | {self.car} | {self.start_date} → {self.end_date}"

    @property
    def id_short(self):
        """Returns the first 8 chars of UUID in uppercase."""
        return str(self.id)[:8].upper()


class ReservationAccessory(models.Model):
    reservation = models.ForeignKey(
        Reservation, on_delete=models.CASCADE, related_name='accessory_links',
    )
    accessory = models.ForeignKey(
        Accessory, on_delete=models.PROTECT, related_name='reservation_links',
    )

    class Meta:
        db_table = 'reservation_accessories'
        constraints = [
            models.UniqueConstraint(
                fields=['reservation', 'accessory'],
                name='uq_reservation_accessory',
            )
        ]

    def __str__(self):
        return f"{self.reservation_id} + {self.accessory_id}"
