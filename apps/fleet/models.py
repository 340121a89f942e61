"""
Fleet reference data — rental branches and what can be booked there.

  - Location         : a rental branch (city + branch name)
  - Car              : belongs to one Location, priced per day
  - InsuranceOption  : optional cover, priced per day
  - Accessory        : add-on with a flat price per rental

Prices here are the *live* catalogue prices. The booking wizard snapshots
them into the session draft at selection time; reservation edits re-read
them from these tables.
"""
from django.core.validators import MinValueValidator
from django.db import models
from apps.core.models import UUIDModel, TimestampedModel


class Location(UUIDModel, TimestampedModel):
    city = models.CharField(max_length=80)
    branch_name = models.CharField(max_length=120)
    address = models.TextField(blank=True)
    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        db_table = 'locations'
        verbose_name = 'Location'
        verbose_name_plural = 'Locations'
        ordering = ['city', 'branch_name']

    def __str__(self):
        return f"{self.branch_name} ({self.city})"


class Car(UUIDModel, TimestampedModel):
    location = models.ForeignKey(Location, on_delete=models.PROTECT, related_name='cars')
    make = models.CharField(max_length=60)
    model = models.CharField(max_length=80)
    seats = models.PositiveSmallIntegerField(default=5)
    daily_price = models.DecimalField(
        max_digits=10, decimal_places=2,
        validators=[MinValueValidator(0)],
    )
    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        db_table = 'cars'
        verbose_name = 'Car'
        verbose_name_plural = 'Cars'
        ordering = ['make', 'model']

    def __str__(self):
        return f"{self.make} {self.model}"


class InsuranceOption(UUIDModel, TimestampedModel):
    name = models.CharField(max_length=120)
    description = models.TextField(blank=True)
    price_per_day = models.DecimalField(
        max_digits=10, decimal_places=2,
        validators=[MinValueValidator(0)],
    )
    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        db_table = 'insurance_options'
        verbose_name = 'Insurance Option'
        verbose_name_plural = 'Insurance Options'
        ordering = ['price_per_day', 'name']

    def __str__(self):
        return f"{self.name} ({self.price_per_day}/day)"


class Accessory(UUIDModel, TimestampedModel):
    name = models.CharField(max_length=120)
    description = models.TextField(blank=True)
    price_flat = models.DecimalField(
        max_digits=10, decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text='Charged once per rental, regardless of duration',
    )
    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        db_table = 'accessories'
        verbose_name = 'Accessory'
        verbose_name_plural = 'Accessories'
        ordering = ['name']

    def __str__(self):
        return self.name
