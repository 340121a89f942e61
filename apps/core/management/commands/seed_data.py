"""
Seed management command.

Populates the database with demo reference data:
  - 2 locations
  - 6 cars (3 per location)
  - 3 insurance options
  - 4 accessories

Usage:
    python manage.py seed_data
    python manage.py seed_data --flush   # wipe and re-seed
"""
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.bookings.models import Reservation, ReservationAccessory
from apps.fleet.models import Accessory, Car, InsuranceOption, Location


class Command(BaseCommand):
    help = 'Seed initial locations, cars, insurance options and accessories'

    def add_arguments(self, parser):
        parser.add_argument(
            '--flush', action='store_true',
            help='Delete all reservations and reference data before creating fresh records',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['flush']:
            self.stdout.write('Flushing existing data...')
            ReservationAccessory.objects.all().delete()
            Reservation.objects.all().delete()
            Car.objects.all().delete()
            Location.objects.all().delete()
            InsuranceOption.objects.all().delete()
            Accessory.objects.all().delete()

        self.stdout.write('Seeding locations...')
        downtown, _ = Location.objects.get_or_create(
            city='Lisbon', branch_name='Downtown',
            defaults={'address': 'Rua Augusta 100, Lisbon'},
        )
        airport, _ = Location.objects.get_or_create(
            city='Lisbon', branch_name='Airport',
            defaults={'address': 'Terminal 1, Humberto Delgado Airport'},
        )
        self.stdout.write(self.style.SUCCESS('  ✔ 2 locations'))

        # ── Cars ──────────────────────────────────────────────────────────────
        self.stdout.write('Seeding cars...')
        cars_data = [
            {'location': downtown, 'make': 'Fiat',       'model': '500',     'seats': 4, 'daily_price': '35.00'},
            {'location': downtown, 'make': 'Volkswagen', 'model': 'Golf',    'seats': 5, 'daily_price': '50.00'},
            {'location': downtown, 'make': 'BMW',        'model': '3 Series', 'seats': 5, 'daily_price': '95.00'},
            {'location': airport,  'make': 'Renault',    'model': 'Clio',    'seats': 5, 'daily_price': '40.00'},
            {'location': airport,  'make': 'Toyota',     'model': 'RAV4',    'seats': 5, 'daily_price': '75.00'},
            {'location': airport,  'make': 'Mercedes',   'model': 'Vito',    'seats': 8, 'daily_price': '120.00'},
        ]
        for car in cars_data:
            Car.objects.get_or_create(
                location=car['location'], make=car['make'], model=car['model'],
                defaults={'seats': car['seats'], 'daily_price': Decimal(car['daily_price'])},
            )
        self.stdout.write(self.style.SUCCESS(f'  ✔ {len(cars_data)} cars'))

        # ── Insurance ─────────────────────────────────────────────────────────
        self.stdout.write('Seeding insurance options...')
        insurance_data = [
            ('Basic Cover',   'Third-party liability only.',                       '10.00'),
            ('Standard Cover', 'Collision damage waiver with a reduced excess.',   '18.00'),
            ('Full Cover',    'Zero excess, including glass and tyres.',           '27.50'),
        ]
        for name, description, price in insurance_data:
            InsuranceOption.objects.get_or_create(
                name=name,
                defaults={'description': description, 'price_per_day': Decimal(price)},
            )
        self.stdout.write(self.style.SUCCESS(f'  ✔ {len(insurance_data)} insurance options'))

        # ── Accessories ───────────────────────────────────────────────────────
        self.stdout.write('Seeding accessories...')
        accessories_data = [
            ('GPS Navigator',  '5.00'),
            ('Child Seat',     '7.00'),
            ('Roof Box',       '15.00'),
            ('Extra Driver',   '12.00'),
        ]
        for name, price in accessories_data:
            Accessory.objects.get_or_create(name=name, defaults={'price_flat': Decimal(price)})
        self.stdout.write(self.style.SUCCESS(f'  ✔ {len(accessories_data)} accessories'))

        self.stdout.write(self.style.SUCCESS('\n✅ Seed complete!'))
