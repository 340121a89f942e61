"""
Pricing calculator — pure, deterministic, no ORM or request access.

    calculate_price(car_daily_price, insurance_price_per_day, accessories,
                    start_date, end_date) -> PriceQuote

Rules:
  - days = whole-day span rounded UP, never less than 1 (same-day and
    reversed ranges are billed as one day)
  - car and insurance are charged per day, accessories once per rental
  - missing insurance and an empty accessory list both count as 0
  - all money is Decimal quantised to cents, so
    total_price == car_total + insurance_total + accessories_total exactly
"""
import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal('0.01')
ZERO = Decimal('0.00')
SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class PriceQuote:
    days: int
    car_total: Decimal
    insurance_total: Decimal
    accessories_total: Decimal
    total_price: Decimal

    def as_dict(self) -> dict:
        return {
            'days': self.days,
            'car_total': self.car_total,
            'insurance_total': self.insurance_total,
            'accessories_total': self.accessories_total,
            'total_price': self.total_price,
        }


def to_money(value) -> Decimal:
    """Coerce str/int/float/Decimal/None to a cent-quantised Decimal."""
    if value is None or value == '':
        return ZERO
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _as_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(str(value))


def rental_days(start_date, end_date) -> int:
    """Billable days between two dates/datetimes/ISO strings (ceiling, min 1)."""
    span = _as_datetime(end_date) - _as_datetime(start_date)
    days = math.ceil(span.total_seconds() / SECONDS_PER_DAY)
    return max(1, days)


def calculate_price(car_daily_price, insurance_price_per_day, accessories,
                    start_date, end_date) -> PriceQuote:
    """
    `accessories` is an iterable of mappings with a 'price' key, as stored
    on the booking draft ({id, name, price}).
    """
    days = rental_days(start_date, end_date)

    car_total = to_money(car_daily_price) * days
    insurance_total = to_money(insurance_price_per_day) * days
    accessories_total = sum(
        (to_money(item.get('price')) for item in accessories or []),
        ZERO,
    )

    return PriceQuote(
        days=days,
        car_total=car_total,
        insurance_total=insurance_total,
        accessories_total=accessories_total,
        total_price=car_total + insurance_total + accessories_total,
    )
