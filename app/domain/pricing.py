"""Cálculo de precio de una reservación."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from app.domain.value_objects.date_range import rental_days

GPS_DAILY_RATE = Decimal("5.00")
TOLL_PASS_DAILY_RATE = Decimal("3.00")

CENTS = Decimal("0.01")


def addons_per_day(gps: bool, toll_pass: bool) -> Decimal:
    total = Decimal("0.00")
    if gps:
        total += GPS_DAILY_RATE
    if toll_pass:
        total += TOLL_PASS_DAILY_RATE
    return total


def calculate_total_price(days: int, base_rate: Decimal, gps: bool, toll_pass: bool) -> Decimal:
    """
    Precio lineal: días x (tarifa base + add-ons por día).

    Se trabaja siempre con Decimal para que actualizaciones repetidas
    no acumulen error de punto flotante.
    """
    if days < 1:
        days = 1
    daily = Decimal(str(base_rate)) + addons_per_day(gps, toll_pass)
    return (daily * days).quantize(CENTS, rounding=ROUND_HALF_UP)


def price_for_dates(start: date, end: date, base_rate: Decimal, gps: bool, toll_pass: bool) -> Decimal:
    return calculate_total_price(rental_days(start, end), base_rate, gps, toll_pass)
