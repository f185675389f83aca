from datetime import date
from decimal import Decimal

import pytest

from app.domain.pricing import (
    GPS_DAILY_RATE,
    TOLL_PASS_DAILY_RATE,
    calculate_total_price,
    price_for_dates,
)
from app.domain.value_objects.date_range import rental_days


class TestRentalDays:
    def test_whole_days_between_dates(self):
        assert rental_days(date(2024, 1, 1), date(2024, 1, 3)) == 2

    def test_same_day_counts_as_one(self):
        assert rental_days(date(2024, 1, 1), date(2024, 1, 1)) == 1

    def test_month_boundary(self):
        assert rental_days(date(2024, 1, 30), date(2024, 2, 2)) == 3


class TestCalculateTotalPrice:
    def test_base_rate_only(self):
        total = price_for_dates(date(2024, 1, 1), date(2024, 1, 3), Decimal("50"), False, False)
        assert total == Decimal("100.00")

    def test_with_gps_and_toll_pass(self):
        total = price_for_dates(date(2024, 1, 1), date(2024, 1, 3), Decimal("50"), True, True)
        assert total == Decimal("116.00")

    def test_same_day_range_prices_one_day(self):
        total = price_for_dates(date(2024, 1, 1), date(2024, 1, 1), Decimal("45"), False, False)
        assert total == Decimal("45.00")

    @pytest.mark.parametrize(
        "gps,toll_pass,expected",
        [
            (False, False, Decimal("195.00")),
            (True, False, Decimal("210.00")),
            (False, True, Decimal("204.00")),
            (True, True, Decimal("219.00")),
        ],
    )
    def test_addons_are_charged_per_day(self, gps, toll_pass, expected):
        assert calculate_total_price(3, Decimal("65.00"), gps, toll_pass) == expected

    def test_addon_rates(self):
        assert GPS_DAILY_RATE == Decimal("5.00")
        assert TOLL_PASS_DAILY_RATE == Decimal("3.00")

    def test_non_positive_days_are_floored_to_one(self):
        assert calculate_total_price(0, Decimal("42.00"), False, False) == Decimal("42.00")

    def test_result_is_quantized_to_cents(self):
        total = calculate_total_price(3, Decimal("33.335"), False, False)
        assert total == Decimal("100.01")
        assert total.as_tuple().exponent == -2
