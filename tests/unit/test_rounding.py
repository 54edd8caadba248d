"""Tests for the presentation rounding helpers."""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from villa_kernel.domain.values import round_cents, round_half_up, rounded_percentage


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2.5", "3"),
            ("-2.5", "-2"),
            ("2.4999", "2"),
            ("-0.5", "0"),
            ("7", "7"),
        ],
    )
    def test_halves_go_toward_positive_infinity(self, value, expected):
        assert round_half_up(Decimal(value)) == Decimal(expected)


class TestRoundCents:
    def test_half_cent_rounds_up(self):
        assert round_cents(Decimal("10.005")) == Decimal("10.01")

    def test_negative_half_cent_rounds_toward_zero(self):
        assert round_cents(Decimal("-10.005")) == Decimal("-10.00")

    def test_whole_amount_unchanged(self):
        assert round_cents(Decimal("1500.000000000")) == Decimal("1500")

    @given(st.decimals(min_value=-10**9, max_value=10**9, places=2))
    def test_two_place_values_are_fixed_points(self, value):
        assert round_cents(value) == value


class TestRoundedPercentage:
    def test_quarter(self):
        assert rounded_percentage(1, 4) == 25

    def test_half_percent_rounds_up(self):
        """1/8 = 12.5% -> 13."""
        assert rounded_percentage(1, 8) == 13

    def test_thirds(self):
        assert rounded_percentage(1, 3) == 33
        assert rounded_percentage(2, 3) == 67

    def test_zero_whole(self):
        assert rounded_percentage(0, 0) == 0

    @given(st.integers(min_value=1, max_value=500).flatmap(
        lambda total: st.tuples(st.integers(min_value=0, max_value=total), st.just(total))
    ))
    def test_bounded(self, pair):
        part, whole = pair
        assert 0 <= rounded_percentage(part, whole) <= 100
