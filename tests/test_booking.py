"""Tests for engine/booking.py — park-now / reserve quotes."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from spot_pricing.config import BookingConfig, BookingModeBand
from spot_pricing.engine.booking import (
    compute_booking_price_breakdown,
    get_hourly_rate_for_mode,
    park_now_window,
    quote_park_now,
)
from spot_pricing.models import BookingMode

START = datetime(2024, 1, 2, 10, 0)


def _quote(mode, minutes, host_rate, config=None):
    return compute_booking_price_breakdown(
        mode, START, START + timedelta(minutes=minutes), host_rate, config,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Rate bands
# ═══════════════════════════════════════════════════════════════════════════

class TestHourlyRateForMode:

    @pytest.mark.parametrize(
        "host_rate, mode, expected",
        [
            (1000, BookingMode.PARK_NOW, 4.00),
            (-5, BookingMode.PARK_NOW, 2.00),
            (3.25, BookingMode.PARK_NOW, 3.25),
            (1000, BookingMode.RESERVE, 3.00),
            (0, BookingMode.RESERVE, 1.50),
            (2.555, BookingMode.RESERVE, 2.56),
        ],
    )
    def test_clamped_into_band(self, host_rate, mode, expected):
        assert get_hourly_rate_for_mode(host_rate, mode) == expected

    @pytest.mark.parametrize(
        "host_rate, mode, expected",
        [
            (None, BookingMode.PARK_NOW, 3.00),
            (float("nan"), BookingMode.PARK_NOW, 3.00),
            (float("inf"), BookingMode.PARK_NOW, 3.00),
            (None, BookingMode.RESERVE, 2.25),
            ("4", BookingMode.RESERVE, 2.25),
        ],
    )
    def test_unusable_rate_uses_mode_default(self, host_rate, mode, expected):
        assert get_hourly_rate_for_mode(host_rate, mode) == expected

    def test_accepts_camel_case_mode(self):
        assert get_hourly_rate_for_mode(1000, "parkNow") == 4.00
        assert get_hourly_rate_for_mode(1000, "park_now") == 4.00

    def test_unknown_mode_priced_as_reserve(self):
        assert get_hourly_rate_for_mode(1000, "valet") == 3.00

    def test_each_mode_reads_its_own_band(self):
        config = BookingConfig(
            park_now=BookingModeBand(min_rate=5.0, max_rate=6.0, default_rate=5.5),
            reserve=BookingModeBand(min_rate=1.0, max_rate=2.0, default_rate=1.5),
        )
        assert get_hourly_rate_for_mode(None, BookingMode.PARK_NOW, config) == 5.5
        assert get_hourly_rate_for_mode(None, "parkNow", config) == 5.5
        assert get_hourly_rate_for_mode(None, BookingMode.RESERVE, config) == 1.5
        assert get_hourly_rate_for_mode(9.0, "valet", config) == 2.0

    @pytest.mark.parametrize("host_rate", [-1e9, -1, 0, 1.99, 2, 3.7, 4.01, 1e9])
    def test_always_within_band(self, host_rate):
        for mode, (low, high) in {
            BookingMode.PARK_NOW: (2.0, 4.0),
            BookingMode.RESERVE: (1.5, 3.0),
        }.items():
            assert low <= get_hourly_rate_for_mode(host_rate, mode) <= high


# ═══════════════════════════════════════════════════════════════════════════
# Breakdown
# ═══════════════════════════════════════════════════════════════════════════

class TestBookingBreakdown:

    def test_low_rate_park_now_hits_minimum_charge(self):
        """A $1.50 host rate is lifted to the $2.00 park-now floor first."""
        b = _quote(BookingMode.PARK_NOW, 60, 1.50)
        assert b.hourly_rate == 2.00
        assert b.hours == 1.0
        assert b.subtotal == 2.00
        assert b.booking_fee == 0.79
        assert b.minimum_charge_applied is True
        assert b.total == 3.99
        assert b.platform_fee == 0.60
        assert b.host_payout == 1.40

    def test_minimum_charge_with_wider_park_now_band(self):
        config = BookingConfig(park_now=BookingModeBand(min_rate=1.0, max_rate=4.0, default_rate=3.0))
        b = _quote(BookingMode.PARK_NOW, 60, 1.50, config)
        assert b.hourly_rate == 1.50
        assert b.subtotal == 1.50
        assert b.booking_fee == 0.79
        assert b.minimum_charge_applied is True
        assert b.total == 3.99
        # split is on the subtotal, not on the minimum charge
        assert b.platform_fee == 0.45
        assert b.host_payout == 1.05

    def test_reserve_never_gets_minimum_charge(self):
        b = _quote(BookingMode.RESERVE, 60, 1.50)
        assert b.hourly_rate == 1.50
        assert b.booking_fee == 0.79
        assert b.minimum_charge_applied is False
        assert b.total == 2.29

    def test_low_rate_above_minimum_is_not_lifted(self):
        b = _quote(BookingMode.PARK_NOW, 120, 2.00)
        assert b.subtotal == 4.00
        assert b.total == 4.79
        assert b.minimum_charge_applied is False

    def test_standard_booking_fee(self):
        b = _quote(BookingMode.PARK_NOW, 120, 3.00)
        assert b.subtotal == 6.00
        assert b.booking_fee == 0.49
        assert b.total == 6.49
        assert b.platform_fee == 1.80
        assert b.host_payout == 4.20
        assert b.minimum_charge_applied is False

    def test_split_rounds_each_side(self):
        """90 min at $2.50: 30% of 3.75 = 1.125 → 1.13, 70% = 2.625 → 2.63."""
        b = _quote(BookingMode.RESERVE, 90, 2.50)
        assert b.subtotal == 3.75
        assert b.total == 4.24
        assert b.platform_fee == 1.13
        assert b.host_payout == 2.63

    def test_fractional_hours(self):
        b = _quote(BookingMode.PARK_NOW, 20, 3.00)
        assert b.hours == pytest.approx(1 / 3)
        assert b.subtotal == 1.00


class TestBillableHours:

    @pytest.mark.parametrize("minutes", [0, -30, -600, 5, 10, 15])
    def test_short_or_inverted_span_billed_as_quarter_hour(self, minutes):
        b = _quote(BookingMode.RESERVE, minutes, 3.00)
        assert b.hours == 0.25
        assert b.subtotal == 0.75
        assert b.total == 1.24

    def test_missing_timestamps_billed_as_quarter_hour(self):
        b = compute_booking_price_breakdown(BookingMode.RESERVE, None, None, 3.00)
        assert b.hours == 0.25

    def test_every_money_field_is_whole_cents(self):
        for minutes in (7, 20, 47, 95, 181):
            for rate in (None, 1.37, 2.0, 2.99, 3.333):
                for mode in BookingMode:
                    b = _quote(mode, minutes, rate)
                    for name in ("hourly_rate", "subtotal", "booking_fee", "total", "platform_fee", "host_payout"):
                        value = getattr(b, name)
                        assert round(value, 2) == value, name

    def test_idempotent(self):
        assert _quote(BookingMode.PARK_NOW, 47, 2.2) == _quote(BookingMode.PARK_NOW, 47, 2.2)


# ═══════════════════════════════════════════════════════════════════════════
# Park-now helpers
# ═══════════════════════════════════════════════════════════════════════════

class TestParkNow:

    def test_default_window_is_thirty_minutes(self):
        start, end = park_now_window(START)
        assert start == START
        assert end - start == timedelta(minutes=30)

    def test_custom_window(self):
        _, end = park_now_window(START, 90)
        assert end == START + timedelta(minutes=90)

    def test_quote_park_now_default_duration(self):
        b = quote_park_now(START, 3.00)
        assert b.hours == 0.5
        assert b.subtotal == 1.50
        assert b.total == 1.99
        assert b.minimum_charge_applied is False

    def test_quote_park_now_low_rate(self):
        b = quote_park_now(START, 1.00)
        assert b.hourly_rate == 2.00
        assert b.subtotal == 1.00
        assert b.total == 3.99
        assert b.minimum_charge_applied is True
        assert b.platform_fee == 0.30
        assert b.host_payout == 0.70
