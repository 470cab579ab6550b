"""Tests for engine/estimates.py — host earnings preview."""

from __future__ import annotations

import pytest

from spot_pricing.engine.estimates import estimate_monthly_earnings, preview_listing_rate


def test_monthly_earnings_defaults():
    # 14.38 × 8 h × 30 days × 50% occupancy
    assert estimate_monthly_earnings(14.38) == 1725.60


def test_monthly_earnings_custom_occupancy():
    assert estimate_monthly_earnings(10, hours_per_day=10, days=30, occupancy=0.25) == 750.0


@pytest.mark.parametrize("rate", [float("nan"), float("inf"), None])
def test_monthly_earnings_unusable_rate(rate):
    assert estimate_monthly_earnings(rate) == 0.0


def test_preview_listing_rate(tuesday_noon, created_day_before):
    assert preview_listing_rate("12 Downtown St", tuesday_noon, created_day_before) == 12.50
    assert preview_listing_rate("12 Elm St", tuesday_noon, created_day_before) == 10.00


@pytest.mark.parametrize(
    "kwargs",
    [{"occupancy": -0.5}, {"hours_per_day": -8}, {"days": -30}, {"hourly_rate": -10}],
)
def test_monthly_earnings_negative_inputs_count_as_zero(kwargs):
    params = {"hourly_rate": 10, **kwargs}
    assert estimate_monthly_earnings(**params) == 0.0


def test_monthly_earnings_caps_hours_and_occupancy():
    # 10 × 24 h × 30 days × 100%
    assert estimate_monthly_earnings(10, hours_per_day=30, occupancy=1.5) == 7200.0
