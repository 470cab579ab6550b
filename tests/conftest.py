"""Shared test fixtures — fixed timestamps and the default fee schedule.

No test reads the wall clock: every timestamp here is explicit.
2024-01-01 is a Monday, so 2024-01-02 is a Tuesday and 2024-01-06 a Saturday.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from spot_pricing.config import FeeSchedule


@pytest.fixture
def tuesday_8am() -> datetime:
    return datetime(2024, 1, 2, 8, 0)


@pytest.fixture
def tuesday_noon() -> datetime:
    return datetime(2024, 1, 2, 12, 0)


@pytest.fixture
def saturday_8am() -> datetime:
    return datetime(2024, 1, 6, 8, 0)


@pytest.fixture
def created_day_before() -> datetime:
    """Creation time far enough ahead of every start that no short-notice surcharge applies."""
    return datetime(2024, 1, 1, 0, 0)


@pytest.fixture
def fees() -> FeeSchedule:
    return FeeSchedule(
        platform_fee_pct=0.12,
        driver_service_fee_pct=0.08,
        driver_service_fee_fixed=0.50,
        processing_pct=0.029,
        processing_fixed=0.30,
        sales_tax_pct=0.0,
        currency_minor_unit=2,
        processing_paid_by_host=False,
    )
