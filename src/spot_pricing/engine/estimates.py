"""Host-facing estimates shown while creating a listing."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from spot_pricing.config.surge import SurgeConfig
from spot_pricing.engine.rate import derive_hourly_rate
from spot_pricing.models.inputs import RateContext
from spot_pricing.money import as_amount, is_finite_number, round_to_minor, to_decimal

_HOURS_PER_DAY = Decimal(24)


def estimate_monthly_earnings(
    hourly_rate: float,
    hours_per_day: float = 8,
    days: int = 30,
    occupancy: float = 0.5,
) -> float:
    """Gross monthly earnings at ``occupancy`` of ``hours_per_day`` listed hours.

    Defaults: 8 listed hours at 50% occupancy (~4 booked hours) for 30 days.
    Negative inputs count as 0, hours are capped at 24 and occupancy at 1.
    """
    values = (hourly_rate, hours_per_day, days, occupancy)
    if not all(is_finite_number(v) for v in values):
        return 0.0
    rate, hours, day_count, share = (max(Decimal(0), to_decimal(v)) for v in values)
    gross = rate * min(hours, _HOURS_PER_DAY) * day_count * min(share, Decimal(1))
    return as_amount(round_to_minor(gross))


def preview_listing_rate(
    address: str,
    start_time: datetime,
    created_at: datetime,
    config: SurgeConfig | None = None,
) -> float:
    """Hourly rate a new listing at ``address`` would get at the default base rate."""
    context = RateContext(address=address, start_time=start_time, booking_created_at=created_at)
    return derive_hourly_rate(context, config)
