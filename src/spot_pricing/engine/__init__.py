"""Engine — pure pricing computations."""

from spot_pricing.engine.rate import (
    compute_rate_multipliers,
    current_hourly_rate,
    derive_hourly_rate,
    derive_zone_multiplier,
)
from spot_pricing.engine.breakdown import compute_pricing, compute_pricing_for_rate
from spot_pricing.engine.booking import (
    compute_booking_price_breakdown,
    get_hourly_rate_for_mode,
    park_now_window,
    quote_park_now,
)
from spot_pricing.engine.availability import (
    is_window_available,
    unavailable_spot_ids,
    windows_overlap,
)
from spot_pricing.engine.estimates import estimate_monthly_earnings, preview_listing_rate

__all__ = [
    "compute_rate_multipliers",
    "current_hourly_rate",
    "derive_hourly_rate",
    "derive_zone_multiplier",
    "compute_pricing",
    "compute_pricing_for_rate",
    "compute_booking_price_breakdown",
    "get_hourly_rate_for_mode",
    "park_now_window",
    "quote_park_now",
    # Availability & estimates
    "is_window_available",
    "unavailable_spot_ids",
    "windows_overlap",
    "estimate_monthly_earnings",
    "preview_listing_rate",
]
