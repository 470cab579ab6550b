"""Pricing core for a peer-to-peer parking marketplace.

Three pure computations:

- ``derive_hourly_rate``              — base rate × zone / time / demand surge
- ``compute_pricing``                 — fee-schedule breakdown of a booking
- ``compute_booking_price_breakdown`` — park-now / reserve quote with minimum charge
"""

from spot_pricing.config import (
    BookingConfig,
    FeeSchedule,
    PricingConfig,
    SurgeConfig,
    load_pricing_config,
)
from spot_pricing.engine import (
    compute_booking_price_breakdown,
    compute_pricing,
    compute_rate_multipliers,
    current_hourly_rate,
    derive_hourly_rate,
    derive_zone_multiplier,
    get_hourly_rate_for_mode,
)
from spot_pricing.models import (
    BookingMode,
    BookingPriceBreakdown,
    PricingBreakdown,
    PricingInputs,
    RateContext,
    RateMultipliers,
    VehicleType,
)
from spot_pricing.money import round_to_minor
from spot_pricing.store import ListingStore

__version__ = "0.1.0"

__all__ = [
    "BookingConfig",
    "FeeSchedule",
    "PricingConfig",
    "SurgeConfig",
    "load_pricing_config",
    "compute_booking_price_breakdown",
    "compute_pricing",
    "compute_rate_multipliers",
    "current_hourly_rate",
    "derive_hourly_rate",
    "derive_zone_multiplier",
    "get_hourly_rate_for_mode",
    "BookingMode",
    "BookingPriceBreakdown",
    "PricingBreakdown",
    "PricingInputs",
    "RateContext",
    "RateMultipliers",
    "VehicleType",
    "round_to_minor",
    "ListingStore",
]
