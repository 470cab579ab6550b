"""Value objects — per-call inputs, engine results and backend records."""

from spot_pricing.models.inputs import (
    BookingMode,
    PricingInputs,
    RateContext,
    VehicleType,
)
from spot_pricing.models.results import (
    BookingPriceBreakdown,
    PricingBreakdown,
    RateMultipliers,
)
from spot_pricing.models.records import (
    BookingRecord,
    Listing,
    map_booking_row,
    map_spot_row,
)

__all__ = [
    "BookingMode",
    "PricingInputs",
    "RateContext",
    "VehicleType",
    "BookingPriceBreakdown",
    "PricingBreakdown",
    "RateMultipliers",
    "BookingRecord",
    "Listing",
    "map_booking_row",
    "map_spot_row",
]
