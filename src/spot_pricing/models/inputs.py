"""Per-call inputs — value objects built fresh for every quote.

Unlike the config models these never reject a number: missing, non-finite
or out-of-range values are replaced by a default or clamped, so a quote can
always be produced.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spot_pricing.clock import parse_timestamp
from spot_pricing.config.fees import DEFAULTS, FeeSchedule
from spot_pricing.money import to_float

logger = logging.getLogger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "y", "on"})
_MAX_MINOR_UNIT = 6


class BookingMode(str, Enum):
    PARK_NOW = "park_now"
    RESERVE = "reserve"

    @classmethod
    def _missing_(cls, value: object) -> BookingMode | None:
        # Mobile clients send camelCase ("parkNow").
        if isinstance(value, str):
            normalised = value.replace("-", "_").lower()
            if normalised in ("parknow", "park_now"):
                return cls.PARK_NOW
            if normalised == "reserve":
                return cls.RESERVE
        return None


class VehicleType(str, Enum):
    STANDARD = "standard"
    SUV = "suv"
    TRUCK = "truck"


class RateContext(BaseModel):
    """Everything the rate deriver looks at for one spot and one booking.

    Both timestamps are required so the derivation stays deterministic; use
    ``spot_pricing.engine.rate.current_hourly_rate`` to default them to now.
    ISO-8601 strings are accepted; a timestamp that cannot be parsed is
    rejected, since there is no clock here to fall back on.
    """

    model_config = ConfigDict(frozen=True)

    base_rate: float | None = None
    """None falls back to the surge config's default base rate."""
    address: str = ""
    is_event_day: bool = False
    demand_score: float = 0.0
    vehicle_type: VehicleType = VehicleType.STANDARD
    start_time: datetime
    booking_created_at: datetime

    @field_validator("base_rate", mode="before")
    @classmethod
    def _default_base_rate(cls, value: Any) -> Any:
        if value is None:
            return None
        number = to_float(value)
        if number is None or not math.isfinite(number) or number <= 0:
            logger.debug("Unusable base rate %r, falling back to the default", value)
            return None
        return number

    @field_validator("address", mode="before")
    @classmethod
    def _default_address(cls, value: Any) -> Any:
        return "" if value is None else str(value)

    @field_validator("is_event_day", mode="before")
    @classmethod
    def _default_event_day(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY
        return bool(value)

    @field_validator("demand_score", mode="before")
    @classmethod
    def _clamp_demand(cls, value: Any) -> Any:
        number = to_float(value)
        if number is None or math.isnan(number):
            return 0.0
        # +inf is kept; the surge cap bounds it.
        return max(0.0, number)

    @field_validator("vehicle_type", mode="before")
    @classmethod
    def _default_vehicle(cls, value: Any) -> Any:
        if isinstance(value, VehicleType):
            return value
        if isinstance(value, str) and value.strip().lower() in {v.value for v in VehicleType}:
            return value.strip().lower()
        return VehicleType.STANDARD

    @field_validator("start_time", "booking_created_at", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> Any:
        parsed = parse_timestamp(value)
        return value if parsed is None else parsed


class PricingInputs(FeeSchedule):
    """Duration and hourly rate, priced under a fee schedule.

    The fee fields drop the schedule's range checks: percentages are clamped
    into [0, 1], fixed fees below zero become 0 and the minor unit is held
    to 0..6.
    """

    hours: float = Field(description="Billed duration in hours.")
    rate_per_hour: float = Field(description="Hourly rate in major currency units.")

    platform_fee_pct: float = DEFAULTS.platform_fee_pct
    driver_service_fee_pct: float = DEFAULTS.driver_service_fee_pct
    driver_service_fee_fixed: float = DEFAULTS.driver_service_fee_fixed
    processing_pct: float = DEFAULTS.processing_pct
    processing_fixed: float = DEFAULTS.processing_fixed
    sales_tax_pct: float = DEFAULTS.sales_tax_pct
    currency_minor_unit: int = DEFAULTS.currency_minor_unit
    processing_paid_by_host: bool = DEFAULTS.processing_paid_by_host

    @field_validator("hours", "rate_per_hour", "driver_service_fee_fixed", "processing_fixed", mode="before")
    @classmethod
    def _non_negative(cls, value: Any) -> Any:
        number = to_float(value)
        if number is None or not math.isfinite(number) or number < 0:
            logger.debug("Unusable pricing input %r, using 0", value)
            return 0.0
        return number

    @field_validator("platform_fee_pct", "driver_service_fee_pct", "processing_pct", "sales_tax_pct", mode="before")
    @classmethod
    def _fraction(cls, value: Any) -> Any:
        number = to_float(value)
        if number is None or not math.isfinite(number):
            logger.debug("Unusable fee percentage %r, using 0", value)
            return 0.0
        return min(1.0, max(0.0, number))

    @field_validator("currency_minor_unit", mode="before")
    @classmethod
    def _minor_unit(cls, value: Any) -> Any:
        number = to_float(value)
        if number is None or not math.isfinite(number):
            logger.debug("Unusable minor unit %r, using %d", value, DEFAULTS.currency_minor_unit)
            return DEFAULTS.currency_minor_unit
        return min(_MAX_MINOR_UNIT, max(0, int(number)))

    @field_validator("processing_paid_by_host", mode="before")
    @classmethod
    def _flag(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY
        return bool(value)

    @classmethod
    def from_schedule(
        cls,
        hours: float,
        rate_per_hour: float,
        schedule: FeeSchedule | None = None,
    ) -> PricingInputs:
        schedule = schedule or FeeSchedule()
        return cls(hours=hours, rate_per_hour=rate_per_hour, **schedule.model_dump())
