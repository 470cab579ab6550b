"""Configuration models — fee schedule, surge rules and booking modes."""

from spot_pricing.config.fees import DEFAULTS, FeeSchedule
from spot_pricing.config.surge import DEFAULT_BASE_RATE, HourWindow, SurgeConfig, ZoneRule
from spot_pricing.config.booking import BookingConfig, BookingModeBand
from spot_pricing.config.pricing import (
    PricingConfig,
    default_pricing_config,
    dump_pricing_config,
    load_pricing_config,
)

__all__ = [
    "DEFAULTS",
    "DEFAULT_BASE_RATE",
    "FeeSchedule",
    "HourWindow",
    "SurgeConfig",
    "ZoneRule",
    "BookingConfig",
    "BookingModeBand",
    "PricingConfig",
    "default_pricing_config",
    "dump_pricing_config",
    "load_pricing_config",
]
