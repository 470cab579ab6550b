"""Top-level pricing config — bundles fees, surge and booking-mode settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from spot_pricing.config.booking import BookingConfig
from spot_pricing.config.fees import FeeSchedule
from spot_pricing.config.surge import SurgeConfig


class PricingConfig(BaseModel):
    """Complete configuration for one deployment of the pricing core."""

    model_config = ConfigDict(frozen=True)

    fees: FeeSchedule = Field(default_factory=FeeSchedule)
    surge: SurgeConfig = Field(default_factory=SurgeConfig)
    booking: BookingConfig = Field(default_factory=BookingConfig)


def default_pricing_config() -> PricingConfig:
    """Fresh config with every section at its defaults."""
    return PricingConfig()


def load_pricing_config(path: str | Path) -> PricingConfig:
    """Read a (possibly partial) JSON config file.

    Missing sections and fields take their defaults.  Invalid values raise
    ``pydantic.ValidationError``.
    """
    return PricingConfig.model_validate_json(Path(path).read_text(encoding="utf-8"))


def dump_pricing_config(config: PricingConfig, indent: int | None = 2) -> str:
    return config.model_dump_json(indent=indent)
