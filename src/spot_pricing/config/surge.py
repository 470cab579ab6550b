"""Surge configuration — the modifiers the rate deriver multiplies together.

Defaults reproduce the marketplace's published pricing rules:

- zone:      "downtown" ×1.25, "stadium"/"arena" ×1.35 (first match wins)
- peak:      weekdays 07:00–10:00 and 16:00–19:00 ×1.15
- overnight: 00:00–05:00 ×0.9
- event day ×1.3, demand up to +25%, short notice (≤ 2 h) ×1.1,
  SUVs and trucks ×1.1
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_BASE_RATE = 10.0


class ZoneRule(BaseModel):
    """Address keywords that put a spot in a priced zone."""

    model_config = ConfigDict(frozen=True)

    name: str
    keywords: tuple[str, ...] = Field(
        min_length=1,
        description="Case-insensitive substrings; any one matching selects the zone.",
    )
    multiplier: float = Field(gt=0)


class HourWindow(BaseModel):
    """Half-open local-hour window ``[start_hour, end_hour)``."""

    model_config = ConfigDict(frozen=True)

    start_hour: int = Field(ge=0, le=23)
    end_hour: int = Field(ge=1, le=24)

    @model_validator(mode="after")
    def _check_order(self) -> "HourWindow":
        if self.end_hour <= self.start_hour:
            raise ValueError("end_hour must be after start_hour")
        return self

    def contains(self, hour: int) -> bool:
        return self.start_hour <= hour < self.end_hour


def _default_zones() -> tuple[ZoneRule, ...]:
    return (
        ZoneRule(name="downtown", keywords=("downtown",), multiplier=1.25),
        ZoneRule(name="venue", keywords=("stadium", "arena"), multiplier=1.35),
    )


def _default_peaks() -> tuple[HourWindow, ...]:
    return (
        HourWindow(start_hour=7, end_hour=10),
        HourWindow(start_hour=16, end_hour=19),
    )


class SurgeConfig(BaseModel):
    """All inputs of the hourly rate deriver."""

    model_config = ConfigDict(frozen=True)

    default_base_rate: float = Field(
        default=DEFAULT_BASE_RATE, gt=0,
        description="Base hourly rate used when a listing has none.",
    )

    # --- Location ---
    zones: tuple[ZoneRule, ...] = Field(
        default_factory=_default_zones,
        description="Checked in order; only the first matching zone applies.",
    )

    # --- Time of day ---
    peak_windows: tuple[HourWindow, ...] = Field(default_factory=_default_peaks)
    peak_multiplier: float = Field(default=1.15, gt=0, description="Weekday rush-hour surcharge.")
    overnight_window: HourWindow = Field(
        default_factory=lambda: HourWindow(start_hour=0, end_hour=5),
    )
    overnight_multiplier: float = Field(default=0.9, gt=0, description="Overnight discount.")

    # --- Events & demand ---
    event_multiplier: float = Field(default=1.3, gt=0)
    demand_weight: float = Field(
        default=0.25, ge=0,
        description="Surge added per unit of demand score.",
    )
    demand_cap: float = Field(
        default=0.25, ge=0,
        description="Ceiling on the demand surge (0.25 = at most +25%).",
    )

    # --- Booking lead time ---
    short_notice_hours: float = Field(
        default=2.0, ge=0,
        description="Bookings starting within this many hours of creation pay the surcharge.",
    )
    short_notice_multiplier: float = Field(default=1.1, gt=0)

    # --- Vehicle ---
    large_vehicle_multiplier: float = Field(
        default=1.1, gt=0,
        description="Applied to SUVs and trucks.",
    )

    currency_minor_unit: int = Field(default=2, ge=0, le=6)
