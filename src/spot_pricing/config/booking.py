"""Booking-mode pricing — rate bands, flat booking fees and minimum charge."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BookingModeBand(BaseModel):
    """Allowed hourly-rate band for one booking mode."""

    model_config = ConfigDict(frozen=True)

    min_rate: float = Field(ge=0)
    max_rate: float = Field(ge=0)
    default_rate: float = Field(
        ge=0,
        description="Substituted when the host has not set a usable rate.",
    )

    @model_validator(mode="after")
    def _check_band(self) -> "BookingModeBand":
        if self.max_rate < self.min_rate:
            raise ValueError("max_rate must be >= min_rate")
        return self


class BookingConfig(BaseModel):
    """Point-of-booking pricing for "park now" and "reserve" bookings.

    Low-rate spots (hourly rate at or below ``low_rate_threshold``) pay the
    higher booking fee, and short "park now" stays on them are lifted to
    ``minimum_charge``.  The platform/host split is taken on the subtotal only.
    """

    model_config = ConfigDict(frozen=True)

    park_now: BookingModeBand = Field(
        default_factory=lambda: BookingModeBand(min_rate=2.0, max_rate=4.0, default_rate=3.0),
    )
    reserve: BookingModeBand = Field(
        default_factory=lambda: BookingModeBand(min_rate=1.5, max_rate=3.0, default_rate=2.25),
    )

    # --- Fees ---
    low_rate_threshold: float = Field(default=2.0, ge=0)
    standard_booking_fee: float = Field(default=0.49, ge=0)
    low_rate_booking_fee: float = Field(default=0.79, ge=0)
    minimum_charge: float = Field(
        default=3.99, ge=0,
        description="Floor on the driver total for low-rate park-now bookings.",
    )

    # --- Split ---
    platform_share: float = Field(default=0.30, ge=0, le=1.0)
    host_share: float = Field(default=0.70, ge=0, le=1.0)

    # --- Durations ---
    min_billable_hours: float = Field(
        default=0.25, ge=0,
        description="Shorter (or inverted) spans are billed as this many hours.",
    )
    default_park_now_minutes: int = Field(default=30, ge=1)
    park_now_min_availability_minutes: int = Field(
        default=30, ge=1,
        description="A spot must be free this long from now to be offered for park-now.",
    )

    @model_validator(mode="after")
    def _check_split(self) -> "BookingConfig":
        if self.platform_share + self.host_share > 1.0 + 1e-9:
            raise ValueError("platform_share + host_share must not exceed 1")
        return self
