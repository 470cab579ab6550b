"""Result types — the contract between the pricing engine and its callers.

Every money field holds an amount already rounded to the configured minor
unit; no unrounded intermediate is ever exposed.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# ═══════════════════════════════════════════════════════════════════════════
# Rate deriver
# ═══════════════════════════════════════════════════════════════════════════

class RateMultipliers(BaseModel):
    """Each surge factor applied to the base rate, and the result."""

    model_config = ConfigDict(frozen=True)

    base_rate: float
    zone: float
    peak: float
    overnight: float
    event: float
    demand: float
    lead_time: float
    vehicle: float

    total: float
    """Product of all multipliers, unrounded."""

    hourly_rate: float
    """base_rate × total, rounded once to the minor unit."""


# ═══════════════════════════════════════════════════════════════════════════
# Generic fee-schedule breakdown
# ═══════════════════════════════════════════════════════════════════════════

class PricingBreakdown(BaseModel):
    """Itemised charge under a ``FeeSchedule``.

    Accounting identities (each term already rounded):
      driver_total = base + driver_service_fee + tax
      host paid processing:    host_payout = base − platform_fee − processing_fee
                               platform_net = driver_service_fee + platform_fee
      platform paid processing: host_payout = base − platform_fee
                               platform_net = driver_service_fee + platform_fee − processing_fee
    """

    model_config = ConfigDict(frozen=True)

    base: float
    driver_service_fee: float
    tax: float
    driver_total: float
    """What the driver is charged."""
    processing_fee: float
    platform_fee: float
    host_payout: float
    platform_net: float


# ═══════════════════════════════════════════════════════════════════════════
# Booking-mode breakdown
# ═══════════════════════════════════════════════════════════════════════════

class BookingPriceBreakdown(BaseModel):
    """Point-of-booking quote for a park-now or reserve booking."""

    model_config = ConfigDict(frozen=True)

    hourly_rate: float
    """Host rate after the mode's band clamp."""
    hours: float
    """Billed hours, never below the minimum billable duration."""
    subtotal: float
    booking_fee: float
    total: float
    """Driver-facing total, after any minimum charge."""
    platform_fee: float
    host_payout: float
    minimum_charge_applied: bool
    """Callers should tell the driver when this is true."""
