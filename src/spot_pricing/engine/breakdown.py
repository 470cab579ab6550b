"""Price breakdown under a generic fee schedule.

Each line is rounded to the minor unit before it feeds the next one:

  1. base             = hours × rate
  2. driver_service   = base × service% + service_fixed
  3. tax              = (base + driver_service) × tax%
  4. driver_total     = base + driver_service + tax
  5. processing       = driver_total × processing% + processing_fixed
  6. platform_fee     = base × platform%
  7. host_payout / platform_net, depending on who pays processing

Rounding per step is part of the contract: deferring it to the end can move
totals by one minor unit.
"""

from __future__ import annotations

from spot_pricing.config.fees import FeeSchedule
from spot_pricing.models.inputs import PricingInputs
from spot_pricing.models.results import PricingBreakdown
from spot_pricing.money import as_amount, round_to_minor, to_decimal


def compute_pricing(inputs: PricingInputs) -> PricingBreakdown:
    """Itemise a booking of ``inputs.hours`` at ``inputs.rate_per_hour``."""
    n = inputs.currency_minor_unit

    def rnd(value):
        return round_to_minor(value, n)

    base = rnd(to_decimal(inputs.hours) * to_decimal(inputs.rate_per_hour))
    driver_service_fee = rnd(
        base * to_decimal(inputs.driver_service_fee_pct) + to_decimal(inputs.driver_service_fee_fixed)
    )
    tax = rnd((base + driver_service_fee) * to_decimal(inputs.sales_tax_pct))
    driver_total = rnd(base + driver_service_fee + tax)
    processing_fee = rnd(driver_total * to_decimal(inputs.processing_pct) + to_decimal(inputs.processing_fixed))
    platform_fee = rnd(base * to_decimal(inputs.platform_fee_pct))

    if inputs.processing_paid_by_host:
        host_payout = rnd(base - platform_fee - processing_fee)
        platform_net = rnd(driver_service_fee + platform_fee)
    else:
        host_payout = rnd(base - platform_fee)
        platform_net = rnd(driver_service_fee + platform_fee - processing_fee)

    return PricingBreakdown(
        base=as_amount(base),
        driver_service_fee=as_amount(driver_service_fee),
        tax=as_amount(tax),
        driver_total=as_amount(driver_total),
        processing_fee=as_amount(processing_fee),
        platform_fee=as_amount(platform_fee),
        host_payout=as_amount(host_payout),
        platform_net=as_amount(platform_net),
    )


def compute_pricing_for_rate(
    hours: float,
    rate_per_hour: float,
    schedule: FeeSchedule | None = None,
) -> PricingBreakdown:
    """``compute_pricing`` with the fee lines taken from ``schedule`` (defaults if None)."""
    return compute_pricing(PricingInputs.from_schedule(hours, rate_per_hour, schedule))
