"""Hourly rate deriver — base rate × location / time / demand surge.

    rate = base × zone × peak × overnight × event × demand × lead_time × vehicle

Every factor is evaluated independently and the product is rounded exactly
once, at the end.  Peak and overnight windows never overlap with the default
config, so at most one of them is ever different from 1.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal

from spot_pricing.clock import Clock, parse_timestamp, span
from spot_pricing.config.surge import SurgeConfig
from spot_pricing.models.inputs import RateContext, VehicleType
from spot_pricing.models.results import RateMultipliers
from spot_pricing.money import as_amount, round_to_minor, to_decimal

logger = logging.getLogger(__name__)

_ONE = Decimal(1)
_LARGE_VEHICLES = frozenset({VehicleType.SUV, VehicleType.TRUCK})
_DEFAULT_SURGE = SurgeConfig()


def derive_zone_multiplier(address: str | None, config: SurgeConfig | None = None) -> float:
    """Multiplier of the first zone whose keywords appear in ``address``."""
    return float(_zone_factor(address, config or _DEFAULT_SURGE))


def _zone_factor(address: str | None, config: SurgeConfig) -> Decimal:
    text = (address or "").lower()
    for zone in config.zones:
        if any(keyword.lower() in text for keyword in zone.keywords):
            return to_decimal(zone.multiplier)
    return _ONE


def _peak_factor(start: datetime, config: SurgeConfig) -> Decimal:
    # Monday=0 .. Friday=4
    if start.weekday() >= 5:
        return _ONE
    if any(window.contains(start.hour) for window in config.peak_windows):
        return to_decimal(config.peak_multiplier)
    return _ONE


def _overnight_factor(start: datetime, config: SurgeConfig) -> Decimal:
    if config.overnight_window.contains(start.hour):
        return to_decimal(config.overnight_multiplier)
    return _ONE


def _demand_factor(demand_score: float, config: SurgeConfig) -> Decimal:
    cap = to_decimal(config.demand_cap)
    if demand_score == float("inf"):
        return _ONE + cap
    return _ONE + min(cap, to_decimal(demand_score) * to_decimal(config.demand_weight))


def _lead_time_factor(start: datetime, created: datetime, config: SurgeConfig) -> Decimal:
    lead_hours = max(0.0, span(created, start).total_seconds() / 3600)
    if lead_hours <= config.short_notice_hours:
        return to_decimal(config.short_notice_multiplier)
    return _ONE


def compute_rate_multipliers(
    context: RateContext,
    config: SurgeConfig | None = None,
) -> RateMultipliers:
    """Evaluate every surge factor for ``context`` and the resulting rate."""
    config = config or _DEFAULT_SURGE

    if context.base_rate is None:
        base_rate = to_decimal(config.default_base_rate)
    else:
        base_rate = to_decimal(context.base_rate)

    zone = _zone_factor(context.address, config)
    peak = _peak_factor(context.start_time, config)
    overnight = _overnight_factor(context.start_time, config)
    event = to_decimal(config.event_multiplier) if context.is_event_day else _ONE
    demand = _demand_factor(context.demand_score, config)
    lead_time = _lead_time_factor(context.start_time, context.booking_created_at, config)
    vehicle = to_decimal(config.large_vehicle_multiplier) if context.vehicle_type in _LARGE_VEHICLES else _ONE

    total = zone * peak * overnight * event * demand * lead_time * vehicle
    hourly_rate = round_to_minor(base_rate * total, config.currency_minor_unit)

    return RateMultipliers(
        base_rate=as_amount(base_rate),
        zone=float(zone),
        peak=float(peak),
        overnight=float(overnight),
        event=float(event),
        demand=float(demand),
        lead_time=float(lead_time),
        vehicle=float(vehicle),
        total=float(total),
        hourly_rate=as_amount(hourly_rate),
    )


def derive_hourly_rate(context: RateContext, config: SurgeConfig | None = None) -> float:
    """Effective hourly rate for ``context``, rounded to the minor unit."""
    return compute_rate_multipliers(context, config).hourly_rate


def current_hourly_rate(
    clock: Clock = datetime.now,
    config: SurgeConfig | None = None,
    **fields,
) -> float:
    """Convenience wrapper: ``derive_hourly_rate`` with missing timestamps set to ``clock()``.

    ``fields`` are ``RateContext`` fields; ``start_time`` and
    ``booking_created_at`` may be omitted, None or unparsable.
    """
    now = clock()
    for name in ("start_time", "booking_created_at"):
        if parse_timestamp(fields.get(name)) is None:
            fields[name] = now
    return derive_hourly_rate(RateContext(**fields), config)
