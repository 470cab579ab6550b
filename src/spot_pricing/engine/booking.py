"""Booking-mode pricing — the quote shown when a driver parks now or reserves.

Simpler than the fee-schedule breakdown: the host rate is clamped into the
mode's band, a flat booking fee is added, and low-rate park-now bookings are
lifted to a minimum charge.  Platform and host split the subtotal 30/70; the
booking fee and any minimum-charge top-up are not part of that split.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from decimal import Decimal

from spot_pricing.clock import span
from spot_pricing.config.booking import BookingConfig, BookingModeBand
from spot_pricing.models.inputs import BookingMode
from spot_pricing.models.results import BookingPriceBreakdown
from spot_pricing.money import as_amount, clamp, is_finite_number, round_to_minor, to_decimal

logger = logging.getLogger(__name__)

_DEFAULT_BOOKING = BookingConfig()
_SECONDS_PER_HOUR = Decimal(3600)


def _band(mode: BookingMode, config: BookingConfig) -> BookingModeBand:
    return config.park_now if mode is BookingMode.PARK_NOW else config.reserve


def _mode(mode: BookingMode | str) -> BookingMode:
    try:
        return BookingMode(mode)
    except ValueError:
        logger.debug("Unknown booking mode %r, pricing as reserve", mode)
        return BookingMode.RESERVE


def _hourly_rate(host_rate: float | None, mode: BookingMode, config: BookingConfig) -> Decimal:
    band = _band(mode, config)
    if is_finite_number(host_rate):
        rate = to_decimal(host_rate)
    else:
        logger.debug("No usable host rate (%r), using %s default %.2f", host_rate, mode.value, band.default_rate)
        rate = to_decimal(band.default_rate)

    clamped = clamp(rate, to_decimal(band.min_rate), to_decimal(band.max_rate))
    if clamped != rate:
        logger.debug("Host rate %s outside %s band, clamped to %s", rate, mode.value, clamped)
    return round_to_minor(clamped)


def get_hourly_rate_for_mode(
    host_rate: float | None,
    mode: BookingMode | str,
    config: BookingConfig | None = None,
) -> float:
    """Host rate clamped into the band for ``mode``.

    park_now: [2.00, 4.00], default 3.00.  reserve: [1.50, 3.00], default 2.25.
    """
    config = config or _DEFAULT_BOOKING
    return as_amount(_hourly_rate(host_rate, _mode(mode), config))


def _billable_hours(start: datetime | None, end: datetime | None, config: BookingConfig) -> Decimal:
    floor = to_decimal(config.min_billable_hours)
    if not isinstance(start, datetime) or not isinstance(end, datetime):
        return floor
    seconds = to_decimal(span(start, end).total_seconds())
    hours = max(Decimal(0), seconds) / _SECONDS_PER_HOUR
    return max(floor, hours)


def compute_booking_price_breakdown(
    mode: BookingMode | str,
    start: datetime | None,
    end: datetime | None,
    host_rate: float | None,
    config: BookingConfig | None = None,
) -> BookingPriceBreakdown:
    """Quote a booking from ``start`` to ``end`` on a spot with ``host_rate``."""
    config = config or _DEFAULT_BOOKING
    mode = _mode(mode)

    hours = _billable_hours(start, end, config)
    hourly_rate = _hourly_rate(host_rate, mode, config)
    subtotal = round_to_minor(hours * hourly_rate)

    low_rate = hourly_rate <= to_decimal(config.low_rate_threshold)
    booking_fee = round_to_minor(config.low_rate_booking_fee if low_rate else config.standard_booking_fee)
    raw_total = round_to_minor(subtotal + booking_fee)

    minimum_charge = to_decimal(config.minimum_charge)
    minimum_charge_applied = mode is BookingMode.PARK_NOW and low_rate and raw_total < minimum_charge
    if minimum_charge_applied:
        logger.debug("Raw total %s below minimum charge, charging %s", raw_total, minimum_charge)
    total = minimum_charge if minimum_charge_applied else raw_total

    platform_fee = round_to_minor(subtotal * to_decimal(config.platform_share))
    host_payout = round_to_minor(subtotal * to_decimal(config.host_share))

    return BookingPriceBreakdown(
        hourly_rate=as_amount(hourly_rate),
        hours=float(hours),
        subtotal=as_amount(subtotal),
        booking_fee=as_amount(booking_fee),
        total=as_amount(total),
        platform_fee=as_amount(platform_fee),
        host_payout=as_amount(host_payout),
        minimum_charge_applied=minimum_charge_applied,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Park-now helpers
# ═══════════════════════════════════════════════════════════════════════════

def park_now_window(
    start: datetime,
    minutes: int | None = None,
    config: BookingConfig | None = None,
) -> tuple[datetime, datetime]:
    """Booking window starting at ``start``, default length from config (30 min)."""
    config = config or _DEFAULT_BOOKING
    if minutes is None:
        minutes = config.default_park_now_minutes
    return start, start + timedelta(minutes=minutes)


def quote_park_now(
    start: datetime,
    host_rate: float | None,
    minutes: int | None = None,
    config: BookingConfig | None = None,
) -> BookingPriceBreakdown:
    """Quote an immediate booking lasting ``minutes``."""
    window_start, window_end = park_now_window(start, minutes, config)
    return compute_booking_price_breakdown(BookingMode.PARK_NOW, window_start, window_end, host_rate, config)
