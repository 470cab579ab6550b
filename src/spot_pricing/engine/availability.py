"""Booking-window availability.

Windows are half-open, so a booking ending at 10:00 does not block one
starting at 10:00.  Only pending and active bookings hold a spot.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable

from spot_pricing.clock import align
from spot_pricing.config.booking import BookingConfig
from spot_pricing.models.records import BookingRecord

BLOCKING_STATUSES = frozenset({"pending", "active"})

_DEFAULT_BOOKING = BookingConfig()


def is_blocking(booking: BookingRecord) -> bool:
    return booking.status.lower() in BLOCKING_STATUSES


def windows_overlap(
    a_start: datetime,
    a_end: datetime,
    b_start: datetime,
    b_end: datetime,
) -> bool:
    a_start, b_end = align(a_start, b_end)
    a_end, b_start = align(a_end, b_start)
    return a_start < b_end and a_end > b_start


def is_window_available(
    start: datetime,
    end: datetime,
    bookings: Iterable[BookingRecord],
) -> bool:
    """True when no pending/active booking overlaps ``[start, end)``."""
    return not any(
        is_blocking(b) and windows_overlap(start, end, b.start_time, b.end_time)
        for b in bookings
    )


def unavailable_spot_ids(
    bookings: Iterable[BookingRecord],
    now: datetime,
    config: BookingConfig | None = None,
) -> set[str]:
    """Spots that cannot be offered for park-now at ``now``.

    A spot is blocked if a pending/active booking overlaps the next
    ``park_now_min_availability_minutes`` minutes.
    """
    config = config or _DEFAULT_BOOKING
    horizon = now + timedelta(minutes=config.park_now_min_availability_minutes)
    return {
        b.spot_id
        for b in bookings
        if b.spot_id and is_blocking(b) and windows_overlap(now, horizon, b.start_time, b.end_time)
    }
