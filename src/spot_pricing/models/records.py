"""Listing and booking records — normalised from loosely-shaped backend rows.

Rows come from a hosted backend whose column names drifted over time
(``lat`` vs ``latitude``, ``price`` vs ``price_per_hour`` ...).  The mappers
take the first non-null candidate for each field and never raise.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

from spot_pricing.clock import align, parse_timestamp
from spot_pricing.money import as_amount, round_to_minor

PAST_STATUSES = frozenset({"paid", "completed", "cancelled"})


class Listing(BaseModel):
    """A hosted parking spot as shown in browse and map views."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    address: str
    latitude: float | None = None
    longitude: float | None = None
    host_id: str | None = None
    price_per_hour: float = 0.0
    spots: int = 1
    status: str = "Active"

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class BookingRecord(BaseModel):
    """A driver's booking as listed on the reservations screen."""

    model_config = ConfigDict(frozen=True)

    id: str
    spot_id: str
    spot_name: str
    address: str
    start_time: datetime
    end_time: datetime
    total_price: float
    status: str
    latitude: float | None = None
    longitude: float | None = None
    is_past: bool = False


# ═══════════════════════════════════════════════════════════════════════════
# Field helpers
# ═══════════════════════════════════════════════════════════════════════════

def _first(*candidates: Any) -> Any:
    for value in candidates:
        if value is not None:
            return value
    return None


def _get(row: Mapping[str, Any] | None, key: str) -> Any:
    return row.get(key) if isinstance(row, Mapping) else None


def _coordinate(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return result if math.isfinite(result) else None


def _number(value: Any, default: float) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return result if math.isfinite(result) else default


def _joined_spot(row: Mapping[str, Any]) -> Mapping[str, Any] | None:
    spot = row.get("spot")
    if isinstance(spot, list):
        spot = spot[0] if spot else None
    return spot if isinstance(spot, Mapping) else None


# ═══════════════════════════════════════════════════════════════════════════
# Row mappers
# ═══════════════════════════════════════════════════════════════════════════

def map_spot_row(row: Mapping[str, Any]) -> Listing:
    """Normalise a ``spots`` row into a Listing."""
    lat = _coordinate(_first(row.get("lat"), row.get("latitude")))
    lng = _coordinate(_first(row.get("lng"), row.get("longitude")))
    host_id = _first(row.get("host_id"), row.get("hostId"))
    spots = _number(_first(row.get("spots"), 1), 1)

    return Listing(
        id=str(_first(row.get("id"), "")),
        title=str(_first(row.get("title"), row.get("name"), row.get("address"), "Parking Spot")),
        address=str(_first(row.get("address"), row.get("location"), "Unknown address")),
        latitude=lat,
        longitude=lng,
        host_id=None if host_id is None else str(host_id),
        price_per_hour=_number(
            _first(row.get("price_per_hour"), row.get("pricePerHour"), row.get("price"), 0), 0.0,
        ),
        spots=int(spots),
        status=str(_first(row.get("status"), "Active")),
    )


def map_booking_row(row: Mapping[str, Any], now: datetime) -> BookingRecord:
    """Normalise a ``bookings`` row (optionally joined with its spot).

    Missing start defaults to ``now`` and missing end to one hour after
    start.  When the row carries no stored total, it is derived as
    ``price_per_hour × hours`` (hours default to 1).
    """
    spot = _joined_spot(row)

    start = parse_timestamp(
        _first(row.get("start_time"), row.get("startTime"), row.get("date"), row.get("created_at"))
    ) or now
    end = parse_timestamp(_first(row.get("end_time"), row.get("endTime"))) or start + timedelta(hours=1)

    status = str(_first(row.get("status"), "Pending"))
    end_cmp, now_cmp = align(end, now)
    is_past = status.lower() in PAST_STATUSES or end_cmp < now_cmp

    lat = _coordinate(_first(
        row.get("lat"), row.get("latitude"), row.get("spot_lat"), row.get("spotLat"),
        _get(spot, "lat"), _get(spot, "latitude"),
    ))
    lng = _coordinate(_first(
        row.get("lng"), row.get("longitude"), row.get("spot_lng"), row.get("spotLng"),
        _get(spot, "lng"), _get(spot, "longitude"),
    ))

    price_per_hour = _number(
        _first(row.get("price_per_hour"), row.get("pricePerHour"), row.get("price"), _get(spot, "price"), 0),
        0.0,
    )
    hours = _number(_first(row.get("hours"), row.get("duration"), 1), 1.0) or 1.0
    stored_total = _first(row.get("amount"), row.get("total"), row.get("total_price"))
    total = price_per_hour * hours if stored_total is None else _number(stored_total, 0.0)

    return BookingRecord(
        id=str(_first(row.get("id"), "")),
        spot_id=str(_first(row.get("spot_id"), _get(spot, "id"), "")),
        spot_name=str(_first(
            row.get("spot_name"), row.get("spot_title"), row.get("spotName"),
            _get(spot, "title"), row.get("address"), "Parking Spot",
        )),
        address=str(_first(row.get("address"), _get(spot, "address"), "Address unavailable")),
        start_time=start,
        end_time=end,
        total_price=as_amount(round_to_minor(total)),
        status=status,
        latitude=lat,
        longitude=lng,
        is_past=is_past,
    )
