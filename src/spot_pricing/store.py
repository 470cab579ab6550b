"""In-memory listing store with change notification.

Screens that show listings hold a reference to one ``ListingStore`` and
subscribe to it; nothing here is a module-level singleton.

Usage::

    store = ListingStore()
    unsubscribe = store.subscribe(lambda listings: render(listings))
    store.replace(map_spot_row(row) for row in rows)
    store.add(new_listing)
    unsubscribe()
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from spot_pricing.models.records import Listing

logger = logging.getLogger(__name__)

Subscriber = Callable[[tuple[Listing, ...]], None]


class ListingStore:
    """Ordered collection of listings, keyed by id.

    Subscribers are called synchronously with a snapshot of all listings
    after every change.
    """

    def __init__(self, listings: Iterable[Listing] = ()) -> None:
        self._listings: dict[str, Listing] = {}
        self._subscribers: list[Subscriber] = []
        for listing in listings:
            self._listings[listing.id] = listing

    # ── Queries ─────────────────────────────────────────────────────────

    @property
    def listings(self) -> tuple[Listing, ...]:
        return tuple(self._listings.values())

    def get(self, listing_id: str) -> Listing | None:
        return self._listings.get(listing_id)

    def with_coordinates(self) -> tuple[Listing, ...]:
        """Listings that can be placed on a map."""
        return tuple(listing for listing in self._listings.values() if listing.has_coordinates)

    def __len__(self) -> int:
        return len(self._listings)

    # ── Subscription ────────────────────────────────────────────────────

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.listings
        for callback in list(self._subscribers):
            callback(snapshot)

    # ── Mutations ───────────────────────────────────────────────────────

    def replace(self, listings: Iterable[Listing]) -> None:
        """Swap the whole collection, e.g. after a fresh fetch."""
        self._listings = {listing.id: listing for listing in listings}
        logger.debug("Listing store replaced with %d listings", len(self._listings))
        self._notify()

    def add(self, listing: Listing) -> None:
        """Insert or update ``listing`` (matched by id)."""
        self._listings[listing.id] = listing
        self._notify()

    def remove(self, listing_id: str) -> bool:
        """Drop a listing; returns False (and does not notify) if it was absent."""
        if self._listings.pop(listing_id, None) is None:
            return False
        self._notify()
        return True
