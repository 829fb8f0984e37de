"""Cabin listings and reservation context."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from enum import Enum
from typing import Protocol, TypeVar

from wild_oasis.domain.errors import NotFound, StoreError, StoreOperationFailed
from wild_oasis.domain.models import Booking, BookingSettings, Cabin

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class CapacityFilter(Enum):
    """Guest-capacity buckets offered on the cabins page."""

    ALL = "all"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    def matches(self, cabin: Cabin) -> bool:
        """Return True when the cabin falls in this bucket."""
        if self is CapacityFilter.SMALL:
            return cabin.max_capacity <= 2
        if self is CapacityFilter.MEDIUM:
            return 3 <= cabin.max_capacity <= 7
        if self is CapacityFilter.LARGE:
            return cabin.max_capacity >= 8
        return True


class CabinRepository(Protocol):
    """Read-only access to cabins and settings."""

    def list_cabins(self) -> list[Cabin]:
        """Return all cabins ordered by name."""

    def get_cabin(self, cabin_id: int) -> Cabin | None:
        """Return a cabin by id, if present."""

    def get_settings(self) -> BookingSettings:
        """Return hotel booking settings."""


class CabinBookingsReader(Protocol):
    """Read access to the bookings of one cabin."""

    def list_active_for_cabin(self, cabin_id: int, today: date) -> list[Booking]:
        """Return bookings starting today or later, or checked in."""


@dataclass(frozen=True)
class ReservationContext:
    """Everything the reservation form of a cabin needs."""

    cabin: Cabin
    settings: BookingSettings
    booked_dates: list[date]


def expand_booked_dates(bookings: list[Booking]) -> list[date]:
    """Return every day covered by the bookings, both ends included."""
    days: set[date] = set()
    for booking in bookings:
        current = booking.start_date
        while current <= booking.end_date:
            days.add(current)
            current += timedelta(days=1)
    return sorted(days)


@dataclass
class CabinService:
    """Service for browsing cabins."""

    repository: CabinRepository
    bookings: CabinBookingsReader

    def list_cabins(self, capacity: CapacityFilter = CapacityFilter.ALL) -> list[Cabin]:
        """Return cabins in the requested capacity bucket."""
        cabins = _read_or_fail(
            self.repository.list_cabins, "Cabins could not be loaded"
        )
        return [cabin for cabin in cabins if capacity.matches(cabin)]

    def get_cabin(self, cabin_id: int) -> Cabin:
        """Return a cabin or raise NotFound."""
        cabin = _read_or_fail(
            lambda: self.repository.get_cabin(cabin_id), "Cabin could not be loaded"
        )
        if cabin is None:
            raise NotFound(f"Cabin {cabin_id} not found")
        return cabin

    def get_settings(self) -> BookingSettings:
        """Return the booking settings."""
        return _read_or_fail(
            self.repository.get_settings, "Settings could not be loaded"
        )

    def get_booked_dates(self, cabin_id: int, today: date | None = None) -> list[date]:
        """Return the dates already taken for a cabin."""
        resolved_today = today or datetime.now(tz=UTC).date()
        bookings = _read_or_fail(
            lambda: self.bookings.list_active_for_cabin(cabin_id, resolved_today),
            "Booked dates could not be loaded",
        )
        return expand_booked_dates(bookings)

    async def load_reservation_context(self, cabin_id: int) -> ReservationContext:
        """Fetch cabin, settings and booked dates concurrently."""
        cabin, settings, booked_dates = await asyncio.gather(
            asyncio.to_thread(self.get_cabin, cabin_id),
            asyncio.to_thread(self.get_settings),
            asyncio.to_thread(self.get_booked_dates, cabin_id),
        )
        return ReservationContext(
            cabin=cabin, settings=settings, booked_dates=booked_dates
        )


def _read_or_fail(call: Callable[[], T], message: str) -> T:
    try:
        return call()
    except StoreError as exc:
        _logger.exception(message)
        raise StoreOperationFailed(message) from exc
