"""Client-side reservation list with optimistic deletes."""

import itertools
import logging
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Protocol

_logger = logging.getLogger(__name__)


class ReservationEntry(Protocol):
    """Anything listed as a reservation; only the id matters here."""

    id: int


class ReservationsClient(Protocol):
    """Server calls the list depends on."""

    async def list_reservations(self) -> list[ReservationEntry]:
        """Return the signed-in guest's reservations."""

    async def delete_reservation(self, booking_id: int) -> None:
        """Delete a reservation; raise on failure."""


@dataclass
class OptimisticReservationList:
    """Reservations as last confirmed by the server, minus pending deletes.

    The overlay is a set of booking ids and is never written back as truth.
    Each delete call gets an attempt number; only the newest attempt for an
    id may bring the booking back when it fails, and never once some attempt
    for that id has succeeded. A refresh replaces the confirmed list and keeps
    only the ids whose delete is still in flight.
    """

    client: ReservationsClient
    _confirmed: list[ReservationEntry] = field(default_factory=list)
    _pending: set[int] = field(default_factory=set)
    _in_flight: Counter[int] = field(default_factory=Counter)
    _latest_attempt: dict[int, int] = field(default_factory=dict)
    _deleted: set[int] = field(default_factory=set)
    _attempts: Iterator[int] = field(default_factory=itertools.count)

    @property
    def bookings(self) -> list[ReservationEntry]:
        """Return what the guest currently sees."""
        return [entry for entry in self._confirmed if entry.id not in self._pending]

    @property
    def pending_ids(self) -> frozenset[int]:
        """Return ids hidden by the overlay."""
        return frozenset(self._pending)

    def seed(self, bookings: list[ReservationEntry]) -> None:
        """Set the confirmed state from an already loaded server read."""
        self._confirmed = list(bookings)
        in_flight = set(self._in_flight)
        self._pending &= in_flight
        self._deleted &= in_flight

    async def refresh(self) -> list[ReservationEntry]:
        """Reload the confirmed state from the server."""
        self.seed(await self.client.list_reservations())
        return self.bookings

    async def delete(self, booking_id: int) -> None:
        """Hide the booking immediately, then ask the server to delete it.

        On failure the error propagates, and the booking reappears unless a
        newer delete for it is outstanding or an earlier one succeeded.
        """
        attempt = next(self._attempts)
        self._latest_attempt[booking_id] = attempt
        self._pending.add(booking_id)
        self._in_flight[booking_id] += 1
        try:
            await self.client.delete_reservation(booking_id)
        except Exception:
            _logger.warning(
                "Reservation delete failed: booking_id=%s attempt=%s",
                booking_id,
                attempt,
            )
            if (
                self._latest_attempt.get(booking_id) == attempt
                and booking_id not in self._deleted
            ):
                self._pending.discard(booking_id)
            raise
        else:
            self._deleted.add(booking_id)
        finally:
            self._in_flight[booking_id] -= 1
            if self._in_flight[booking_id] <= 0:
                del self._in_flight[booking_id]
                self._latest_attempt.pop(booking_id, None)
