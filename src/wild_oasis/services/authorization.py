"""Ownership checks performed before a booking is read for editing or mutated."""

import logging
from dataclasses import dataclass
from typing import Protocol

from wild_oasis.domain.errors import (
    Forbidden,
    StoreError,
    StoreOperationFailed,
    Unauthenticated,
)
from wild_oasis.domain.models import Booking, GuestSession

_logger = logging.getLogger(__name__)


class GuestBookingsReader(Protocol):
    """Read access to the bookings of one guest."""

    def list_for_guest(self, guest_id: int) -> list[Booking]:
        """Return all bookings owned by the guest."""


@dataclass(frozen=True)
class Authorized:
    """Proof that the session's guest owns the booking."""

    session: GuestSession
    booking_id: int


def require_session(session: GuestSession | None) -> GuestSession:
    """Return the session or raise Unauthenticated."""
    if session is None:
        raise Unauthenticated()
    return session


@dataclass
class AuthorizationGuard:
    """Confirms booking ownership; never writes."""

    bookings: GuestBookingsReader

    def authorize(
        self, session: GuestSession | None, booking_id: int, action: str = "change"
    ) -> Authorized:
        """Return Authorized when the session's guest owns the booking."""
        guest_session = require_session(session)
        try:
            owned = self.bookings.list_for_guest(guest_session.guest_id)
        except StoreError as exc:
            _logger.exception(
                "Failed to load bookings: guest_id=%s", guest_session.guest_id
            )
            raise StoreOperationFailed("Bookings could not be loaded") from exc
        if booking_id not in {booking.id for booking in owned}:
            _logger.warning(
                "Denied booking access: guest_id=%s booking_id=%s action=%s",
                guest_session.guest_id,
                booking_id,
                action,
            )
            raise Forbidden(f"You can only {action} your own bookings")
        return Authorized(session=guest_session, booking_id=booking_id)
