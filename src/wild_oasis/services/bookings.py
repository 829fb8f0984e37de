"""Booking mutations: create, update and delete reservations."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from wild_oasis.domain.errors import (
    BookingCreateFailed,
    BookingDeleteFailed,
    BookingUpdateFailed,
    NotFound,
    StoreError,
    StoreOperationFailed,
    ValidationFailed,
)
from wild_oasis.domain.models import Booking, BookingStatus, GuestSession, NewBooking
from wild_oasis.domain.views import MutationKind, ViewId
from wild_oasis.services.authorization import (
    AuthorizationGuard,
    Authorized,
    require_session,
)
from wild_oasis.services.invalidation import InvalidationService

OBSERVATIONS_MAX_LENGTH = 1000
CONFIRMATION_PATH = "/cabins/thankyou"
RESERVATIONS_PATH = "/account/reservations"

_logger = logging.getLogger(__name__)


class BookingRepository(Protocol):
    """Persistence interface for bookings."""

    def list_for_guest(self, guest_id: int) -> list[Booking]:
        """Return all bookings owned by the guest, ordered by start date."""

    def get_booking(self, booking_id: int) -> Booking | None:
        """Return a booking by id, if present."""

    def list_active_for_cabin(self, cabin_id: int, today: date) -> list[Booking]:
        """Return bookings of a cabin starting today or later, or checked in."""

    def create_booking(self, booking: NewBooking) -> Booking:
        """Insert a booking and return it."""

    def update_booking(
        self, booking_id: int, num_guests: int, observations: str
    ) -> Booking:
        """Update the guest-editable fields of a booking."""

    def delete_booking(self, booking_id: int) -> None:
        """Delete a booking by id."""


@dataclass(frozen=True)
class BookingDraft:
    """Reservation form data for a new booking."""

    cabin_id: int
    start_date: date
    end_date: date
    cabin_price: float
    num_guests: int | str
    observations: str | None = None


@dataclass(frozen=True)
class MutationOutcome:
    """Result of a completed mutation."""

    invalidated: frozenset[ViewId]
    redirect_to: str | None = None
    booking: Booking | None = None


def truncate_observations(observations: str | None) -> str:
    """Keep the first 1000 characters; the rest is dropped."""
    return (observations or "")[:OBSERVATIONS_MAX_LENGTH]


def coerce_num_guests(value: int | str) -> int:
    """Convert form input to an integer guest count."""
    if isinstance(value, bool):
        raise ValidationFailed("Number of guests must be a whole number")
    try:
        num_guests = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationFailed("Number of guests must be a whole number") from exc
    if num_guests < 1:
        raise ValidationFailed("Number of guests must be at least 1")
    return num_guests


@dataclass
class BookingService:
    """Application service for reservation lifecycle actions.

    Every mutation runs in the same order: session and ownership checks,
    input validation, the store call, then view invalidation. Nothing is
    invalidated when the store call fails.
    """

    repository: BookingRepository
    guard: AuthorizationGuard
    invalidation: InvalidationService

    def list_reservations(self, session: GuestSession | None) -> list[Booking]:
        """Return the bookings of the signed-in guest."""
        guest_session = require_session(session)
        try:
            return self.repository.list_for_guest(guest_session.guest_id)
        except StoreError as exc:
            _logger.exception(
                "Failed to list bookings: guest_id=%s", guest_session.guest_id
            )
            raise StoreOperationFailed("Bookings could not be loaded") from exc

    def get_reservation(self, authorized: Authorized) -> Booking:
        """Return an owned booking for the edit view."""
        booking_id = authorized.booking_id
        try:
            booking = self.repository.get_booking(booking_id)
        except StoreError as exc:
            _logger.exception("Failed to load booking: booking_id=%s", booking_id)
            raise StoreOperationFailed("Booking could not be loaded") from exc
        if booking is None:
            raise NotFound(f"Booking {booking_id} not found")
        return booking

    def create_booking(
        self, session: GuestSession | None, draft: BookingDraft
    ) -> MutationOutcome:
        """Create an unconfirmed booking for the signed-in guest."""
        guest_session = require_session(session)
        num_nights = (draft.end_date - draft.start_date).days
        if num_nights < 1:
            raise ValidationFailed("End date must be after start date")
        new_booking = NewBooking(
            guest_id=guest_session.guest_id,
            cabin_id=draft.cabin_id,
            start_date=draft.start_date,
            end_date=draft.end_date,
            num_nights=num_nights,
            num_guests=coerce_num_guests(draft.num_guests),
            observations=truncate_observations(draft.observations),
            cabin_price=draft.cabin_price,
            extra_price=0,
            total_price=draft.cabin_price,
            is_paid=False,
            has_breakfast=False,
            status=BookingStatus.UNCONFIRMED,
        )
        try:
            booking = self.repository.create_booking(new_booking)
        except StoreError as exc:
            _logger.exception(
                "Failed to create booking: guest_id=%s cabin_id=%s",
                guest_session.guest_id,
                draft.cabin_id,
            )
            raise BookingCreateFailed() from exc
        _logger.info(
            "Created booking: guest_id=%s booking_id=%s cabin_id=%s",
            guest_session.guest_id,
            booking.id,
            draft.cabin_id,
        )
        invalidated = self.invalidation.mutation_applied(
            MutationKind.BOOKING_CREATE, draft.cabin_id
        )
        return MutationOutcome(
            invalidated=invalidated, redirect_to=CONFIRMATION_PATH, booking=booking
        )

    def update_booking(
        self,
        session: GuestSession | None,
        booking_id: int,
        num_guests: int | str,
        observations: str | None,
    ) -> MutationOutcome:
        """Update guest count and observations of an owned booking."""
        authorized = self.guard.authorize(session, booking_id, action="update")
        resolved_guests = coerce_num_guests(num_guests)
        resolved_observations = truncate_observations(observations)
        try:
            booking = self.repository.update_booking(
                booking_id,
                num_guests=resolved_guests,
                observations=resolved_observations,
            )
        except StoreError as exc:
            _logger.exception("Failed to update booking: booking_id=%s", booking_id)
            raise BookingUpdateFailed() from exc
        _logger.info(
            "Updated booking: guest_id=%s booking_id=%s",
            authorized.session.guest_id,
            booking_id,
        )
        invalidated = self.invalidation.mutation_applied(
            MutationKind.BOOKING_UPDATE, booking_id
        )
        return MutationOutcome(
            invalidated=invalidated, redirect_to=RESERVATIONS_PATH, booking=booking
        )

    def delete_reservation(
        self, session: GuestSession | None, booking_id: int
    ) -> MutationOutcome:
        """Delete an owned booking."""
        authorized = self.guard.authorize(session, booking_id, action="delete")
        try:
            self.repository.delete_booking(booking_id)
        except StoreError as exc:
            _logger.exception("Failed to delete booking: booking_id=%s", booking_id)
            raise BookingDeleteFailed() from exc
        _logger.info(
            "Deleted booking: guest_id=%s booking_id=%s",
            authorized.session.guest_id,
            booking_id,
        )
        invalidated = self.invalidation.mutation_applied(MutationKind.BOOKING_DELETE)
        return MutationOutcome(invalidated=invalidated)
