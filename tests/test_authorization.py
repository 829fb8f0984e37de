"""Tests for the booking ownership guard."""

import pytest

from wild_oasis.domain.errors import Forbidden, StoreOperationFailed, Unauthenticated
from wild_oasis.domain.models import GuestSession
from wild_oasis.services.authorization import AuthorizationGuard
from tests.conftest import InMemoryBookingRepository

G1 = GuestSession(guest_id=1, email="jonas@example.com", name="Jonas")


def test_authorize_returns_proof_for_owned_booking(
    booking_repository: InMemoryBookingRepository,
) -> None:
    guard = AuthorizationGuard(booking_repository)

    authorized = guard.authorize(G1, 101)

    assert authorized.booking_id == 101
    assert authorized.session == G1


def test_authorize_without_session_is_unauthenticated(
    booking_repository: InMemoryBookingRepository,
) -> None:
    guard = AuthorizationGuard(booking_repository)

    with pytest.raises(Unauthenticated):
        guard.authorize(None, 101)


def test_authorize_rejects_booking_of_another_guest(
    booking_repository: InMemoryBookingRepository,
) -> None:
    guard = AuthorizationGuard(booking_repository)

    with pytest.raises(Forbidden) as exc_info:
        guard.authorize(G1, 103, action="delete")

    assert exc_info.value.message == "You can only delete your own bookings"


def test_guest_without_bookings_is_denied_everything() -> None:
    guard = AuthorizationGuard(InMemoryBookingRepository())

    for booking_id in (1, 101, 103):
        with pytest.raises(Forbidden):
            guard.authorize(G1, booking_id)


def test_authorize_reports_store_failure(
    booking_repository: InMemoryBookingRepository,
) -> None:
    booking_repository.fail_on.add("list")
    guard = AuthorizationGuard(booking_repository)

    with pytest.raises(StoreOperationFailed):
        guard.authorize(G1, 101)
