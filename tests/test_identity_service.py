"""Tests for OAuth identity to guest resolution."""

import pytest

from wild_oasis.domain.errors import SignInDenied, Unauthenticated
from wild_oasis.domain.models import OAuthIdentity
from wild_oasis.services.identity import IdentityService
from tests.conftest import InMemoryGuestRepository


def test_sign_in_creates_guest_on_first_visit() -> None:
    repository = InMemoryGuestRepository()
    service = IdentityService(repository)

    session = service.sign_in(OAuthIdentity(email="new@example.com", name="New Guest"))

    guest = repository.guests[session.guest_id]
    assert guest.email == "new@example.com"
    assert guest.full_name == "New Guest"
    assert session.name == "New Guest"


def test_sign_in_reuses_existing_guest(
    guest_repository: InMemoryGuestRepository,
) -> None:
    service = IdentityService(guest_repository)
    count = len(guest_repository.guests)

    session = service.sign_in(OAuthIdentity(email="maria@example.com", name="Maria"))

    assert session.guest_id == 2
    assert len(guest_repository.guests) == count


def test_sign_in_store_failure_denies_sign_in(
    guest_repository: InMemoryGuestRepository,
) -> None:
    guest_repository.fail = True
    service = IdentityService(guest_repository)

    with pytest.raises(SignInDenied) as exc_info:
        service.sign_in(OAuthIdentity(email="jonas@example.com", name="Jonas"))

    assert isinstance(exc_info.value, Unauthenticated)
