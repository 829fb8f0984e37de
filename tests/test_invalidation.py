"""Tests for the view invalidation policy and view cache."""

import pytest

from wild_oasis.domain.views import MutationKind, ViewId, ViewKind
from wild_oasis.services.cache import InMemoryViewCache
from wild_oasis.services.invalidation import InvalidationService, stale_views


def test_policy_maps_each_mutation_to_its_views() -> None:
    assert stale_views(MutationKind.PROFILE_UPDATE) == [ViewId(ViewKind.PROFILE)]
    assert stale_views(MutationKind.BOOKING_CREATE, 7) == [
        ViewId(ViewKind.CABIN_DETAIL, 7)
    ]
    assert stale_views(MutationKind.BOOKING_UPDATE, 101) == [
        ViewId(ViewKind.RESERVATIONS),
        ViewId(ViewKind.RESERVATION_EDIT, 101),
    ]
    assert stale_views(MutationKind.BOOKING_DELETE) == [ViewId(ViewKind.RESERVATIONS)]


def test_keyed_view_requires_target_id() -> None:
    with pytest.raises(ValueError):
        stale_views(MutationKind.BOOKING_CREATE)


def test_invalidation_drops_every_scope_of_the_view() -> None:
    cache = InMemoryViewCache()
    reservations = ViewId(ViewKind.RESERVATIONS)
    profile = ViewId(ViewKind.PROFILE)
    cache.set(reservations, "1", {"bookings": []}, ttl_seconds=60)
    cache.set(reservations, "2", {"bookings": []}, ttl_seconds=60)
    cache.set(profile, "1", {"guest": {}}, ttl_seconds=60)

    invalidated = InvalidationService(cache).mutation_applied(
        MutationKind.BOOKING_DELETE
    )

    assert invalidated == frozenset({reservations})
    assert cache.get(reservations, "1") is None
    assert cache.get(reservations, "2") is None
    assert cache.get(profile, "1") == {"guest": {}}


def test_edit_view_invalidation_is_narrowed_to_booking() -> None:
    cache = InMemoryViewCache()
    edit_101 = ViewId(ViewKind.RESERVATION_EDIT, 101)
    edit_102 = ViewId(ViewKind.RESERVATION_EDIT, 102)
    cache.set(edit_101, "1", {"booking": 101}, ttl_seconds=60)
    cache.set(edit_102, "1", {"booking": 102}, ttl_seconds=60)

    InvalidationService(cache).mutation_applied(MutationKind.BOOKING_UPDATE, 101)

    assert cache.get(edit_101, "1") is None
    assert cache.get(edit_102, "1") == {"booking": 102}


def test_expired_entries_are_not_served() -> None:
    cache = InMemoryViewCache()
    view = ViewId(ViewKind.PROFILE)
    cache.set(view, "1", {"guest": {}}, ttl_seconds=0)

    assert cache.get(view, "1") is None


def test_view_id_string_form() -> None:
    assert str(ViewId(ViewKind.CABIN_DETAIL, 3)) == "cabin-detail:3"
    assert str(ViewId(ViewKind.RESERVATIONS)) == "reservations"


def test_discard_drops_only_one_scope() -> None:
    cache = InMemoryViewCache()
    view = ViewId(ViewKind.RESERVATIONS)
    cache.set(view, "1", {"bookings": [101]}, ttl_seconds=60)
    cache.set(view, "2", {"bookings": [103]}, ttl_seconds=60)

    cache.discard(view, "1")
    cache.discard(ViewId(ViewKind.PROFILE), "1")

    assert cache.get(view, "1") is None
    assert cache.get(view, "2") == {"bookings": [103]}
