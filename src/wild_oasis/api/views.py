"""Rendering helpers for JSON views."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from wild_oasis.containers import AppContainer
    from wild_oasis.domain.models import Booking, BookingSettings, Cabin, Guest
    from wild_oasis.domain.views import ViewId

PUBLIC_SCOPE = "public"


def cached_view(
    container: AppContainer,
    view: ViewId,
    scope: str,
    render: Callable[[], dict[str, object]],
) -> dict[str, object]:
    """Return the cached rendering of a view, rendering it on a miss."""
    cached = container.view_cache.get(view, scope)
    if isinstance(cached, dict):
        return cached
    payload = render()
    container.view_cache.set(
        view, scope, payload, ttl_seconds=container.settings.view_ttl_seconds
    )
    return payload


def serialize_guest(guest: Guest) -> dict[str, object]:
    return {
        "id": guest.id,
        "email": guest.email,
        "full_name": guest.full_name,
        "nationality": guest.nationality,
        "country_flag": guest.country_flag,
        "national_id": guest.national_id,
    }


def serialize_cabin(cabin: Cabin) -> dict[str, object]:
    return {
        "id": cabin.id,
        "name": cabin.name,
        "max_capacity": cabin.max_capacity,
        "regular_price": cabin.regular_price,
        "discount": cabin.discount,
        "image": cabin.image,
        "description": cabin.description,
    }


def serialize_settings(settings: BookingSettings) -> dict[str, object]:
    return {
        "min_booking_length": settings.min_booking_length,
        "max_booking_length": settings.max_booking_length,
        "max_guests_per_booking": settings.max_guests_per_booking,
        "breakfast_price": settings.breakfast_price,
    }


def serialize_booking(booking: Booking) -> dict[str, object]:
    return {
        "id": booking.id,
        "guest_id": booking.guest_id,
        "cabin_id": booking.cabin_id,
        "cabin_name": booking.cabin_name,
        "cabin_image": booking.cabin_image,
        "start_date": booking.start_date.isoformat(),
        "end_date": booking.end_date.isoformat(),
        "num_nights": booking.num_nights,
        "num_guests": booking.num_guests,
        "observations": booking.observations,
        "cabin_price": booking.cabin_price,
        "extra_price": booking.extra_price,
        "total_price": booking.total_price,
        "is_paid": booking.is_paid,
        "has_breakfast": booking.has_breakfast,
        "status": booking.status.value,
        "created_at": booking.created_at.isoformat() if booking.created_at else None,
    }
