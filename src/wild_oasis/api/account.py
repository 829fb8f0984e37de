"""Account pages and the guest's own mutations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import RedirectResponse

from wild_oasis.api.models import BookingUpdateForm, ProfileUpdateForm
from wild_oasis.api.sessions import require_session
from wild_oasis.api.views import (
    cached_view,
    serialize_booking,
    serialize_guest,
)
from wild_oasis.domain.models import GuestSession
from wild_oasis.domain.views import ViewId, ViewKind

if TYPE_CHECKING:
    from wild_oasis.containers import AppContainer

router = APIRouter(prefix="/account", tags=["account"])


@router.get("")
async def account_home(
    session: GuestSession = Depends(require_session),
) -> dict[str, str]:
    """Welcome page."""
    return {"message": f"Welcome back, {session.name}"}


@router.get("/profile")
async def profile(
    request: Request, session: GuestSession = Depends(require_session)
) -> dict[str, object]:
    """Return the guest profile."""
    container: AppContainer = request.app.state.container
    return cached_view(
        container,
        ViewId(ViewKind.PROFILE),
        str(session.guest_id),
        lambda: {
            "guest": serialize_guest(container.profile_service.get_profile(session))
        },
    )


@router.post("/profile")
async def update_profile(
    form: ProfileUpdateForm,
    request: Request,
    session: GuestSession = Depends(require_session),
) -> dict[str, object]:
    """Update nationality and national id."""
    container: AppContainer = request.app.state.container
    outcome = container.profile_service.update_profile(
        session, national_id=form.national_id, nationality=form.nationality
    )
    return {"status": "ok", "invalidated": sorted(str(v) for v in outcome.invalidated)}


@router.get("/reservations")
async def reservations(
    request: Request, session: GuestSession = Depends(require_session)
) -> dict[str, object]:
    """Return the guest's reservations."""
    container: AppContainer = request.app.state.container
    return cached_view(
        container,
        ViewId(ViewKind.RESERVATIONS),
        str(session.guest_id),
        lambda: {
            "bookings": [
                serialize_booking(booking)
                for booking in container.booking_service.list_reservations(session)
            ]
        },
    )


@router.get("/reservations/edit/{booking_id}")
async def edit_reservation(
    booking_id: int,
    request: Request,
    session: GuestSession = Depends(require_session),
) -> dict[str, object]:
    """Return an owned booking with its cabin's capacity."""
    container: AppContainer = request.app.state.container
    authorized = container.booking_service.guard.authorize(
        session, booking_id, action="view"
    )

    def render() -> dict[str, object]:
        booking = container.booking_service.get_reservation(authorized)
        cabin = container.cabin_service.get_cabin(booking.cabin_id)
        return {
            "booking": serialize_booking(booking),
            "max_capacity": cabin.max_capacity,
        }

    return cached_view(
        container,
        ViewId(ViewKind.RESERVATION_EDIT, booking_id),
        str(session.guest_id),
        render,
    )


@router.post("/reservations/edit/{booking_id}")
async def update_reservation(
    booking_id: int,
    form: BookingUpdateForm,
    request: Request,
    session: GuestSession = Depends(require_session),
) -> RedirectResponse:
    """Update a reservation and go back to the list."""
    container: AppContainer = request.app.state.container
    outcome = container.booking_service.update_booking(
        session,
        booking_id,
        num_guests=form.num_guests,
        observations=form.observations,
    )
    return RedirectResponse(
        outcome.redirect_to or "/account/reservations",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.delete("/reservations/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reservation(
    booking_id: int,
    request: Request,
    session: GuestSession = Depends(require_session),
) -> Response:
    """Delete a reservation."""
    container: AppContainer = request.app.state.container
    container.booking_service.delete_reservation(session, booking_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
