"""Cabin browsing and booking creation endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from wild_oasis.api.models import BookingCreateForm
from wild_oasis.api.sessions import current_session, require_session
from wild_oasis.api.views import (
    PUBLIC_SCOPE,
    serialize_cabin,
    serialize_settings,
)
from wild_oasis.domain.models import GuestSession
from wild_oasis.domain.views import ViewId, ViewKind
from wild_oasis.services.bookings import BookingDraft
from wild_oasis.services.cabins import CapacityFilter

if TYPE_CHECKING:
    from wild_oasis.containers import AppContainer

router = APIRouter(prefix="/cabins", tags=["cabins"])


@router.get("")
async def list_cabins(
    request: Request, capacity: CapacityFilter = CapacityFilter.ALL
) -> dict[str, object]:
    """Return cabins, optionally filtered by guest capacity."""
    container: AppContainer = request.app.state.container
    cabins = container.cabin_service.list_cabins(capacity)
    return {
        "filter": capacity.value,
        "cabins": [serialize_cabin(cabin) for cabin in cabins],
    }


@router.get("/thankyou")
async def booking_confirmation() -> dict[str, str]:
    """Confirmation shown after a reservation is made."""
    return {"message": "Thank you for your reservation!"}


@router.get("/{cabin_id}")
async def cabin_detail(
    cabin_id: int,
    request: Request,
    session: GuestSession | None = Depends(current_session),
) -> dict[str, object]:
    """Return the cabin with its reservation context."""
    container: AppContainer = request.app.state.container
    view = ViewId(ViewKind.CABIN_DETAIL, cabin_id)
    payload = container.view_cache.get(view, PUBLIC_SCOPE)
    if not isinstance(payload, dict):
        context = await container.cabin_service.load_reservation_context(cabin_id)
        payload = {
            "cabin": serialize_cabin(context.cabin),
            "settings": serialize_settings(context.settings),
            "booked_dates": [day.isoformat() for day in context.booked_dates],
        }
        container.view_cache.set(
            view,
            PUBLIC_SCOPE,
            payload,
            ttl_seconds=container.settings.view_ttl_seconds,
        )
    return {**payload, "signed_in": session is not None}


@router.post("/{cabin_id}/bookings")
async def create_booking(
    cabin_id: int,
    form: BookingCreateForm,
    request: Request,
    session: GuestSession = Depends(require_session),
) -> RedirectResponse:
    """Create a reservation and redirect to the confirmation page."""
    container: AppContainer = request.app.state.container
    outcome = container.booking_service.create_booking(
        session,
        BookingDraft(
            cabin_id=cabin_id,
            start_date=form.start_date,
            end_date=form.end_date,
            cabin_price=form.cabin_price,
            num_guests=form.num_guests,
            observations=form.observations,
        ),
    )
    # The guest's own reservations list is rendered fresh after a create.
    container.view_cache.discard(
        ViewId(ViewKind.RESERVATIONS), str(session.guest_id)
    )
    return RedirectResponse(
        outcome.redirect_to or "/", status_code=status.HTTP_303_SEE_OTHER
    )
