"""Supabase repository for bookings."""

from dataclasses import dataclass
from datetime import date, datetime

from supabase import Client

from wild_oasis.adapters.supabase_query import first_row, run_query
from wild_oasis.domain.models import Booking, BookingStatus, NewBooking
from wild_oasis.services.bookings import BookingRepository

_GUEST_BOOKING_COLUMNS = (
    "id, created_at, startDate, endDate, numNights, numGuests, observations, "
    "cabinPrice, extraPrice, totalPrice, isPaid, hasBreakfast, status, "
    "guestId, cabinId, cabins(name, image)"
)


@dataclass
class SupabaseBookingRepository(BookingRepository):
    """Supabase-backed booking repository."""

    client: Client

    def list_for_guest(self, guest_id: int) -> list[Booking]:
        """Return a guest's bookings with cabin name and image."""
        rows = run_query(
            self.client.table("bookings")
            .select(_GUEST_BOOKING_COLUMNS)
            .eq("guestId", guest_id)
            .order("startDate"),
            "Guest bookings lookup",
        )
        return [_parse_booking(row) for row in rows]

    def get_booking(self, booking_id: int) -> Booking | None:
        """Return a booking by id, if present."""
        rows = run_query(
            self.client.table("bookings").select("*").eq("id", booking_id).limit(1),
            "Booking lookup",
        )
        return _parse_booking(rows[0]) if rows else None

    def list_active_for_cabin(self, cabin_id: int, today: date) -> list[Booking]:
        """Return bookings of a cabin starting today or later, or checked in."""
        rows = run_query(
            self.client.table("bookings")
            .select("*")
            .eq("cabinId", cabin_id)
            .or_(
                f"startDate.gte.{today.isoformat()},"
                f"status.eq.{BookingStatus.CHECKED_IN.value}"
            ),
            "Cabin bookings lookup",
        )
        return [_parse_booking(row) for row in rows]

    def create_booking(self, booking: NewBooking) -> Booking:
        """Insert a booking row and return it."""
        rows = run_query(
            self.client.table("bookings").insert([_serialize_new_booking(booking)]),
            "Booking insert",
        )
        return _parse_booking(first_row(rows, "Booking insert"))

    def update_booking(
        self, booking_id: int, num_guests: int, observations: str
    ) -> Booking:
        """Update guest count and observations, returning the stored row."""
        rows = run_query(
            self.client.table("bookings")
            .update({"numGuests": num_guests, "observations": observations})
            .eq("id", booking_id),
            "Booking update",
        )
        return _parse_booking(first_row(rows, "Booking update"))

    def delete_booking(self, booking_id: int) -> None:
        """Delete a booking row."""
        run_query(
            self.client.table("bookings").delete().eq("id", booking_id),
            "Booking delete",
        )


def _serialize_new_booking(booking: NewBooking) -> dict[str, object]:
    return {
        "guestId": booking.guest_id,
        "cabinId": booking.cabin_id,
        "startDate": booking.start_date.isoformat(),
        "endDate": booking.end_date.isoformat(),
        "numNights": booking.num_nights,
        "numGuests": booking.num_guests,
        "observations": booking.observations,
        "cabinPrice": booking.cabin_price,
        "extraPrice": booking.extra_price,
        "totalPrice": booking.total_price,
        "isPaid": booking.is_paid,
        "hasBreakfast": booking.has_breakfast,
        "status": booking.status.value,
    }


def _parse_date(value: object) -> date:
    return datetime.fromisoformat(str(value)).date()


def _parse_booking(row: dict[str, object]) -> Booking:
    cabin = row.get("cabins")
    cabin_data = cabin if isinstance(cabin, dict) else {}
    created_at = row.get("created_at")
    return Booking(
        id=int(row["id"]),
        guest_id=int(row["guestId"]),
        cabin_id=int(row["cabinId"]),
        start_date=_parse_date(row["startDate"]),
        end_date=_parse_date(row["endDate"]),
        num_nights=int(row.get("numNights") or 0),
        num_guests=int(row.get("numGuests") or 0),
        observations=str(row.get("observations") or ""),
        cabin_price=float(row.get("cabinPrice") or 0),
        extra_price=float(row.get("extraPrice") or 0),
        total_price=float(row.get("totalPrice") or 0),
        is_paid=bool(row.get("isPaid")),
        has_breakfast=bool(row.get("hasBreakfast")),
        status=BookingStatus(row.get("status") or BookingStatus.UNCONFIRMED.value),
        created_at=datetime.fromisoformat(str(created_at)) if created_at else None,
        cabin_name=cabin_data.get("name"),
        cabin_image=cabin_data.get("image"),
    )
