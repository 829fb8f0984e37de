"""Supabase repository for cabins and booking settings."""

from dataclasses import dataclass

from supabase import Client

from wild_oasis.adapters.supabase_query import first_row, run_query
from wild_oasis.domain.models import BookingSettings, Cabin
from wild_oasis.services.cabins import CabinRepository


@dataclass
class SupabaseCabinRepository(CabinRepository):
    """Read-only Supabase access to cabins and settings."""

    client: Client

    def list_cabins(self) -> list[Cabin]:
        """Return all cabins ordered by name."""
        rows = run_query(
            self.client.table("cabins")
            .select("id, name, maxCapacity, regularPrice, discount, image")
            .order("name"),
            "Cabin list",
        )
        return [_parse_cabin(row) for row in rows]

    def get_cabin(self, cabin_id: int) -> Cabin | None:
        """Return a cabin by id, if present."""
        rows = run_query(
            self.client.table("cabins").select("*").eq("id", cabin_id).limit(1),
            "Cabin lookup",
        )
        return _parse_cabin(rows[0]) if rows else None

    def get_settings(self) -> BookingSettings:
        """Return the single settings row."""
        rows = run_query(
            self.client.table("settings").select("*").limit(1), "Settings lookup"
        )
        row = first_row(rows, "Settings lookup")
        return BookingSettings(
            min_booking_length=int(row["minBookingLength"]),
            max_booking_length=int(row["maxBookingLength"]),
            max_guests_per_booking=int(row["maxGuestsPerBooking"]),
            breakfast_price=float(row["breakfastPrice"]),
        )


def _parse_cabin(row: dict[str, object]) -> Cabin:
    return Cabin(
        id=int(row["id"]),
        name=str(row["name"]),
        max_capacity=int(row["maxCapacity"]),
        regular_price=float(row["regularPrice"]),
        discount=float(row.get("discount") or 0),
        image=row.get("image"),
        description=row.get("description"),
    )
