"""Supabase-backed guest repository."""

from dataclasses import dataclass

from supabase import Client

from wild_oasis.adapters.supabase_query import first_row, run_query
from wild_oasis.domain.models import Guest
from wild_oasis.services.identity import GuestRepository

_GUEST_COLUMNS = "id, email, fullName, nationality, countryFlag, nationalID"


@dataclass
class SupabaseGuestRepository(GuestRepository):
    """Supabase implementation for guest persistence."""

    client: Client

    def get_by_email(self, email: str) -> Guest | None:
        """Return the guest for an email, if present."""
        rows = run_query(
            self.client.table("guests")
            .select(_GUEST_COLUMNS)
            .eq("email", email)
            .limit(1),
            "Guest lookup",
        )
        return _parse_guest(rows[0]) if rows else None

    def get_by_id(self, guest_id: int) -> Guest | None:
        """Return the guest for an id, if present."""
        rows = run_query(
            self.client.table("guests")
            .select(_GUEST_COLUMNS)
            .eq("id", guest_id)
            .limit(1),
            "Guest lookup",
        )
        return _parse_guest(rows[0]) if rows else None

    def create_guest(self, email: str, full_name: str) -> Guest:
        """Create a guest row and return it."""
        rows = run_query(
            self.client.table("guests").insert(
                [{"email": email, "fullName": full_name}]
            ),
            "Guest insert",
        )
        return _parse_guest(first_row(rows, "Guest insert"))

    def update_profile(
        self,
        guest_id: int,
        nationality: str,
        country_flag: str,
        national_id: str,
    ) -> None:
        """Update the profile columns of a guest."""
        run_query(
            self.client.table("guests")
            .update(
                {
                    "nationality": nationality,
                    "countryFlag": country_flag,
                    "nationalID": national_id,
                }
            )
            .eq("id", guest_id),
            "Guest update",
        )


def _parse_guest(row: dict[str, object]) -> Guest:
    return Guest(
        id=int(row["id"]),
        email=str(row["email"]),
        full_name=str(row.get("fullName") or ""),
        nationality=row.get("nationality"),
        country_flag=row.get("countryFlag"),
        national_id=row.get("nationalID"),
    )
