"""HTTP client for a guest's reservations, used by the optimistic list."""

from dataclasses import dataclass
from datetime import date

import httpx
from pydantic import BaseModel

from wild_oasis.services.reservations import ReservationsClient


class ReservationSummary(BaseModel):
    """Reservation row as served by the reservations view."""

    id: int
    cabin_id: int
    cabin_name: str | None = None
    start_date: date
    end_date: date
    num_nights: int
    num_guests: int
    total_price: float
    status: str


@dataclass
class HttpxReservationsClient(ReservationsClient):
    """Reservations client implemented with httpx.

    The http client must carry the guest's session cookie.
    """

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, base_url: str, session_cookie: str, cookie_name: str = "session"
    ) -> "HttpxReservationsClient":
        """Create a client authenticated with an existing session cookie."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(cookies={cookie_name: session_cookie}),
        )

    async def list_reservations(self) -> list[ReservationSummary]:
        """Fetch the reservations view."""
        response = await self.http_client.get(
            f"{self.base_url}/account/reservations", timeout=10
        )
        response.raise_for_status()
        return [
            ReservationSummary.model_validate(row)
            for row in response.json().get("bookings", [])
        ]

    async def delete_reservation(self, booking_id: int) -> None:
        """Delete a reservation; non-2xx responses raise."""
        response = await self.http_client.delete(
            f"{self.base_url}/account/reservations/{booking_id}", timeout=10
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
