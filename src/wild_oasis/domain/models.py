"""Domain models for guests, cabins and bookings."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class BookingStatus(Enum):
    """Lifecycle states of a booking."""

    UNCONFIRMED = "unconfirmed"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"


@dataclass(frozen=True)
class GuestSession:
    """Authenticated identity attached to a single request."""

    guest_id: int
    email: str
    name: str


@dataclass(frozen=True)
class OAuthIdentity:
    """Identity returned by the OAuth provider after sign-in."""

    email: str
    name: str


@dataclass(frozen=True)
class Guest:
    """Registered guest stored in the database."""

    id: int
    email: str
    full_name: str
    nationality: str | None = None
    country_flag: str | None = None
    national_id: str | None = None


@dataclass(frozen=True)
class Cabin:
    """Rentable cabin."""

    id: int
    name: str
    max_capacity: int
    regular_price: float
    discount: float
    image: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class BookingSettings:
    """Hotel-wide booking limits and prices."""

    min_booking_length: int
    max_booking_length: int
    max_guests_per_booking: int
    breakfast_price: float


@dataclass(frozen=True)
class Booking:
    """Reservation of a cabin by a guest."""

    id: int
    guest_id: int
    cabin_id: int
    start_date: date
    end_date: date
    num_nights: int
    num_guests: int
    observations: str
    cabin_price: float
    extra_price: float
    total_price: float
    is_paid: bool
    has_breakfast: bool
    status: BookingStatus
    created_at: datetime | None = None
    cabin_name: str | None = None
    cabin_image: str | None = None


@dataclass(frozen=True)
class NewBooking:
    """Booking row to insert; the database assigns the id."""

    guest_id: int
    cabin_id: int
    start_date: date
    end_date: date
    num_nights: int
    num_guests: int
    observations: str
    cabin_price: float
    extra_price: float
    total_price: float
    is_paid: bool
    has_breakfast: bool
    status: BookingStatus
