"""Identifiers for cached rendered views and the mutations that stale them."""

from dataclasses import dataclass
from enum import Enum


class ViewKind(Enum):
    """Rendered views that can be cached."""

    PROFILE = "profile"
    CABIN_DETAIL = "cabin-detail"
    RESERVATIONS = "reservations"
    RESERVATION_EDIT = "reservation-edit"

    @property
    def keyed(self) -> bool:
        """Return True when the view is rendered per entity id."""
        return self in {ViewKind.CABIN_DETAIL, ViewKind.RESERVATION_EDIT}


@dataclass(frozen=True)
class ViewId:
    """A view kind, optionally narrowed to one entity."""

    kind: ViewKind
    key: int | None = None

    def __str__(self) -> str:
        if self.key is None:
            return self.kind.value
        return f"{self.kind.value}:{self.key}"


class MutationKind(Enum):
    """Mutations that invalidate rendered views."""

    PROFILE_UPDATE = "profile-update"
    BOOKING_CREATE = "booking-create"
    BOOKING_UPDATE = "booking-update"
    BOOKING_DELETE = "booking-delete"
