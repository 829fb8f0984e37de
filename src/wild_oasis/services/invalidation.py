"""Which rendered views become stale after each mutation."""

import logging
from dataclasses import dataclass

from wild_oasis.domain.views import MutationKind, ViewId, ViewKind
from wild_oasis.services.cache import ViewCache

_logger = logging.getLogger(__name__)

INVALIDATION_POLICY: dict[MutationKind, tuple[ViewKind, ...]] = {
    MutationKind.PROFILE_UPDATE: (ViewKind.PROFILE,),
    MutationKind.BOOKING_CREATE: (ViewKind.CABIN_DETAIL,),
    MutationKind.BOOKING_UPDATE: (ViewKind.RESERVATIONS, ViewKind.RESERVATION_EDIT),
    MutationKind.BOOKING_DELETE: (ViewKind.RESERVATIONS,),
}


def stale_views(mutation: MutationKind, target_id: int | None = None) -> list[ViewId]:
    """Return the views a mutation invalidates, in policy order.

    Keyed views (cabin detail, reservation edit) are narrowed to ``target_id``:
    the cabin id for a create, the booking id for an update.
    """
    views: list[ViewId] = []
    for kind in INVALIDATION_POLICY[mutation]:
        if not kind.keyed:
            views.append(ViewId(kind))
            continue
        if target_id is None:
            raise ValueError(f"{kind.value} view requires a target id")
        views.append(ViewId(kind, target_id))
    return views


@dataclass
class InvalidationService:
    """Signals stale views to the rendering cache."""

    cache: ViewCache

    def mutation_applied(
        self, mutation: MutationKind, target_id: int | None = None
    ) -> frozenset[ViewId]:
        """Invalidate every view affected by a completed mutation."""
        views = stale_views(mutation, target_id)
        for view in views:
            self.cache.invalidate(view)
        _logger.info(
            "Invalidated views: mutation=%s views=%s",
            mutation.value,
            ",".join(str(view) for view in views),
        )
        return frozenset(views)
