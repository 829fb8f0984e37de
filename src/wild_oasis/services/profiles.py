"""Guest profile reads and updates."""

import logging
import re
from dataclasses import dataclass

from wild_oasis.domain.errors import (
    GuestUpdateFailed,
    NotFound,
    StoreError,
    StoreOperationFailed,
    ValidationFailed,
)
from wild_oasis.domain.models import Guest, GuestSession
from wild_oasis.domain.views import MutationKind
from wild_oasis.services.authorization import require_session
from wild_oasis.services.bookings import MutationOutcome
from wild_oasis.services.identity import GuestRepository
from wild_oasis.services.invalidation import InvalidationService

NATIONAL_ID_PATTERN = re.compile(r"^[a-zA-Z0-9]{6,12}$")

_logger = logging.getLogger(__name__)


def parse_nationality(raw: str) -> tuple[str, str]:
    """Split the ``<nationality>%<flag url>`` select value."""
    nationality, _, country_flag = raw.partition("%")
    return nationality, country_flag


@dataclass
class ProfileService:
    """Service for the signed-in guest's own profile."""

    repository: GuestRepository
    invalidation: InvalidationService

    def get_profile(self, session: GuestSession | None) -> Guest:
        """Return the guest record behind the session."""
        guest_session = require_session(session)
        try:
            guest = self.repository.get_by_id(guest_session.guest_id)
        except StoreError as exc:
            _logger.exception(
                "Failed to load guest: guest_id=%s", guest_session.guest_id
            )
            raise StoreOperationFailed("Guest could not be loaded") from exc
        if guest is None:
            raise NotFound("Guest not found")
        return guest

    def update_profile(
        self, session: GuestSession | None, national_id: str, nationality: str
    ) -> MutationOutcome:
        """Validate and store nationality and national id for the session's guest."""
        guest_session = require_session(session)
        if not NATIONAL_ID_PATTERN.fullmatch(national_id or ""):
            raise ValidationFailed(
                "National ID must be 6-12 characters long and contain only "
                "letters and numbers"
            )
        resolved_nationality, country_flag = parse_nationality(nationality)
        try:
            self.repository.update_profile(
                guest_session.guest_id,
                nationality=resolved_nationality,
                country_flag=country_flag,
                national_id=national_id,
            )
        except StoreError as exc:
            _logger.exception(
                "Failed to update guest: guest_id=%s", guest_session.guest_id
            )
            raise GuestUpdateFailed() from exc
        _logger.info("Updated profile: guest_id=%s", guest_session.guest_id)
        invalidated = self.invalidation.mutation_applied(MutationKind.PROFILE_UPDATE)
        return MutationOutcome(invalidated=invalidated)
