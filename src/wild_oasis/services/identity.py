"""Maps OAuth identities to guest records."""

import logging
from dataclasses import dataclass
from typing import Protocol

from wild_oasis.domain.errors import SignInDenied, StoreError
from wild_oasis.domain.models import Guest, GuestSession, OAuthIdentity

_logger = logging.getLogger(__name__)


class GuestRepository(Protocol):
    """Persistence interface for guests."""

    def get_by_email(self, email: str) -> Guest | None:
        """Return the guest with this email, if present."""

    def get_by_id(self, guest_id: int) -> Guest | None:
        """Return the guest with this id, if present."""

    def create_guest(self, email: str, full_name: str) -> Guest:
        """Create and return a new guest."""

    def update_profile(
        self,
        guest_id: int,
        nationality: str,
        country_flag: str,
        national_id: str,
    ) -> None:
        """Update profile fields of a guest."""


@dataclass
class IdentityService:
    """Resolves the guest behind a sign-in, creating it on first visit."""

    repository: GuestRepository

    def sign_in(self, identity: OAuthIdentity) -> GuestSession:
        """Return a session for the identity; deny sign-in when the store fails."""
        try:
            guest = self.repository.get_by_email(identity.email)
            if guest is None:
                guest = self.repository.create_guest(
                    email=identity.email, full_name=identity.name
                )
                _logger.info("Created guest on first sign-in: guest_id=%s", guest.id)
        except StoreError as exc:
            _logger.exception("Sign-in failed: email=%s", identity.email)
            raise SignInDenied() from exc
        return GuestSession(guest_id=guest.id, email=guest.email, name=identity.name)
